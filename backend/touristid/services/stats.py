from pydantic import BaseModel

from touristid.services.ledger import CheckinLedger
from touristid.services.registry import Registry

class Totals(BaseModel):
    issued: int
    active: int
    checked_in: int

class StatsAggregator:
    def __init__(self, registry: Registry, ledger: CheckinLedger):
        self.registry = registry
        self.ledger = ledger

    def totals(self) -> Totals:
        """Counts over current state. Recomputed on every call."""
        records = self.registry.list()
        return Totals(
            issued=len(records),
            active=sum(1 for r in records if not r.revoked),
            checked_in=self.ledger.count_open(),
        )
