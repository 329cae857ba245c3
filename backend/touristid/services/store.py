import logging
from datetime import datetime
from typing import Callable

from touristid.core.config import Settings, settings as default_settings
from touristid.services.id_generator import build_id_generator
from touristid.services.ledger import CheckinLedger
from touristid.services.registry import Registry
from touristid.services.reports import ReportLog
from touristid.services.sos import SOSService
from touristid.services.stats import StatsAggregator

logger = logging.getLogger(__name__)

class SessionStore:
    """
    Owns every collection for the lifetime of the process.
    Created once at startup and handed to request handlers.
    """

    def __init__(self, id_generator: Callable = None, clock: Callable[[], datetime] = None):
        self.registry = Registry(id_generator=id_generator, clock=clock)
        self.ledger = CheckinLedger(self.registry)
        self.reports = ReportLog(self.registry)
        self.sos = SOSService(self.registry)
        self.stats = StatsAggregator(self.registry, self.ledger)

    def sizes(self) -> dict:
        return {
            "tourists": len(self.registry),
            "checkins": len(self.ledger),
            "reports": len(self.reports),
            "alerts": len(self.sos),
        }

def create_store(config: Settings = None) -> SessionStore:
    config = config or default_settings
    id_generator = build_id_generator(config.ID_GENERATOR, config.ID_PREFIX)
    logger.info(f"📦 Session store ready ({config.ID_GENERATOR} IDs, prefix {config.ID_PREFIX})")
    return SessionStore(id_generator=id_generator)
