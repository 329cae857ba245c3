import logging
import uuid
from datetime import datetime
from typing import Callable, List

from touristid.models.report import IncidentReport
from touristid.services.registry import Registry

logger = logging.getLogger(__name__)

class ReportLog:
    """Filed e-FIRs in filing order. Append only."""

    def __init__(self, registry: Registry, clock: Callable[[], datetime] = None):
        self.registry = registry
        self.clock = clock or registry.clock
        self._reports: List[IncidentReport] = []

    def __len__(self):
        return len(self._reports)

    def file(self, tourist_id: str, type: str, description: str, location: str, date: str) -> IncidentReport:
        tourist = self.registry.require_active(
            tourist_id, "Invalid or revoked Digital ID. Cannot file FIR."
        )

        report = IncidentReport(
            report_id=str(uuid.uuid4()),
            tourist_id=tourist.id,
            name=tourist.full_name,
            type=type,
            description=description,
            location=location,
            incident_date=date,
            report_timestamp=self.clock(),
        )
        self._reports.append(report)

        logger.info(f"📝 e-FIR ({type}) filed for {tourist.id}")
        return report

    def list(self) -> List[IncidentReport]:
        return list(self._reports)
