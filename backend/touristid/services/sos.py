import logging
import uuid
from datetime import datetime
from typing import Callable, List

from touristid.models.alert import AlertEvent
from touristid.services.registry import Registry

logger = logging.getLogger(__name__)

class SOSService:
    def __init__(self, registry: Registry, clock: Callable[[], datetime] = None):
        self.registry = registry
        self.clock = clock or registry.clock
        self._alerts: List[AlertEvent] = []

    def __len__(self):
        return len(self._alerts)

    def trigger(self, tourist_id: str) -> AlertEvent:
        """Raise an SOS for an active tourist and keep a record of it"""
        tourist = self.registry.require_active(tourist_id)

        message = (
            f"SOS triggered for {tourist.full_name} (ID: {tourist.id})! "
            "Authorities have been notified and response initiated."
        )
        alert = AlertEvent(
            alert_id=str(uuid.uuid4()),
            tourist_id=tourist.id,
            name=tourist.full_name,
            message=message,
            timestamp=self.clock(),
        )
        self._alerts.append(alert)

        logger.warning(f"🚨 SOS for {tourist.id} ({tourist.full_name})")
        return alert

    def alerts(self) -> List[AlertEvent]:
        return list(self._alerts)
