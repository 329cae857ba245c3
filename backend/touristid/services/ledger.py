import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional

from touristid.models.checkin import CheckinEvent, CheckinStatus
from touristid.services.registry import Registry

logger = logging.getLogger(__name__)

class CheckinLedger:
    def __init__(self, registry: Registry, clock: Callable[[], datetime] = None):
        self.registry = registry
        self.clock = clock or registry.clock
        self._events: List[CheckinEvent] = []

    def __len__(self):
        return len(self._events)

    def check_in(self, tourist_id: str, location: str) -> CheckinEvent:
        """Record a check-in for an active tourist"""
        tourist = self.registry.require_active(tourist_id)

        event = CheckinEvent(
            event_id=str(uuid.uuid4()),
            tourist_id=tourist.id,
            name=tourist.full_name,
            location=location,
            timestamp=self.clock(),
        )
        self._events.append(event)
        tourist.checked_in = True

        logger.info(f"📍 {tourist.id} checked in at {location!r} (event {event.event_id})")
        return event

    def check_out(self, tourist_id: str, event_id: str) -> Optional[CheckinEvent]:
        """
        Close the open check-in identified by event_id.
        Returns None, changing nothing, when there is no such open event.
        """
        event = next(
            (e for e in self._events
             if e.tourist_id == tourist_id and e.event_id == event_id and e.is_open),
            None,
        )
        if event is None:
            logger.info(f"No open check-in {event_id} for {tourist_id}, nothing to do")
            return None

        event.status = CheckinStatus.CHECKED_OUT

        # Only the last open check-in clears the tourist's flag
        tourist = self.registry.find_by_id(tourist_id)
        if tourist and not any(e.tourist_id == tourist_id and e.is_open for e in self._events):
            tourist.checked_in = False

        logger.info(f"👋 {tourist_id} checked out of {event.location!r} (event {event_id})")
        return event

    def search(self, query: str = "") -> List[CheckinEvent]:
        """Events matching query, newest first"""
        return [e for e in reversed(self._events) if e.matches(query)]

    def events_for(self, tourist_id: str) -> List[CheckinEvent]:
        return [e for e in self._events if e.tourist_id == tourist_id]

    def count_open(self) -> int:
        return sum(1 for e in self._events if e.is_open)
