from datetime import datetime
from enum import Enum
from pydantic import BaseModel

class CheckinStatus(str, Enum):
    CHECKED_IN = "Checked-in"
    CHECKED_OUT = "Checked-out"

class CheckinEvent(BaseModel):
    event_id: str
    tourist_id: str
    name: str  # Copied from the identity record at check-in time
    location: str
    timestamp: datetime
    status: CheckinStatus = CheckinStatus.CHECKED_IN

    @property
    def is_open(self) -> bool:
        return self.status == CheckinStatus.CHECKED_IN

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over name, tourist id and location"""
        q = query.lower()
        return (
            q in self.name.lower()
            or q in self.tourist_id.lower()
            or q in self.location.lower()
        )
