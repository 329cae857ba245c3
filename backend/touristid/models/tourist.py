from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

REQUIRED_FIELDS = (
    "full_name",
    "email",
    "phone",
    "date_of_birth",
    "nationality",
    "entry_point",
    "document_type",
    "document_number",
    "check_in_date",
    "check_out_date",
)

class ItineraryStop(BaseModel):
    location: str = ""
    date: str = ""
    type: str = ""  # Hotel, Sightseeing, Restaurant, Transit

class EmergencyContact(BaseModel):
    name: str = ""
    relationship: str = ""
    phone: str = ""

class RegistrationFields(BaseModel):
    """Fields submitted with a registration. Blank strings are allowed here; the registry rejects them."""
    full_name: str = ""
    email: str = ""
    phone: str = ""
    date_of_birth: str = ""
    nationality: str = ""
    entry_point: str = ""
    document_type: str = ""
    document_number: str = ""
    check_in_date: str = ""
    check_out_date: str = ""
    itinerary: List[ItineraryStop] = Field(default_factory=list)
    emergency_contacts: List[EmergencyContact] = Field(default_factory=list)

class IdentityRecord(RegistrationFields):
    id: str
    photo: Optional[str] = None  # data:<mime>;base64,...
    revoked: bool = False
    checked_in: bool = False
    issued_at: datetime

    @property
    def is_active(self) -> bool:
        return not self.revoked

    def __repr__(self):
        return f"<IdentityRecord {self.id} ({self.full_name})>"
