from typing import Optional
from pydantic import BaseModel

from touristid.models.tourist import IdentityRecord

AUTHORITY = "Smart Tourist Authority"
CARD_TITLE = "Digital Tourist ID"
CARD_NOTE = "This digital ID verifies safe passage and registration with local authorities."

class IDCard(BaseModel):
    authority: str = AUTHORITY
    title: str = CARD_TITLE
    id: str
    name: str
    date_of_birth: str
    nationality: str
    issued: str
    expires: str
    photo: Optional[str] = None
    status: str
    checked_in: bool
    note: str = CARD_NOTE

def build_card(record: IdentityRecord) -> IDCard:
    """Display projection of a record. Casing changes stay on the card."""
    return IDCard(
        id=record.id,
        name=record.full_name.upper(),
        date_of_birth=record.date_of_birth,
        nationality=record.nationality.upper(),
        issued=record.check_in_date,
        expires=record.check_out_date,
        photo=record.photo,
        status="REVOKED" if record.revoked else "ACTIVE",
        checked_in=record.checked_in,
    )
