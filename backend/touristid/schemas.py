from pydantic import BaseModel
from typing import Optional, List

from touristid.models.alert import AlertEvent
from touristid.models.checkin import CheckinEvent
from touristid.models.report import IncidentReport
from touristid.models.tourist import IdentityRecord

# Requests

class CheckinRequest(BaseModel):
    tourist_id: str
    location: str = ""

class CheckoutRequest(BaseModel):
    tourist_id: str

class ReportRequest(BaseModel):
    tourist_id: str
    type: str
    description: str = ""
    location: str = ""
    date: str = ""

class SOSRequest(BaseModel):
    tourist_id: str

# Responses

class TouristSummary(BaseModel):
    id: str
    full_name: str
    check_in_date: str
    status: str  # "Active" or "Revoked"
    checked_in: bool

    @classmethod
    def from_record(cls, record: IdentityRecord) -> "TouristSummary":
        return cls(
            id=record.id,
            full_name=record.full_name,
            check_in_date=record.check_in_date,
            status="Revoked" if record.revoked else "Active",
            checked_in=record.checked_in,
        )

class RegistrationResponse(BaseModel):
    status: str
    message: str
    tourist: IdentityRecord

class RevokeResponse(BaseModel):
    status: str
    message: str
    tourist: TouristSummary

class CheckinResponse(BaseModel):
    status: str
    message: str
    event: CheckinEvent

class CheckoutResponse(BaseModel):
    checked_out: bool
    event: Optional[CheckinEvent] = None

class CheckinListResponse(BaseModel):
    total: int
    results: List[CheckinEvent]

class ReportResponse(BaseModel):
    status: str
    message: str
    report: IncidentReport

class SOSResponse(BaseModel):
    status: str
    message: str
    alert: AlertEvent
