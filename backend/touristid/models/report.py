from datetime import datetime
from pydantic import BaseModel, ConfigDict

class IncidentReport(BaseModel):
    """Electronic First Information Report (e-FIR)"""
    report_id: str
    tourist_id: str
    name: str
    type: str
    description: str
    location: str
    incident_date: str
    report_timestamp: datetime

    model_config = ConfigDict(frozen=True)
