from datetime import datetime
from pydantic import BaseModel, ConfigDict

class AlertEvent(BaseModel):
    alert_id: str
    tourist_id: str
    name: str
    message: str
    timestamp: datetime

    model_config = ConfigDict(frozen=True)
