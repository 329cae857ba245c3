from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from touristid.api.deps import get_store
from touristid.core.exceptions import NotFoundError
from touristid.models.alert import AlertEvent
from touristid.schemas import SOSRequest, SOSResponse
from touristid.services.store import SessionStore

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/sos", response_model=SOSResponse)
async def trigger_sos(request: SOSRequest, store: SessionStore = Depends(get_store)):
    tourist_id = request.tourist_id.strip()
    try:
        alert = store.sos.trigger(tourist_id)
    except NotFoundError as e:
        logger.warning(f"SOS rejected for {tourist_id!r}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return SOSResponse(status="success", message=alert.message, alert=alert)

@router.get("/sos/alerts", response_model=List[AlertEvent])
async def list_alerts(store: SessionStore = Depends(get_store)):
    return store.sos.alerts()
