from fastapi import APIRouter, Depends, HTTPException, status
import logging

from touristid.api.deps import get_store
from touristid.core.exceptions import NotFoundError
from touristid.schemas import (
    CheckinListResponse,
    CheckinRequest,
    CheckinResponse,
    CheckoutRequest,
    CheckoutResponse,
)
from touristid.services.store import SessionStore

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/checkins", response_model=CheckinResponse)
async def check_in(request: CheckinRequest, store: SessionStore = Depends(get_store)):
    tourist_id = request.tourist_id.strip()
    try:
        event = store.ledger.check_in(tourist_id, request.location.strip())
    except NotFoundError as e:
        logger.warning(f"Check-in rejected for {tourist_id!r}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return CheckinResponse(status="success", message="Check-in successful!", event=event)

@router.post("/checkins/{event_id}/checkout", response_model=CheckoutResponse)
async def check_out(event_id: str, request: CheckoutRequest, store: SessionStore = Depends(get_store)):
    """
    Close an open check-in. Unknown or already closed events are a no-op.
    """
    event = store.ledger.check_out(request.tourist_id.strip(), event_id)
    return CheckoutResponse(checked_out=event is not None, event=event)

@router.get("/checkins", response_model=CheckinListResponse)
async def search_checkins(search: str = "", store: SessionStore = Depends(get_store)):
    """
    Check-ins, newest first.
    Optional: ?search=delhi to filter by name, ID or location.
    """
    results = store.ledger.search(search)
    return CheckinListResponse(total=len(results), results=results)
