from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from touristid.api.deps import get_store
from touristid.core.exceptions import NotFoundError
from touristid.models.tourist import IdentityRecord
from touristid.schemas import RevokeResponse, TouristSummary
from touristid.services.id_card import IDCard, build_card
from touristid.services.store import SessionStore

router = APIRouter()
logger = logging.getLogger(__name__)

def lookup(store: SessionStore, tourist_id: str) -> IdentityRecord:
    record = store.registry.find_by_id(tourist_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tourist ID not found.")
    return record

@router.get("/tourists", response_model=List[TouristSummary])
async def list_tourists(store: SessionStore = Depends(get_store)):
    """All issued Digital IDs, in issue order"""
    return [TouristSummary.from_record(r) for r in store.registry.list()]

# Declared before /tourists/{tourist_id}/card so "latest" is not taken for an ID
@router.get("/tourists/latest/card", response_model=IDCard)
async def latest_card(store: SessionStore = Depends(get_store)):
    """ID card of the most recently registered tourist"""
    record = store.registry.latest()
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="No Digital IDs have been registered yet. Please register a tourist first."
        )
    return build_card(record)

@router.get("/tourists/{tourist_id}", response_model=IdentityRecord)
async def get_tourist(tourist_id: str, store: SessionStore = Depends(get_store)):
    return lookup(store, tourist_id)

@router.get("/tourists/{tourist_id}/card", response_model=IDCard)
async def get_card(tourist_id: str, store: SessionStore = Depends(get_store)):
    return build_card(lookup(store, tourist_id))

@router.post("/tourists/{tourist_id}/revoke", response_model=RevokeResponse)
async def revoke_tourist(tourist_id: str, store: SessionStore = Depends(get_store)):
    """Revoke a Digital ID. Revoking twice is harmless."""
    try:
        record = store.registry.revoke(tourist_id)
    except NotFoundError as e:
        logger.warning(f"Revoke failed: {e.tourist_id} not found")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return RevokeResponse(
        status="success",
        message=f"Digital ID {record.id} revoked.",
        tourist=TouristSummary.from_record(record),
    )
