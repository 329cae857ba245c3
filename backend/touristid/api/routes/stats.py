from fastapi import APIRouter, Depends

from touristid.api.deps import get_store
from touristid.services.stats import Totals
from touristid.services.store import SessionStore

router = APIRouter()

@router.get("/stats", response_model=Totals)
async def get_stats(store: SessionStore = Depends(get_store)):
    """Issued, active and currently checked-in counts"""
    return store.stats.totals()
