from fastapi import APIRouter, Depends
import logging

from touristid.api.deps import get_store
from touristid.core.config import settings
from touristid.services.store import SessionStore

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/health")
async def health_check(store: SessionStore = Depends(get_store)):
    """Health check endpoint"""
    return {
        "status": "healthy",
        "storage": "in-memory",
        "service": "tourist-digital-id",
        "version": settings.VERSION,
        "collections": store.sizes()
    }
