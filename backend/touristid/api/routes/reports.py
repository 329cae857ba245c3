from fastapi import APIRouter, Depends, HTTPException, status
from typing import List
import logging

from touristid.api.deps import get_store
from touristid.core.exceptions import NotFoundError
from touristid.models.report import IncidentReport
from touristid.schemas import ReportRequest, ReportResponse
from touristid.services.store import SessionStore

router = APIRouter()
logger = logging.getLogger(__name__)

@router.post("/reports", response_model=ReportResponse)
async def file_report(request: ReportRequest, store: SessionStore = Depends(get_store)):
    """
    File an e-FIR for a registered tourist
    """
    tourist_id = request.tourist_id.strip()
    try:
        report = store.reports.file(
            tourist_id,
            type=request.type,
            description=request.description.strip(),
            location=request.location.strip(),
            date=request.date,
        )
    except NotFoundError as e:
        logger.warning(f"e-FIR rejected for {tourist_id!r}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

    return ReportResponse(
        status="success",
        message=f"e-FIR ({report.type}) submitted successfully for ID: {report.tourist_id}.",
        report=report,
    )

@router.get("/reports", response_model=List[IncidentReport])
async def list_reports(store: SessionStore = Depends(get_store)):
    return store.reports.list()
