from fastapi import APIRouter, UploadFile, File, Form, Depends, HTTPException
from pydantic import TypeAdapter, ValidationError as SchemaError
from typing import List, Optional
import logging
import time

from touristid.api.deps import get_store
from touristid.core.exceptions import EncodingError, ValidationError
from touristid.models.tourist import EmergencyContact, ItineraryStop, RegistrationFields
from touristid.schemas import RegistrationResponse
from touristid.services.store import SessionStore
from touristid.utils.image import encode_photo

router = APIRouter()
logger = logging.getLogger(__name__)

itinerary_adapter = TypeAdapter(List[ItineraryStop])
contacts_adapter = TypeAdapter(List[EmergencyContact])

def parse_rows(adapter: TypeAdapter, raw: str, field: str) -> list:
    """Parse a JSON-encoded list of dynamic form rows"""
    try:
        return adapter.validate_json(raw) if raw.strip() else []
    except SchemaError as e:
        logger.warning(f"Malformed {field}: {e.error_count()} error(s)")
        raise HTTPException(status_code=422, detail=f"Malformed {field}. Expected a JSON list.")

@router.post("/register", response_model=RegistrationResponse)
async def register_tourist(
    full_name: str = Form(""),
    email: str = Form(""),
    phone: str = Form(""),
    date_of_birth: str = Form(""),
    nationality: str = Form(""),
    entry_point: str = Form(""),
    document_type: str = Form(""),
    document_number: str = Form(""),
    check_in_date: str = Form(""),
    check_out_date: str = Form(""),
    itinerary: str = Form(""),
    emergency_contacts: str = Form(""),
    photo: Optional[UploadFile] = File(None),
    store: SessionStore = Depends(get_store)
):
    """
    Register a tourist and issue a Digital ID.
    """
    start_time = time.time()

    fields = RegistrationFields(
        full_name=full_name,
        email=email,
        phone=phone,
        date_of_birth=date_of_birth,
        nationality=nationality,
        entry_point=entry_point,
        document_type=document_type,
        document_number=document_number,
        check_in_date=check_in_date,
        check_out_date=check_out_date,
        itinerary=parse_rows(itinerary_adapter, itinerary, "itinerary"),
        emergency_contacts=parse_rows(contacts_adapter, emergency_contacts, "emergency_contacts"),
    )

    try:
        # 1. Required fields, before touching the photo
        missing = store.registry.missing_fields(fields)
        if missing:
            raise ValidationError(missing)

        # 2. Photo to data URL
        content = await photo.read() if photo else None
        photo_url = encode_photo(content)

        # 3. Issue the ID
        record = store.registry.register(fields, photo=photo_url)

        processing_time = time.time() - start_time
        logger.info(f"Registration for {record.id} completed in {processing_time:.2f}s")

        return RegistrationResponse(
            status="success",
            message=f"Registration successful! Digital ID {record.id} issued.",
            tourist=record,
        )

    except ValidationError as ve:
        logger.warning(f"Registration rejected, missing: {', '.join(ve.missing)}")
        raise HTTPException(status_code=422, detail={"message": ve.message, "missing": ve.missing})
    except EncodingError as ee:
        raise HTTPException(status_code=400, detail=ee.message)
    except Exception as e:
        logger.error(f"Registration error: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail="Registration failed. Please try again.")
