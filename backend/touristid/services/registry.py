import logging
from datetime import datetime
from typing import Callable, List, Optional

from touristid.core.exceptions import NotFoundError, ValidationError
from touristid.models.tourist import REQUIRED_FIELDS, IdentityRecord, RegistrationFields
from touristid.services.id_generator import SequentialIdGenerator

logger = logging.getLogger(__name__)

class Registry:
    """Issued Digital IDs, in issue order. Records are never removed."""

    def __init__(self, id_generator: Callable = None, clock: Callable[[], datetime] = None):
        self.id_generator = id_generator or SequentialIdGenerator()
        self.clock = clock or (lambda: datetime.now().astimezone())
        self._records: List[IdentityRecord] = []

    def __len__(self):
        return len(self._records)

    @staticmethod
    def missing_fields(fields: RegistrationFields) -> List[str]:
        """Names of required fields that are blank"""
        return [name for name in REQUIRED_FIELDS if not getattr(fields, name).strip()]

    def register(self, fields: RegistrationFields, photo: Optional[str] = None) -> IdentityRecord:
        missing = self.missing_fields(fields)
        if missing:
            raise ValidationError(missing)

        tourist_id = self.id_generator(lambda candidate: self.find_by_id(candidate) is not None)
        record = IdentityRecord(
            **fields.model_dump(),
            id=tourist_id,
            photo=photo,
            issued_at=self.clock(),
        )
        self._records.append(record)

        logger.info(f"✅ Issued Digital ID {record.id} for {record.full_name}")
        return record

    def find_by_id(self, tourist_id: str) -> Optional[IdentityRecord]:
        return next((r for r in self._records if r.id == tourist_id), None)

    def find_active_by_id(self, tourist_id: str) -> Optional[IdentityRecord]:
        return next((r for r in self._records if r.id == tourist_id and not r.revoked), None)

    def require_active(self, tourist_id: str, message: str = None) -> IdentityRecord:
        """Active record for tourist_id, or NotFoundError"""
        record = self.find_active_by_id(tourist_id)
        if record is None:
            if message:
                raise NotFoundError(tourist_id, message)
            raise NotFoundError(tourist_id)
        return record

    def revoke(self, tourist_id: str) -> IdentityRecord:
        record = self.find_by_id(tourist_id)
        if record is None:
            raise NotFoundError(tourist_id, "Tourist ID not found.")
        if not record.revoked:
            record.revoked = True
            logger.info(f"🚫 Revoked Digital ID {tourist_id}")
        return record

    def list(self) -> List[IdentityRecord]:
        return list(self._records)

    def latest(self) -> Optional[IdentityRecord]:
        return self._records[-1] if self._records else None
