import io
import os
import struct
import zlib
from datetime import datetime, timedelta, timezone

# No rotating log file during tests
os.environ.setdefault("LOG_FILE", "")

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from touristid.models.tourist import RegistrationFields
from touristid.services.store import SessionStore


class FakeClock:
    """Deterministic clock, one minute per call"""

    def __init__(self, start=datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self):
        current = self.now
        self.now += timedelta(minutes=1)
        return current


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def store(clock):
    return SessionStore(clock=clock)


@pytest.fixture
def asha_fields():
    return RegistrationFields(
        full_name="Asha Rao",
        email="a@x.com",
        phone="1",
        date_of_birth="1990-01-01",
        nationality="IN",
        entry_point="DEL",
        document_type="Passport",
        document_number="P1",
        check_in_date="2024-01-01",
        check_out_date="2024-01-10",
    )


@pytest.fixture
def asha_form(asha_fields):
    """The same registration as multipart form data"""
    return {
        name: value
        for name, value in asha_fields.model_dump().items()
        if isinstance(value, str)
    }


@pytest.fixture
def registered(store, asha_fields):
    return store.registry.register(asha_fields)


@pytest.fixture
def png_bytes():
    buffer = io.BytesIO()
    Image.new("RGB", (32, 32), color=(200, 30, 30)).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def client():
    from touristid.main import app

    with TestClient(app) as test_client:
        yield test_client


def png_chunk(kind, data):
    body = kind + data
    return struct.pack(">I", len(data)) + body + struct.pack(">I", zlib.crc32(body) & 0xFFFFFFFF)


@pytest.fixture
def huge_png_bytes():
    """A tiny PNG whose header claims 20000x20000 pixels"""
    header = struct.pack(">IIBBBBB", 20000, 20000, 8, 2, 0, 0, 0)
    return b"\x89PNG\r\n\x1a\n" + png_chunk(b"IHDR", header) + png_chunk(b"IEND", b"")
