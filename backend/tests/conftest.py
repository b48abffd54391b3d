"""
Shared fixtures.

- fake_db: in-memory Firestore async client (tests/fakes.py)
- repo: ClinicRepository bound to fake_db with a fresh list state
- client: FastAPI TestClient with Firestore and token verification overridden.
  Send "Authorization: Bearer <uid>" to act as that user.
"""
from datetime import datetime, timezone

import pytest
from fastapi import Security
from fastapi.testclient import TestClient

from app.core.firebase import get_db
from app.core.security import bearer_scheme, verify_id_token
from app.core.state import ClinicListState
from app.main import app
from app.models.user import User
from app.services.clinic_repository import ClinicRepository
from tests.fakes import FakeFirestore


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def fake_db():
    return FakeFirestore()


@pytest.fixture
def owner():
    return User(id="owner-1", email="owner@example.com", created_at=datetime.now(timezone.utc))


@pytest.fixture
def repo(fake_db):
    return ClinicRepository(fake_db, ClinicListState(), collection="clinics")


@pytest.fixture
def client(fake_db):
    async def fake_verify(credentials=Security(bearer_scheme)):
        if credentials is None:
            return None
        uid = credentials.credentials
        return {"uid": uid, "email": f"{uid}@example.com"}

    app.dependency_overrides[get_db] = lambda: fake_db
    app.dependency_overrides[verify_id_token] = fake_verify
    # no context manager: the lifespan (Firebase init) does not run
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer owner-1"}
