import pytest
from fastapi import HTTPException
from fastapi.security import HTTPAuthorizationCredentials

from app.core import security
from app.core.exceptions import ProviderError

pytestmark = pytest.mark.anyio


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


async def test_no_credentials_means_anonymous():
    assert await security.verify_id_token(None) is None


async def test_valid_token_returns_claims(monkeypatch):
    monkeypatch.setattr(security.auth, "verify_id_token", lambda token: {"uid": token})

    assert await security.verify_id_token(bearer("owner-1")) == {"uid": "owner-1"}


async def test_invalid_token_is_unauthorized(monkeypatch):
    def reject(token):
        raise security.auth.InvalidIdTokenError("bad signature")

    monkeypatch.setattr(security.auth, "verify_id_token", reject)

    with pytest.raises(HTTPException) as exc_info:
        await security.verify_id_token(bearer("forged"))
    assert exc_info.value.status_code == 401


async def test_certificate_fetch_failure_is_provider_error(monkeypatch):
    def unreachable(token):
        raise security.auth.CertificateFetchError("connection reset", cause=None)

    monkeypatch.setattr(security.auth, "verify_id_token", unreachable)

    with pytest.raises(ProviderError):
        await security.verify_id_token(bearer("owner-1"))
