"""Owner API authentication - Firebase ID token in the Authorization: Bearer header"""
import asyncio
import logging

from fastapi import Depends, HTTPException, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from firebase_admin import auth

from app.core.exceptions import ProviderError
from app.models.user import User
from app.services.auth_state import AuthState

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


async def verify_id_token(
    credentials: HTTPAuthorizationCredentials | None = Security(bearer_scheme),
) -> dict | None:
    """Decoded token claims, or None when no token was sent."""
    if credentials is None:
        return None
    loop = asyncio.get_running_loop()
    try:
        return await loop.run_in_executor(None, auth.verify_id_token, credentials.credentials)
    except (auth.InvalidIdTokenError, ValueError) as e:
        logger.warning(f"Rejected ID token: {e}")
        raise HTTPException(status_code=401, detail="Invalid ID token")
    except auth.CertificateFetchError as e:
        logger.error(f"Could not fetch token signing certificates: {e}")
        raise ProviderError("Authentication provider unavailable") from e


async def get_auth_state(claims: dict | None = Depends(verify_id_token)) -> AuthState:
    state = AuthState()
    state.handle_identity_change(claims)
    return state


async def get_current_user(state: AuthState = Depends(get_auth_state)) -> User:
    if state.user is None:
        raise HTTPException(status_code=401, detail="Not authenticated")
    return state.user
