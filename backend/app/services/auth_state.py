"""
Auth state - mirrors the auth provider's signed-in identity.

The provider notifies with decoded Firebase ID token claims (or None when
signed out). Roles are not read back from Firestore: every identity gets
the default "user" role.
"""
from datetime import datetime, timezone
from typing import Any, Mapping

from app.core.state import Observable
from app.models.user import User, UserRole


class AuthState(Observable):
    def __init__(self) -> None:
        super().__init__()
        self.user: User | None = None
        self.is_loading: bool = True

    def handle_identity_change(self, identity: Mapping[str, Any] | None) -> None:
        if identity:
            self.user = User(
                id=identity["uid"],
                email=identity.get("email"),
                role=UserRole.USER,
                created_at=datetime.now(timezone.utc),
            )
        else:
            self.user = None
        self.is_loading = False
        self._notify()
