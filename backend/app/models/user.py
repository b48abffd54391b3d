import enum
from datetime import datetime

from pydantic import BaseModel


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(BaseModel):
    id: str
    email: str | None = None
    role: UserRole = UserRole.USER
    created_at: datetime
