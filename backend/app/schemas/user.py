from typing import Optional

from pydantic import BaseModel


class UserResponse(BaseModel):
    id: str
    email: Optional[str]
    role: str
    created_at: str
