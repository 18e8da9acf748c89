import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from packages.mip_core.dto import BaseDTO
from .security import utc_now


class User(BaseDTO):
    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    email: str
    name: Optional[str] = None
    password_hash: str = Field(..., exclude=True)
    created_at: datetime = Field(default_factory=utc_now)


class AuthToken(BaseDTO):
    token: str
    user_id: str
    expires_at: datetime

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or utc_now())
