"""Session schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.press.schemas.user import UserRead


class LoginRequest(BaseModel):
    """Identifier is an email address or a user UUID."""

    identifier: str = Field(min_length=1, max_length=255)
    password: str | None = Field(default=None, max_length=1000)


class SessionRead(BaseModel):
    id: str
    user_id: int
    url: str
    created_at: datetime

    model_config = {"from_attributes": True}


class LoginResponse(BaseModel):
    session: SessionRead
    user: UserRead
