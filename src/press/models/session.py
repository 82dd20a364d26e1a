"""Login session model."""

from datetime import datetime

from sqlmodel import Field, SQLModel

from src.press.models.base import utc_now


class Session(SQLModel, table=True):
    """A durable login session, reused across logins by the same user."""

    __tablename__ = "sessions"

    id: str = Field(primary_key=True, max_length=36)
    user_id: int = Field(foreign_key="users.id", ondelete="CASCADE", unique=True, index=True)
    created_at: datetime = Field(default_factory=utc_now)

    @property
    def url(self) -> str:
        return f"/sessions/{self.id}"
