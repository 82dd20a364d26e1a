"""User model."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, SQLModel

from src.press.models.base import utc_now


class User(SQLModel, table=True):
    """A registered user: producers, managers, reviewers, and anyone who can log in."""

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    uuid: UUID = Field(default_factory=uuid4, unique=True, index=True)
    email: str | None = Field(default=None, max_length=255, unique=True, index=True)
    name: str | None = Field(default=None, max_length=255)
    password_hash: str | None = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
