"""Ebook production project model."""

from datetime import datetime

from sqlalchemy import Index, text
from sqlmodel import Field, SQLModel

from src.press.models.base import utc_now
from src.press.models.enums import ProjectStatus

_ACTIVE_STATUS_SQL = "status IN ('in_progress', 'stalled')"


class Project(SQLModel, table=True):
    """A producer's work on a placeholder ebook."""

    __tablename__ = "projects"
    __table_args__ = (
        # One active project per ebook
        Index(
            "ux_projects_active_ebook_id",
            "ebook_id",
            unique=True,
            postgresql_where=text(_ACTIVE_STATUS_SQL),
            sqlite_where=text(_ACTIVE_STATUS_SQL),
        ),
    )

    id: int | None = Field(default=None, primary_key=True)
    ebook_id: int | None = Field(default=None, foreign_key="ebooks.id", index=True)
    status: str = Field(default=ProjectStatus.IN_PROGRESS.value, max_length=20, index=True)
    producer_name: str | None = Field(default=None, max_length=255)
    producer_email: str | None = Field(default=None, max_length=255)
    discussion_url: str | None = Field(default=None, max_length=512)
    vcs_url: str | None = Field(default=None, max_length=512)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
    started_at: datetime | None = Field(default=None)
    ended_at: datetime | None = Field(default=None)
    manager_user_id: int | None = Field(default=None, foreign_key="users.id", index=True)
    reviewer_user_id: int | None = Field(default=None, foreign_key="users.id", index=True)
    last_commit_at: datetime | None = Field(default=None)
    last_discussion_at: datetime | None = Field(default=None)

    @property
    def status_enum(self) -> ProjectStatus:
        """Get status as ProjectStatus enum."""
        return ProjectStatus(self.status)

    @property
    def url(self) -> str:
        return f"/projects/{self.id}"

    @property
    def last_activity_at(self) -> datetime | None:
        """Latest of the start, last commit and last discussion timestamps."""
        candidates = [
            t for t in (self.started_at, self.last_commit_at, self.last_discussion_at) if t
        ]
        return max(candidates, default=None)
