"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field

from src.press.models.enums import ProjectStatus
from src.press.schemas.forms import FormModel


class ProjectForm(FormModel):
    """Fields a manager can submit when opening or editing a project."""

    producer_name: str | None = Field(default=None, max_length=255)
    producer_email: str | None = Field(default=None, max_length=255)
    discussion_url: str | None = Field(default=None, max_length=512)
    status: ProjectStatus | None = None
    vcs_url: str | None = Field(default=None, max_length=512)
    started_at: datetime | None = None
    ended_at: datetime | None = None
    manager_user_id: int | None = None
    reviewer_user_id: int | None = None

    def apply_to(self, entity):
        super().apply_to(entity)
        # Table column holds the plain string
        if "status" in self.model_fields_set and self.status is not None:
            entity.status = self.status.value
        return entity


class ProjectCreate(ProjectForm):
    ebook_id: int


class ProjectRead(BaseModel):
    id: int
    ebook_id: int
    status: ProjectStatus
    producer_name: str
    producer_email: str | None
    discussion_url: str | None
    vcs_url: str
    url: str
    created_at: datetime
    updated_at: datetime
    started_at: datetime
    ended_at: datetime | None
    manager_user_id: int
    reviewer_user_id: int
    last_commit_at: datetime | None
    last_discussion_at: datetime | None
    last_activity_at: datetime

    model_config = {"from_attributes": True}
