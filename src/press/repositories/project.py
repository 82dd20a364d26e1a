"""Repository for Project entity."""

from sqlmodel import col, select

from src.press.models import Project, ProjectStatus
from src.press.repositories.base import BaseRepository

_ACTIVE_STATUSES = [s.value for s in ProjectStatus.active()]


class ProjectRepository(BaseRepository[Project]):
    """Repository for Project entity."""

    model = Project

    async def list_by_status(self, status: ProjectStatus) -> list[Project]:
        """Projects with a status, most recently started first."""
        result = await self.session.execute(
            select(Project)
            .where(Project.status == status.value)
            .order_by(col(Project.started_at).desc())
        )
        return list(result.scalars().all())

    async def list_active_by_manager(self, user_id: int) -> list[Project]:
        """In-progress and stalled projects managed by a user."""
        result = await self.session.execute(
            select(Project)
            .where(
                Project.manager_user_id == user_id,
                col(Project.status).in_(_ACTIVE_STATUSES),
            )
            .order_by(col(Project.started_at).desc())
        )
        return list(result.scalars().all())

    async def list_active_by_reviewer(self, user_id: int) -> list[Project]:
        """In-progress and stalled projects reviewed by a user."""
        result = await self.session.execute(
            select(Project)
            .where(
                Project.reviewer_user_id == user_id,
                col(Project.status).in_(_ACTIVE_STATUSES),
            )
            .order_by(col(Project.started_at).desc())
        )
        return list(result.scalars().all())

    async def get_active_for_ebook(self, ebook_id: int) -> Project | None:
        """The ebook's in-progress or stalled project, if any."""
        result = await self.session.execute(
            select(Project)
            .where(
                Project.ebook_id == ebook_id,
                col(Project.status).in_(_ACTIVE_STATUSES),
            )
            .order_by(col(Project.id))
            .limit(1)
        )
        return result.scalars().first()
