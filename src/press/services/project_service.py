"""Ebook project service - validation, persistence and activity sync."""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.press.core.exceptions import (
    AppException,
    EbookIsNotAPlaceholderError,
    EbookNotFoundError,
    InvalidProjectError,
    ProjectExistsError,
    ProjectNotFoundError,
    UserNotFoundError,
)
from src.press.core.formatter import trim_to_none
from src.press.core.integrations import DiscussionClient, GitHubClient
from src.press.core.logging import get_logger
from src.press.core.validation import ErrorCode, ValidationResult
from src.press.core.validators import (
    canonicalize_discussion_url,
    is_discussion_url,
    is_github_repo_url,
    is_github_url,
    normalize_vcs_url,
)
from src.press.models import Project, ProjectStatus
from src.press.models.base import to_naive_utc, utc_now
from src.press.repositories import EbookRepository, ProjectRepository
from src.press.services.user_service import UserService

logger = get_logger(__name__)

_STATUS_VALUES = {s.value for s in ProjectStatus}


class ProjectService:
    """Ebook project service.

    External clients are injectable so tests can swap in mock transports.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        user_service: UserService,
        ebook_repo: EbookRepository,
        session: AsyncSession,
        github_client: GitHubClient | None = None,
        discussion_client: DiscussionClient | None = None,
    ):
        self.project_repo = project_repo
        self.user_service = user_service
        self.ebook_repo = ebook_repo
        self.session = session
        self.github_client = github_client or GitHubClient()
        self.discussion_client = discussion_client or DiscussionClient()

    async def validate(self, project: Project) -> ValidationResult:
        """Check every field of a project, normalizing them in place.

        All problems are collected before returning. If the producer's email
        belongs to a known user with a name, that name replaces the submitted
        producer name.
        """
        result = ValidationResult()

        if project.ebook_id is None:
            result.add("ebook_id", ErrorCode.REQUIRED, "An ebook is required.")

        if project.status not in _STATUS_VALUES:
            result.add("status", ErrorCode.INVALID_FORMAT, "Invalid project status.")

        project.producer_email = trim_to_none(project.producer_email)
        if project.producer_email is not None:
            try:
                producer = await self.user_service.get_by_email(project.producer_email)
            except UserNotFoundError:
                pass
            else:
                if producer.name is not None:
                    project.producer_name = producer.name

        project.producer_name = trim_to_none(project.producer_name)
        if project.producer_name is None:
            result.add("producer_name", ErrorCode.REQUIRED, "A producer name is required.")

        project.discussion_url = trim_to_none(project.discussion_url)
        if project.discussion_url is not None:
            # Links to a single message or with a query string become the base thread URL
            project.discussion_url = canonicalize_discussion_url(project.discussion_url)

        project.vcs_url = normalize_vcs_url(project.vcs_url) or None
        if project.vcs_url is None:
            result.add("vcs_url", ErrorCode.REQUIRED, "A VCS URL is required.")
        elif not is_github_repo_url(project.vcs_url):
            result.add("vcs_url", ErrorCode.INVALID_FORMAT, "Invalid VCS URL.")

        if project.manager_user_id is None:
            result.add("manager_user_id", ErrorCode.REQUIRED, "A manager is required.")
        elif not await self._user_exists(project.manager_user_id):
            result.add("manager_user_id", ErrorCode.NOT_FOUND, "Manager user not found.")

        if project.reviewer_user_id is None:
            result.add("reviewer_user_id", ErrorCode.REQUIRED, "A reviewer is required.")
        elif not await self._user_exists(project.reviewer_user_id):
            result.add("reviewer_user_id", ErrorCode.NOT_FOUND, "Reviewer user not found.")

        # Columns are naive UTC; offsets from clients are folded in here
        if project.started_at is not None:
            project.started_at = to_naive_utc(project.started_at)
        if project.ended_at is not None:
            project.ended_at = to_naive_utc(project.ended_at)

        if project.started_at is None:
            result.add("started_at", ErrorCode.REQUIRED, "A start timestamp is required.")

        return result

    async def _user_exists(self, user_id: int) -> bool:
        try:
            await self.user_service.get(user_id)
        except UserNotFoundError:
            return False
        return True

    async def create(self, project: Project) -> Project:
        """Validate, sync activity timestamps, and insert a project.

        Activity sync is best effort: a failing GitHub or Google Groups call
        is logged and creation continues.

        Raises:
            InvalidProjectError: With every field error found.
            EbookNotFoundError: The ebook does not exist.
            EbookIsNotAPlaceholderError: The ebook is already released.
            ProjectExistsError: The ebook already has an active project.
        """
        result = await self.validate(project)
        if not result.is_valid:
            raise InvalidProjectError(result)

        try:
            await self.fetch_last_discussion_timestamp(project)
        except AppException as e:
            logger.warning("Discussion sync failed during project creation", error=e.message)

        try:
            await self.fetch_latest_commit_timestamp(project)
        except AppException as e:
            logger.warning("Commit sync failed during project creation", error=e.message)

        # Producers sometimes commit before the project is approved
        if (
            project.last_commit_at is not None
            and project.started_at is not None
            and project.started_at > project.last_commit_at
        ):
            project.started_at = project.last_commit_at

        ebook_id = project.ebook_id
        if await self.ebook_repo.get_by_id(ebook_id) is None:
            raise EbookNotFoundError()

        if not await self.ebook_repo.is_placeholder(ebook_id):  # type: ignore[arg-type]
            raise EbookIsNotAPlaceholderError()

        if await self.project_repo.get_active_for_ebook(ebook_id) is not None:  # type: ignore[arg-type]
            raise ProjectExistsError()

        now = utc_now()
        project.created_at = now
        project.updated_at = now

        try:
            self.project_repo.add(project)
            if project.status_enum.is_active:
                await self.ebook_repo.set_in_progress(ebook_id, True)  # type: ignore[arg-type]
            await self.session.commit()
            await self.session.refresh(project)
        except IntegrityError as e:
            # Partial unique index on active projects per ebook
            await self.session.rollback()
            raise ProjectExistsError() from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project created", project_id=project.id, ebook_id=ebook_id)
        return project

    async def save(self, project: Project) -> Project:
        """Validate and update all mutable fields of an existing project.

        Raises:
            ProjectNotFoundError: The project was never inserted.
            InvalidProjectError: With every field error found.
            ProjectExistsError: Reactivating would give the ebook two active projects.
        """
        if project.id is None:
            raise ProjectNotFoundError()

        result = await self.validate(project)
        if not result.is_valid:
            raise InvalidProjectError(result)

        project.updated_at = utc_now()

        try:
            self.project_repo.add(project)
            await self._after_save(project)
            await self.session.commit()
            await self.session.refresh(project)
        except IntegrityError as e:
            await self.session.rollback()
            raise ProjectExistsError() from e
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Project saved", project_id=project.id, status=project.status)
        return project

    async def _after_save(self, project: Project) -> None:
        """Side effects of a status change, run in the save transaction."""
        if project.status == ProjectStatus.ABANDONED.value:
            await self.ebook_repo.set_in_progress(project.ebook_id, False)  # type: ignore[arg-type]

    async def sync_activity(self, project: Project, api_key: str | None = None) -> Project:
        """Refresh both activity timestamps and save.

        Unlike during creation, a failing external call propagates.

        Raises:
            AppException: GitHub or Google Groups could not be read.
        """
        await self.fetch_latest_commit_timestamp(project, api_key)
        await self.fetch_last_discussion_timestamp(project)
        return await self.save(project)

    async def fetch_latest_commit_timestamp(
        self, project: Project, api_key: str | None = None
    ) -> None:
        """Update ``last_commit_at`` (and ``vcs_url`` if the repo moved) from GitHub.

        No-op unless the project is hosted on GitHub. Does not commit.

        Raises:
            AppException: The repository could not be read.
        """
        if not is_github_url(project.vcs_url):
            return

        commit = await self.github_client.latest_commit(project.vcs_url, api_key)  # type: ignore[arg-type]

        if commit.repository_url != project.vcs_url:
            project.vcs_url = commit.repository_url

        if commit.committed_at is not None:
            project.last_commit_at = commit.committed_at

    async def fetch_last_discussion_timestamp(self, project: Project) -> None:
        """Update ``last_discussion_at`` from the project's mailing list thread.

        No-op unless the discussion is on the project's Google Group. An
        unreadable date clears the field rather than failing. Does not commit.

        Raises:
            AppException: The thread page could not be fetched.
        """
        if not is_discussion_url(project.discussion_url):
            return

        project.last_discussion_at = await self.discussion_client.last_post_at(
            project.discussion_url  # type: ignore[arg-type]
        )

    async def get(self, project_id: int | None) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise ProjectNotFoundError()
        return project

    async def get_all_by_status(self, status: ProjectStatus) -> list[Project]:
        return await self.project_repo.list_by_status(status)

    async def get_all_by_manager_user_id(self, user_id: int) -> list[Project]:
        return await self.project_repo.list_active_by_manager(user_id)

    async def get_all_by_reviewer_user_id(self, user_id: int) -> list[Project]:
        return await self.project_repo.list_active_by_reviewer(user_id)

    async def get_in_progress_for_ebook(self, ebook_id: int) -> Project | None:
        """The ebook's in-progress or stalled project, if it has one."""
        return await self.project_repo.get_active_for_ebook(ebook_id)
