"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.press.api.dependencies.db import DBSession
from src.press.api.dependencies.repositories import (
    ArtistRepo,
    EbookRepo,
    ProjectRepo,
    SessionRepo,
    UserRepo,
)
from src.press.core.integrations import DiscussionClient, GitHubClient
from src.press.services import ArtistService, ProjectService, SessionService, UserService


def get_user_service(user_repo: UserRepo, session: DBSession) -> UserService:
    return UserService(user_repo, session)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]


def get_artist_service(artist_repo: ArtistRepo, session: DBSession) -> ArtistService:
    return ArtistService(artist_repo, session)


def get_session_service(
    user_service: UserServiceDep,
    session_repo: SessionRepo,
    session: DBSession,
) -> SessionService:
    return SessionService(user_service, session_repo, session)


def get_github_client() -> GitHubClient:
    """Override in tests to stub out GitHub."""
    return GitHubClient()


def get_discussion_client() -> DiscussionClient:
    """Override in tests to stub out Google Groups."""
    return DiscussionClient()


def get_project_service(
    project_repo: ProjectRepo,
    user_service: UserServiceDep,
    ebook_repo: EbookRepo,
    session: DBSession,
    github_client: Annotated[GitHubClient, Depends(get_github_client)],
    discussion_client: Annotated[DiscussionClient, Depends(get_discussion_client)],
) -> ProjectService:
    return ProjectService(
        project_repo,
        user_service,
        ebook_repo,
        session,
        github_client=github_client,
        discussion_client=discussion_client,
    )


ArtistServiceDep = Annotated[ArtistService, Depends(get_artist_service)]
SessionServiceDep = Annotated[SessionService, Depends(get_session_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
