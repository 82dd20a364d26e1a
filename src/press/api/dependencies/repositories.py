"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.press.api.dependencies.db import DBSession
from src.press.repositories import (
    ArtistRepository,
    EbookRepository,
    ProjectRepository,
    SessionRepository,
    UserRepository,
)


def get_user_repository(session: DBSession) -> UserRepository:
    return UserRepository(session)


def get_artist_repository(session: DBSession) -> ArtistRepository:
    return ArtistRepository(session)


def get_session_repository(session: DBSession) -> SessionRepository:
    return SessionRepository(session)


def get_ebook_repository(session: DBSession) -> EbookRepository:
    return EbookRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ArtistRepo = Annotated[ArtistRepository, Depends(get_artist_repository)]
SessionRepo = Annotated[SessionRepository, Depends(get_session_repository)]
EbookRepo = Annotated[EbookRepository, Depends(get_ebook_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
