"""FastAPI dependency injection definitions."""

# Auth
from src.press.api.dependencies.auth import (
    AuthenticatedUser,
    CurrentUser,
    get_authenticated_user,
    get_current_user,
)

# Database
from src.press.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.press.api.dependencies.repositories import (
    ArtistRepo,
    EbookRepo,
    ProjectRepo,
    SessionRepo,
    UserRepo,
)

# Services
from src.press.api.dependencies.services import (
    ArtistServiceDep,
    ProjectServiceDep,
    SessionServiceDep,
    UserServiceDep,
    get_discussion_client,
    get_github_client,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Auth
    "AuthenticatedUser",
    "CurrentUser",
    "get_authenticated_user",
    "get_current_user",
    # Repositories
    "ArtistRepo",
    "EbookRepo",
    "ProjectRepo",
    "SessionRepo",
    "UserRepo",
    # Services
    "ArtistServiceDep",
    "ProjectServiceDep",
    "SessionServiceDep",
    "UserServiceDep",
    "get_discussion_client",
    "get_github_client",
]
