"""Integration test fixtures for database and HTTP client operations.

Each test gets a fresh in-memory SQLite database with the full schema.
Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from src.press.api.dependencies import get_db_session, get_discussion_client, get_github_client
from src.press.core import db
from src.press.core.db import build_engine, get_session
from src.press.core.integrations import DiscussionClient, GitHubClient
from src.press.main import create_app
from src.press.models import Ebook, User
from src.press.repositories import (
    ArtistRepository,
    EbookRepository,
    ProjectRepository,
    SessionRepository,
    UserRepository,
)
from src.press.services import ArtistService, ProjectService, SessionService, UserService
from tests.factories import EbookFactory, EbookPlaceholderFactory, UserFactory


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine]:
    """In-memory database shared by every session of one test."""
    test_engine = build_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield test_engine
    await test_engine.dispose()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Session configured like the application's.

    Nothing is committed automatically. Tests that insert fixtures directly
    must commit them.
    """
    async with get_session(engine) as session:
        yield session


# --- Services ---


@pytest.fixture
def user_service(db_session: AsyncSession) -> UserService:
    return UserService(UserRepository(db_session), db_session)


@pytest.fixture
def artist_service(db_session: AsyncSession) -> ArtistService:
    return ArtistService(ArtistRepository(db_session), db_session)


@pytest.fixture
def session_service(db_session: AsyncSession, user_service: UserService) -> SessionService:
    return SessionService(user_service, SessionRepository(db_session), db_session)


@pytest.fixture
def project_service(
    db_session: AsyncSession,
    user_service: UserService,
    github_client: GitHubClient,
    discussion_client: DiscussionClient,
) -> ProjectService:
    return ProjectService(
        ProjectRepository(db_session),
        user_service,
        EbookRepository(db_session),
        db_session,
        github_client=github_client,
        discussion_client=discussion_client,
    )


# --- Data ---


@pytest.fixture
async def test_user(db_session: AsyncSession) -> User:
    """A user with a password (see DEFAULT_TEST_PASSWORD)."""
    user = UserFactory.build(email="producer@example.com", name="Test Producer")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def manager(db_session: AsyncSession) -> User:
    user = UserFactory.build(name="Manager")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def reviewer(db_session: AsyncSession) -> User:
    user = UserFactory.build(name="Reviewer")
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def placeholder_ebook(db_session: AsyncSession) -> Ebook:
    """An unreleased ebook that projects can be opened on."""
    ebook = EbookFactory.build()
    db_session.add(ebook)
    await db_session.flush()
    db_session.add(EbookPlaceholderFactory.build(ebook_id=ebook.id))
    await db_session.commit()
    await db_session.refresh(ebook)
    return ebook


@pytest.fixture
async def released_ebook(db_session: AsyncSession) -> Ebook:
    ebook = EbookFactory.build(title="Released Ebook")
    db_session.add(ebook)
    await db_session.commit()
    await db_session.refresh(ebook)
    return ebook


# --- HTTP ---


@pytest.fixture
async def client(
    engine: AsyncEngine,
    github_client: GitHubClient,
    discussion_client: DiscussionClient,
) -> AsyncGenerator[AsyncClient]:
    """API client wired to the test database and stubbed external services."""
    await db.dispose_engine()

    app = create_app()

    async def _get_test_db_session() -> AsyncGenerator[AsyncSession]:
        async with get_session(engine) as session:
            yield session

    app.dependency_overrides[get_db_session] = _get_test_db_session
    app.dependency_overrides[get_github_client] = lambda: github_client
    app.dependency_overrides[get_discussion_client] = lambda: discussion_client

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="https://press.test",
    ) as client:
        yield client

    await db.dispose_engine()
