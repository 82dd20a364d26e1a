"""Integration tests for login sessions."""

import pytest
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.press.core.config import get_settings
from src.press.core.exceptions import (
    InvalidLoginError,
    PasswordRequiredError,
    SessionNotFoundError,
    UserNotFoundError,
)
from src.press.models import Session, User
from src.press.services import SessionService, UserService
from tests.factories import DEFAULT_TEST_PASSWORD, UserFactory

pytestmark = pytest.mark.integration


class TestUserLookup:
    async def test_get_and_get_by_email(self, user_service: UserService, test_user: User):
        assert (await user_service.get(test_user.id)).email == test_user.email
        assert (await user_service.get_by_email(test_user.email)).id == test_user.id

    async def test_get_missing_user(self, user_service: UserService):
        with pytest.raises(UserNotFoundError):
            await user_service.get(999)
        with pytest.raises(UserNotFoundError):
            await user_service.get_by_email("nobody@example.com")
        with pytest.raises(UserNotFoundError):
            await user_service.get_by_email(None)

    async def test_get_if_registered_by_email(self, user_service: UserService, test_user: User):
        user = await user_service.get_if_registered(test_user.email, DEFAULT_TEST_PASSWORD)
        assert user.id == test_user.id

    async def test_get_if_registered_by_uuid(self, user_service: UserService, test_user: User):
        user = await user_service.get_if_registered(str(test_user.uuid), DEFAULT_TEST_PASSWORD)
        assert user.id == test_user.id

    async def test_wrong_password(self, user_service: UserService, test_user: User):
        with pytest.raises(UserNotFoundError):
            await user_service.get_if_registered(test_user.email, "wrong")

    async def test_missing_password(self, user_service: UserService, test_user: User):
        with pytest.raises(PasswordRequiredError):
            await user_service.get_if_registered(test_user.email, None)

    async def test_passwordless_account(self, user_service: UserService, db_session: AsyncSession):
        user = UserFactory.passwordless()
        db_session.add(user)
        await db_session.commit()

        found = await user_service.get_if_registered(user.email, None)

        assert found.id == user.id

    @pytest.mark.parametrize("identifier", ["", None, "nobody@example.com"])
    async def test_unknown_identifier(self, user_service: UserService, identifier):
        with pytest.raises(UserNotFoundError):
            await user_service.get_if_registered(identifier, "whatever")


class TestLogin:
    async def test_login_creates_session_and_cookie(
        self, session_service: SessionService, test_user: User
    ):
        result = await session_service.create(test_user.email, DEFAULT_TEST_PASSWORD)

        assert result.user.id == test_user.id
        assert result.session is not None
        assert result.session.user_id == test_user.id
        assert result.session.url == f"/sessions/{result.session.id}"
        assert result.cookie.name == get_settings().session_cookie_name
        assert result.cookie.value == result.session.id

    async def test_second_login_reuses_session(
        self,
        session_service: SessionService,
        test_user: User,
        db_session: AsyncSession,
    ):
        first = await session_service.create(test_user.email, DEFAULT_TEST_PASSWORD)
        second = await session_service.create(str(test_user.uuid), DEFAULT_TEST_PASSWORD)

        assert second.session.id == first.session.id
        assert second.session.created_at == first.session.created_at
        count = await db_session.scalar(
            select(func.count()).select_from(Session).where(Session.user_id == test_user.id)
        )
        assert count == 1

    @pytest.mark.parametrize(
        ("identifier", "password"),
        [("nobody@example.com", "x"), ("producer@example.com", "wrong"), (None, None)],
    )
    async def test_invalid_login_hides_cause(
        self, session_service: SessionService, test_user: User, identifier, password
    ):
        with pytest.raises(InvalidLoginError) as exc_info:
            await session_service.create(identifier, password)

        assert exc_info.value.message == "Invalid login"
        assert isinstance(exc_info.value.__cause__, UserNotFoundError)

    async def test_password_required_propagates(
        self, session_service: SessionService, test_user: User
    ):
        with pytest.raises(PasswordRequiredError):
            await session_service.create(test_user.email)


class TestCookie:
    async def test_cookie_resolves_to_user(self, session_service: SessionService, test_user: User):
        login = await session_service.create(test_user.email, DEFAULT_TEST_PASSWORD)

        result = await session_service.initialize_from_cookie(login.cookie.value)

        assert result is not None
        assert result.user.id == test_user.id
        assert result.cookie.value == login.cookie.value

    @pytest.mark.parametrize("cookie", [None, "", "not-a-session"])
    async def test_unknown_cookie_is_anonymous(
        self, session_service: SessionService, test_user: User, cookie
    ):
        assert await session_service.initialize_from_cookie(cookie) is None


class TestGet:
    async def test_get(self, session_service: SessionService, test_user: User):
        login = await session_service.create(test_user.email, DEFAULT_TEST_PASSWORD)

        fetched = await session_service.get(login.session.id)

        assert fetched.user_id == test_user.id

    @pytest.mark.parametrize("session_id", [None, "missing"])
    async def test_get_missing(self, session_service: SessionService, session_id):
        with pytest.raises(SessionNotFoundError):
            await session_service.get(session_id)
