"""Login session service - credential login and cookie re-authentication."""

from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.press.core.cookies import SessionCookie
from src.press.core.exceptions import InvalidLoginError, SessionNotFoundError, UserNotFoundError
from src.press.core.logging import get_logger
from src.press.core.security import new_session_id
from src.press.models import Session, User
from src.press.models.base import utc_now
from src.press.repositories import SessionRepository
from src.press.services.user_service import UserService

logger = get_logger(__name__)


@dataclass(frozen=True)
class LoginResult:
    """Outcome of a successful login or cookie resolution.

    The caller owns the user for the rest of the request and must send
    ``cookie`` back to the client.
    """

    user: User
    session: Session | None
    cookie: SessionCookie


class SessionService:
    """Login session service.

    A user has at most one session row. Logging in again reuses it, so
    every browser a user logs in from shares the same session id.
    """

    def __init__(
        self,
        user_service: UserService,
        session_repo: SessionRepository,
        session: AsyncSession,
    ):
        self.user_service = user_service
        self.session_repo = session_repo
        self.session = session

    async def create(self, identifier: str | None, password: str | None = None) -> LoginResult:
        """Log a user in by email or UUID and password.

        Raises:
            InvalidLoginError: Unknown identifier or wrong password. The
                specific cause is not revealed.
            PasswordRequiredError: The account has a password and none was given.
        """
        try:
            user = await self.user_service.get_if_registered(identifier, password)
        except UserNotFoundError as e:
            logger.info("Login failed")
            raise InvalidLoginError() from e

        login_session = await self.session_repo.get_first_for_user(user.id)

        if login_session is not None:
            logger.info("Session reused", user_id=user.id)
        else:
            login_session = await self._insert_session(user.id)

        return LoginResult(
            user=user,
            session=login_session,
            cookie=SessionCookie.for_session(login_session.id),
        )

    async def _insert_session(self, user_id: int) -> Session:
        login_session = Session(id=new_session_id(), user_id=user_id, created_at=utc_now())
        try:
            self.session_repo.add(login_session)
            await self.session.commit()
            await self.session.refresh(login_session)
        except IntegrityError:
            # A concurrent login for the same user inserted first; sessions.user_id is unique
            await self.session.rollback()
            existing = await self.session_repo.get_first_for_user(user_id)
            if existing is None:
                raise
            return existing
        except Exception:
            await self.session.rollback()
            raise

        logger.info("Session created", user_id=user_id)
        return login_session

    async def initialize_from_cookie(self, session_id: str | None) -> LoginResult | None:
        """Resolve a session cookie value to its user.

        Returns None when there is no cookie or it matches no session; an
        invalid cookie is left as it is. On success the returned cookie
        carries a fresh expiry.
        """
        if not session_id:
            return None

        user = await self.session_repo.get_user_by_session_id(session_id)
        if user is None:
            return None

        return LoginResult(user=user, session=None, cookie=SessionCookie.for_session(session_id))

    async def get(self, session_id: str | None) -> Session:
        if session_id is None:
            raise SessionNotFoundError()
        login_session = await self.session_repo.get_by_id(session_id)
        if login_session is None:
            raise SessionNotFoundError()
        return login_session
