"""Repository for login Session entity."""

from sqlmodel import select

from src.press.models import Session, User
from src.press.repositories.base import BaseRepository


class SessionRepository(BaseRepository[Session]):
    """Repository for login sessions."""

    model = Session

    async def get_first_for_user(self, user_id: int) -> Session | None:
        """Oldest session for a user.

        ``user_id`` is unique so there is at most one row; the ordering only
        matters for databases created before that constraint existed.
        """
        result = await self.session.execute(
            select(Session)
            .where(Session.user_id == user_id)
            .order_by(Session.created_at.asc(), Session.id.asc())
            .limit(1)
        )
        return result.scalars().first()

    async def get_user_by_session_id(self, session_id: str) -> User | None:
        """Resolve a session id to its owning user."""
        result = await self.session.execute(
            select(User).join(Session, Session.user_id == User.id).where(Session.id == session_id)
        )
        return result.scalars().first()
