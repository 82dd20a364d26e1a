"""Repository for User entity."""

from uuid import UUID

from sqlmodel import select

from src.press.models import User
from src.press.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        result = await self.session.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_uuid(self, uuid: UUID) -> User | None:
        result = await self.session.execute(select(User).where(User.uuid == uuid))
        return result.scalar_one_or_none()

    async def get_by_identifier(self, identifier: str) -> User | None:
        """Get user by email, or by UUID when the identifier parses as one."""
        try:
            uuid = UUID(identifier)
        except ValueError:
            return await self.get_by_email(identifier)
        return await self.get_by_uuid(uuid)
