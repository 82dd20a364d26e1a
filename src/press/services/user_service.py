from sqlalchemy.ext.asyncio import AsyncSession

from src.press.core.exceptions import PasswordRequiredError, UserNotFoundError
from src.press.core.security import dummy_password_hash, verify_password
from src.press.models import User
from src.press.repositories import UserRepository


class UserService:
    """User lookups and credential checks."""

    def __init__(self, user_repo: UserRepository, session: AsyncSession):
        self.user_repo = user_repo
        self.session = session

    async def get(self, user_id: int | None) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError()
        return user

    async def get_by_email(self, email: str | None) -> User:
        if not email:
            raise UserNotFoundError()
        user = await self.user_repo.get_by_email(email)
        if user is None:
            raise UserNotFoundError()
        return user

    async def get_if_registered(self, identifier: str | None, password: str | None) -> User:
        """Return the user matching an email or UUID if the credentials check out.

        Accounts without a password log in by identifier alone.

        Raises:
            UserNotFoundError: Unknown identifier or wrong password.
            PasswordRequiredError: The account has a password and none was given.
        """
        if not identifier:
            raise UserNotFoundError()

        user = await self.user_repo.get_by_identifier(identifier.strip())

        if user is None:
            # Same hashing cost as a real check so response time does not reveal the miss
            if password:
                verify_password(password, dummy_password_hash())
            raise UserNotFoundError()

        if user.password_hash is None:
            return user

        if not password:
            raise PasswordRequiredError()

        if not verify_password(password, user.password_hash):
            raise UserNotFoundError()

        return user
