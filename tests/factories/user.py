"""User factories for test data generation."""

from uuid import uuid4

from polyfactory import Use

from src.press.core.security import hash_password
from src.press.models import User
from tests.factories.base import BaseFactory, utc_now

# Default test password - stored for convenience in tests
DEFAULT_TEST_PASSWORD = "testpassword123"


class UserFactory(BaseFactory):
    """Factory for generating User test data."""

    __model__ = User

    id = None
    uuid = Use(uuid4)
    email = Use(lambda: f"user_{uuid4().hex[-8:]}@example.com")
    name = "Test User"
    password_hash = Use(lambda: hash_password(DEFAULT_TEST_PASSWORD))
    created_at = Use(utc_now)
    updated_at = Use(utc_now)

    @classmethod
    def passwordless(cls, **kwargs):
        """Create a user who logs in by identifier alone."""
        return cls.build(password_hash=None, **kwargs)
