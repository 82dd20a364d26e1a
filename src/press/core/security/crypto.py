"""Cryptographic utilities - password hashing and session identifiers."""

from functools import lru_cache
from uuid import uuid4

import argon2

from src.press.core.config import get_settings


@lru_cache
def _get_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


def hash_password(password: str) -> str:
    """Hash password using Argon2id."""
    return _get_password_hasher().hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _get_password_hasher().verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


@lru_cache
def dummy_password_hash() -> str:
    """Hash verified against when the user does not exist, to keep timing uniform."""
    return hash_password("dummy-password-for-timing")


def new_session_id() -> str:
    """Random session identifier (UUID4, canonical string form)."""
    return str(uuid4())
