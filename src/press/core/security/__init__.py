"""Security utilities.

Re-exports all security-related functions for convenience.
"""

from src.press.core.security.crypto import (
    dummy_password_hash,
    hash_password,
    new_session_id,
    verify_password,
)

__all__ = [
    "dummy_password_hash",
    "hash_password",
    "new_session_id",
    "verify_password",
]
