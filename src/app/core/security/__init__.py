"""Security utilities.

Re-exports password helpers for convenience.
"""

from src.app.core.security.passwords import (
    get_password_hasher,
    hash_password,
    verify_password,
)

__all__ = [
    "get_password_hasher",
    "hash_password",
    "verify_password",
]
