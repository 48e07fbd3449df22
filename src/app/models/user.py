"""User record."""

from pydantic import EmailStr

from src.app.models.base import Record


class User(Record):
    """A registered account.

    ``password`` holds the Argon2 hash, never the plaintext, and is never
    serialized to clients (see ``UserRead``).
    """

    username: str
    password: str
    email: EmailStr
    full_name: str | None = None
    avatar_url: str | None = None
