from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from src.app.models.base import CamelModel


class UserCreate(CamelModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    email: EmailStr
    full_name: str | None = None
    avatar_url: str | None = None


class UserUpdate(CamelModel):
    username: str | None = Field(default=None, min_length=3)
    password: str | None = Field(default=None, min_length=6)
    email: EmailStr | None = None
    full_name: str | None = None
    avatar_url: str | None = None

    @field_validator("username", "password", "email")
    @classmethod
    def reject_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("Field cannot be null")
        return v


class UserRead(CamelModel):
    """A user as returned to clients - never includes the password."""

    id: int
    username: str
    email: EmailStr
    full_name: str | None
    avatar_url: str | None
    created_at: datetime
