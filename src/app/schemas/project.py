"""Project schemas for API request/response."""

from pydantic import StrictBool, StrictInt, field_validator

from src.app.models.base import CamelModel


class ProjectCreate(CamelModel):
    """Schema for creating a project. The name is stored exactly as sent."""

    name: str
    description: str | None = None
    owner_id: StrictInt
    is_public: StrictBool = False


class ProjectUpdate(CamelModel):
    """Schema for updating a project. Only the fields sent are changed."""

    name: str | None = None
    description: str | None = None
    owner_id: StrictInt | None = None
    is_public: StrictBool | None = None

    @field_validator("name", "owner_id", "is_public")
    @classmethod
    def reject_null(cls, v: str | int | bool | None) -> str | int | bool:
        if v is None:
            raise ValueError("Field cannot be null")
        return v
