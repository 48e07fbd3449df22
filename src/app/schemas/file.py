"""File schemas for API request/response."""

from pydantic import StrictInt, field_validator

from src.app.models.base import CamelModel


class FileCreate(CamelModel):
    project_id: StrictInt
    name: str
    path: str
    content: str | None = None
    language: str | None = None


class FileUpdate(CamelModel):
    """Partial update of a file, typically a save from the editor."""

    project_id: StrictInt | None = None
    name: str | None = None
    path: str | None = None
    content: str | None = None
    language: str | None = None

    @field_validator("project_id", "name", "path")
    @classmethod
    def reject_null(cls, v: int | str | None) -> int | str:
        if v is None:
            raise ValueError("Field cannot be null")
        return v
