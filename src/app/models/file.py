"""File record - one source file inside a project."""

from src.app.models.base import TimestampedRecord


class File(TimestampedRecord):
    project_id: int
    name: str
    path: str
    content: str | None = None
    language: str | None = None
