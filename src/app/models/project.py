"""Project record."""

from src.app.models.base import TimestampedRecord


class Project(TimestampedRecord):
    name: str
    description: str | None = None
    owner_id: int
    is_public: bool = False
