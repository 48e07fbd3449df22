from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    """Return current UTC time as an aware datetime."""
    return datetime.now(UTC)


class CamelModel(BaseModel):
    """Base for every API-facing model.

    Fields are snake_case in Python and camelCase on the wire. Both spellings
    are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Record(CamelModel):
    """A stored row. Immutable: changes go through the repository's ``update``."""

    model_config = ConfigDict(frozen=True)

    id: int
    created_at: datetime


class TimestampedRecord(Record):
    """A stored row that also tracks its last modification."""

    updated_at: datetime
