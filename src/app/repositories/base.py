"""Base repository with common CRUD operations over an in-memory table."""

import asyncio
from typing import Any, Generic, TypeVar

from pydantic import BaseModel

from src.app.models.base import Record, TimestampedRecord, utc_now

RecordT = TypeVar("RecordT", bound=Record)


class BaseRepository(Generic[RecordT]):
    """In-memory table of immutable records keyed by integer id.

    Ids start at 1 and come from a per-table counter that only moves forward,
    so an id is never reused after a delete. Rows keep insertion order.

    Single operations run to completion without suspending, so they need no
    locking. Callers that read, decide and then write (uniqueness checks,
    appends) must hold ``lock`` across the whole sequence.
    """

    model: type[RecordT]

    def __init__(self) -> None:
        self._rows: dict[int, RecordT] = {}
        self._next_id = 1
        self.lock = asyncio.Lock()

    def _allocate_id(self) -> int:
        id = self._next_id
        self._next_id += 1
        return id

    @property
    def _tracks_updates(self) -> bool:
        return issubclass(self.model, TimestampedRecord)

    async def get_by_id(self, id: int) -> RecordT | None:
        """Get a record by its primary key."""
        return self._rows.get(id)

    async def list_all(self) -> list[RecordT]:
        return list(self._rows.values())

    async def filter_by(self, **criteria: Any) -> list[RecordT]:
        """All records whose fields equal ``criteria``, in insertion order."""
        return [row for row in self._rows.values() if _matches(row, criteria)]

    async def find_first(self, **criteria: Any) -> RecordT | None:
        return next((row for row in self._rows.values() if _matches(row, criteria)), None)

    async def count(self) -> int:
        return len(self._rows)

    async def create(self, payload: BaseModel) -> RecordT:
        """Store ``payload`` as a new record.

        Assigns the next id and stamps ``created_at`` (and ``updated_at`` when
        the record has one). No uniqueness or reference checks happen here.
        """
        now = utc_now()
        values = payload.model_dump()
        values["id"] = self._allocate_id()
        values["created_at"] = now
        if self._tracks_updates:
            values["updated_at"] = now

        record = self.model.model_validate(values)
        self._rows[record.id] = record
        return record

    async def update(self, id: int, patch: BaseModel) -> RecordT | None:
        """Merge the fields set on ``patch`` over the stored record.

        Returns None if there is no record with this id. ``id`` and
        ``created_at`` always come from the stored record.
        """
        current = self._rows.get(id)
        if current is None:
            return None

        values = current.model_dump()
        values.update(patch.model_dump(exclude_unset=True))
        values["id"] = current.id
        values["created_at"] = current.created_at
        if self._tracks_updates:
            # Never move backwards, even if the clock does
            values["updated_at"] = max(utc_now(), current.updated_at)  # type: ignore[attr-defined]

        record = self.model.model_validate(values)
        self._rows[id] = record
        return record

    async def delete(self, id: int) -> bool:
        """Remove a record. Returns False if it was already gone."""
        return self._rows.pop(id, None) is not None


def _matches(row: Record, criteria: dict[str, Any]) -> bool:
    return all(getattr(row, field) == value for field, value in criteria.items())
