"""Foreign-key checks run before a write is accepted."""

from src.app.core.exceptions import ValidationError
from src.app.repositories.base import BaseRepository


async def ensure_exists(repo: BaseRepository, id: int, field: str, entity: str) -> None:
    """Reject a payload whose ``field`` points at a missing ``entity`` row.

    ``field`` is the client-facing (camelCase) name, so the issue path matches
    what was sent.
    """
    if await repo.get_by_id(id) is None:
        raise ValidationError.for_field(field, f"{entity} {id} does not exist")
