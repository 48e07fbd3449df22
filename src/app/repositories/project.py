"""Repository for Project entity."""

from src.app.models import Project
from src.app.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    model = Project

    async def list_by_owner(self, owner_id: int) -> list[Project]:
        """Projects owned by a user, oldest first."""
        return await self.filter_by(owner_id=owner_id)
