"""Repository for Collaborator entity."""

from src.app.models import Collaborator
from src.app.repositories.base import BaseRepository


class CollaboratorRepository(BaseRepository[Collaborator]):
    model = Collaborator

    async def list_by_project(self, project_id: int) -> list[Collaborator]:
        return await self.filter_by(project_id=project_id)

    async def list_by_user(self, user_id: int) -> list[Collaborator]:
        return await self.filter_by(user_id=user_id)
