"""Repository for File entity."""

from src.app.models import File
from src.app.repositories.base import BaseRepository


class FileRepository(BaseRepository[File]):
    model = File

    async def list_by_project(self, project_id: int) -> list[File]:
        return await self.filter_by(project_id=project_id)
