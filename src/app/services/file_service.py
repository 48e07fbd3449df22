from src.app.core.exceptions import NotFoundError
from src.app.core.logging import get_logger
from src.app.models import File
from src.app.repositories import FileRepository, ProjectRepository
from src.app.schemas.file import FileCreate, FileUpdate
from src.app.services.references import ensure_exists

logger = get_logger(__name__)


class FileService:
    """Files inside projects - the editor's open/save operations land here."""

    def __init__(self, file_repo: FileRepository, project_repo: ProjectRepository):
        self.file_repo = file_repo
        self.project_repo = project_repo

    async def get(self, file_id: int) -> File:
        file = await self.file_repo.get_by_id(file_id)
        if file is None:
            raise NotFoundError("File not found")
        return file

    async def create(self, data: FileCreate) -> File:
        await ensure_exists(self.project_repo, data.project_id, "projectId", "Project")
        file = await self.file_repo.create(data)
        logger.info("File created", file_id=file.id, project_id=file.project_id, path=file.path)
        return file

    async def update(self, file_id: int, data: FileUpdate) -> File:
        """Apply a partial update, e.g. new ``content`` from an editor save."""
        async with self.file_repo.lock:
            await self.get(file_id)
            if data.project_id is not None:
                await ensure_exists(self.project_repo, data.project_id, "projectId", "Project")
            file = await self.file_repo.update(file_id, data)

        if file is None:
            raise NotFoundError("File not found")
        return file

    async def delete(self, file_id: int) -> None:
        if not await self.file_repo.delete(file_id):
            raise NotFoundError("File not found")
        logger.info("File deleted", file_id=file_id)
