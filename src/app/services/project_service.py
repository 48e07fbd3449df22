from src.app.core.exceptions import NotFoundError
from src.app.core.logging import get_logger
from src.app.models import Project
from src.app.repositories import ProjectRepository, UserRepository
from src.app.schemas.project import ProjectCreate, ProjectUpdate
from src.app.services.references import ensure_exists

logger = get_logger(__name__)


class ProjectService:
    """Project lifecycle - every project belongs to an existing user."""

    def __init__(self, project_repo: ProjectRepository, user_repo: UserRepository):
        self.project_repo = project_repo
        self.user_repo = user_repo

    async def get(self, project_id: int) -> Project:
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def create(self, data: ProjectCreate) -> Project:
        await ensure_exists(self.user_repo, data.owner_id, "ownerId", "User")
        project = await self.project_repo.create(data)
        logger.info("Project created", project_id=project.id, owner_id=project.owner_id)
        return project

    async def update(self, project_id: int, data: ProjectUpdate) -> Project:
        async with self.project_repo.lock:
            await self.get(project_id)
            if data.owner_id is not None:
                await ensure_exists(self.user_repo, data.owner_id, "ownerId", "User")
            project = await self.project_repo.update(project_id, data)

        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def delete(self, project_id: int) -> None:
        if not await self.project_repo.delete(project_id):
            raise NotFoundError("Project not found")
        logger.info("Project deleted", project_id=project_id)
