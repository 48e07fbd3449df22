from src.app.core.exceptions import NotFoundError
from src.app.core.logging import get_logger
from src.app.models import Collaborator
from src.app.repositories import CollaboratorRepository, ProjectRepository, UserRepository
from src.app.schemas.collaborator import CollaboratorCreate
from src.app.services.references import ensure_exists

logger = get_logger(__name__)


class CollaboratorService:
    def __init__(
        self,
        collaborator_repo: CollaboratorRepository,
        project_repo: ProjectRepository,
        user_repo: UserRepository,
    ):
        self.collaborator_repo = collaborator_repo
        self.project_repo = project_repo
        self.user_repo = user_repo

    async def get(self, collaborator_id: int) -> Collaborator:
        collaborator = await self.collaborator_repo.get_by_id(collaborator_id)
        if collaborator is None:
            raise NotFoundError("Collaborator not found")
        return collaborator

    async def add(self, data: CollaboratorCreate) -> Collaborator:
        """Add a user to a project. Repeated (project, user) pairs are kept as-is."""
        await ensure_exists(self.project_repo, data.project_id, "projectId", "Project")
        await ensure_exists(self.user_repo, data.user_id, "userId", "User")
        collaborator = await self.collaborator_repo.create(data)
        logger.info(
            "Collaborator added",
            collaborator_id=collaborator.id,
            project_id=collaborator.project_id,
            user_id=collaborator.user_id,
            role=collaborator.role,
        )
        return collaborator

    async def remove(self, collaborator_id: int) -> None:
        if not await self.collaborator_repo.delete(collaborator_id):
            raise NotFoundError("Collaborator not found")
        logger.info("Collaborator removed", collaborator_id=collaborator_id)
