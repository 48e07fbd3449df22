"""The application's in-memory store: one repository per entity."""

from src.app.repositories.collaborator import CollaboratorRepository
from src.app.repositories.conversation import AIConversationRepository
from src.app.repositories.file import FileRepository
from src.app.repositories.project import ProjectRepository
from src.app.repositories.user import UserRepository


class Store:
    """Authoritative source of truth for all entities.

    Built once at startup and handed to the app via ``app.state.store``.
    Tests build a fresh one each to stay isolated. Nothing survives a restart.
    """

    def __init__(self) -> None:
        self.users = UserRepository()
        self.projects = ProjectRepository()
        self.files = FileRepository()
        self.collaborators = CollaboratorRepository()
        self.ai_conversations = AIConversationRepository()
