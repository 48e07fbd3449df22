"""Repository layer - data access abstraction.

Re-exports all repositories and the store that groups them.
"""

from src.app.repositories.base import BaseRepository
from src.app.repositories.collaborator import CollaboratorRepository
from src.app.repositories.conversation import AIConversationRepository
from src.app.repositories.file import FileRepository
from src.app.repositories.project import ProjectRepository
from src.app.repositories.store import Store
from src.app.repositories.user import UserRepository

__all__ = [
    # Base
    "BaseRepository",
    "Store",
    # Entities
    "AIConversationRepository",
    "CollaboratorRepository",
    "FileRepository",
    "ProjectRepository",
    "UserRepository",
]
