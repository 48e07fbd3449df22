from src.app.services.collaborator_service import CollaboratorService
from src.app.services.conversation_service import ConversationService
from src.app.services.file_service import FileService
from src.app.services.project_service import ProjectService
from src.app.services.user_service import UserService

__all__ = [
    "CollaboratorService",
    "ConversationService",
    "FileService",
    "ProjectService",
    "UserService",
]
