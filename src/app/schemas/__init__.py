from src.app.schemas.collaborator import CollaboratorCreate
from src.app.schemas.conversation import AIConversationCreate, AIConversationUpdate
from src.app.schemas.file import FileCreate, FileUpdate
from src.app.schemas.project import ProjectCreate, ProjectUpdate
from src.app.schemas.user import UserCreate, UserRead, UserUpdate
from src.app.schemas.validation import (
    make_parser,
    parse_ai_conversation,
    parse_collaborator,
    parse_file,
    parse_message,
    parse_project,
    parse_user,
)

__all__ = [
    # Collaborator
    "CollaboratorCreate",
    # AI conversation
    "AIConversationCreate",
    "AIConversationUpdate",
    # File
    "FileCreate",
    "FileUpdate",
    # Project
    "ProjectCreate",
    "ProjectUpdate",
    # User
    "UserCreate",
    "UserRead",
    "UserUpdate",
    # Parsers
    "make_parser",
    "parse_ai_conversation",
    "parse_collaborator",
    "parse_file",
    "parse_message",
    "parse_project",
    "parse_user",
]
