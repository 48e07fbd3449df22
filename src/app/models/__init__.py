"""Model exports.

Import from here: `from src.app.models import User, Project`
"""

from src.app.models.base import CamelModel, Record, TimestampedRecord, utc_now
from src.app.models.collaborator import Collaborator
from src.app.models.conversation import AIConversation, ChatMessage
from src.app.models.enums import MessageRole
from src.app.models.file import File
from src.app.models.project import Project
from src.app.models.user import User

__all__ = [
    # Base
    "CamelModel",
    "Record",
    "TimestampedRecord",
    "utc_now",
    # Enums
    "MessageRole",
    # Records
    "AIConversation",
    "ChatMessage",
    "Collaborator",
    "File",
    "Project",
    "User",
]
