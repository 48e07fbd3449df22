"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenience.
"""

# Repositories
from src.app.api.dependencies.repositories import (
    CollaboratorRepo,
    ConversationRepo,
    FileRepo,
    ProjectRepo,
    UserRepo,
    get_collaborator_repository,
    get_conversation_repository,
    get_file_repository,
    get_project_repository,
    get_user_repository,
)

# Services
from src.app.api.dependencies.services import (
    CollaboratorServiceDep,
    ConversationServiceDep,
    FileServiceDep,
    ProjectServiceDep,
    UserServiceDep,
    get_collaborator_service,
    get_conversation_service,
    get_file_service,
    get_project_service,
    get_user_service,
)

# Store
from src.app.api.dependencies.store import StoreDep, get_store

__all__ = [
    # Store
    "StoreDep",
    "get_store",
    # Repositories
    "CollaboratorRepo",
    "ConversationRepo",
    "FileRepo",
    "ProjectRepo",
    "UserRepo",
    "get_collaborator_repository",
    "get_conversation_repository",
    "get_file_repository",
    "get_project_repository",
    "get_user_repository",
    # Services
    "CollaboratorServiceDep",
    "ConversationServiceDep",
    "FileServiceDep",
    "ProjectServiceDep",
    "UserServiceDep",
    "get_collaborator_service",
    "get_conversation_service",
    "get_file_service",
    "get_project_service",
    "get_user_service",
]
