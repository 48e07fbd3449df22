"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.store import StoreDep
from src.app.repositories import (
    AIConversationRepository,
    CollaboratorRepository,
    FileRepository,
    ProjectRepository,
    UserRepository,
)


def get_user_repository(store: StoreDep) -> UserRepository:
    return store.users


def get_project_repository(store: StoreDep) -> ProjectRepository:
    return store.projects


def get_file_repository(store: StoreDep) -> FileRepository:
    return store.files


def get_collaborator_repository(store: StoreDep) -> CollaboratorRepository:
    return store.collaborators


def get_conversation_repository(store: StoreDep) -> AIConversationRepository:
    return store.ai_conversations


UserRepo = Annotated[UserRepository, Depends(get_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
FileRepo = Annotated[FileRepository, Depends(get_file_repository)]
CollaboratorRepo = Annotated[CollaboratorRepository, Depends(get_collaborator_repository)]
ConversationRepo = Annotated[AIConversationRepository, Depends(get_conversation_repository)]
