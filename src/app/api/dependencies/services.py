"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.app.api.dependencies.repositories import (
    CollaboratorRepo,
    ConversationRepo,
    FileRepo,
    ProjectRepo,
    UserRepo,
)
from src.app.services import (
    CollaboratorService,
    ConversationService,
    FileService,
    ProjectService,
    UserService,
)


def get_user_service(user_repo: UserRepo) -> UserService:
    return UserService(user_repo)


def get_project_service(project_repo: ProjectRepo, user_repo: UserRepo) -> ProjectService:
    return ProjectService(project_repo, user_repo)


def get_file_service(file_repo: FileRepo, project_repo: ProjectRepo) -> FileService:
    return FileService(file_repo, project_repo)


def get_collaborator_service(
    collaborator_repo: CollaboratorRepo,
    project_repo: ProjectRepo,
    user_repo: UserRepo,
) -> CollaboratorService:
    return CollaboratorService(collaborator_repo, project_repo, user_repo)


def get_conversation_service(
    conversation_repo: ConversationRepo,
    user_repo: UserRepo,
    project_repo: ProjectRepo,
) -> ConversationService:
    return ConversationService(conversation_repo, user_repo, project_repo)


UserServiceDep = Annotated[UserService, Depends(get_user_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
FileServiceDep = Annotated[FileService, Depends(get_file_service)]
CollaboratorServiceDep = Annotated[CollaboratorService, Depends(get_collaborator_service)]
ConversationServiceDep = Annotated[ConversationService, Depends(get_conversation_service)]
