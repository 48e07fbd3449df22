from typing import Annotated

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import CollaboratorRepo, CollaboratorServiceDep
from src.app.core.exceptions import ValidationError
from src.app.models import Collaborator
from src.app.schemas.collaborator import CollaboratorCreate

router = APIRouter(prefix="/collaborators", tags=["collaborators"])


@router.get(
    "",
    response_model=list[Collaborator],
    summary="List collaborators",
    description="Filter by `projectId` or by `userId`. When both are given, `projectId` wins.",
    responses={400: {"description": "Missing projectId or userId query parameter"}},
)
async def list_collaborators(
    repo: CollaboratorRepo,
    project_id: Annotated[int | None, Query(alias="projectId")] = None,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
) -> list[Collaborator]:
    if project_id is not None:
        return await repo.list_by_project(project_id)
    if user_id is not None:
        return await repo.list_by_user(user_id)
    raise ValidationError.missing_query("projectId", "userId")


@router.get(
    "/{collaborator_id}",
    response_model=Collaborator,
    summary="Get collaborator",
    responses={404: {"description": "Collaborator not found"}},
)
async def get_collaborator(
    collaborator_id: int, service: CollaboratorServiceDep
) -> Collaborator:
    return await service.get(collaborator_id)


@router.post(
    "",
    response_model=Collaborator,
    status_code=status.HTTP_201_CREATED,
    summary="Add collaborator",
    responses={400: {"description": "Validation error or unknown project/user"}},
)
async def add_collaborator(
    data: CollaboratorCreate, service: CollaboratorServiceDep
) -> Collaborator:
    return await service.add(data)


@router.delete(
    "/{collaborator_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Remove collaborator",
    responses={404: {"description": "Collaborator not found"}},
)
async def remove_collaborator(collaborator_id: int, service: CollaboratorServiceDep) -> None:
    await service.remove(collaborator_id)
