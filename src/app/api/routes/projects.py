"""Project endpoints."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import ProjectRepo, ProjectServiceDep
from src.app.core.exceptions import ValidationError
from src.app.models import Project
from src.app.schemas.project import ProjectCreate, ProjectUpdate

router = APIRouter(prefix="/projects", tags=["projects"])


@router.get(
    "",
    response_model=list[Project],
    summary="List projects",
    description="List the projects owned by a user. `userId` is required.",
    responses={400: {"description": "Missing userId query parameter"}},
)
async def list_projects(
    repo: ProjectRepo,
    user_id: Annotated[int | None, Query(alias="userId", description="Owner id")] = None,
) -> list[Project]:
    if user_id is None:
        raise ValidationError.missing_query("userId")
    return await repo.list_by_owner(user_id)


@router.get(
    "/{project_id}",
    response_model=Project,
    summary="Get project",
    responses={404: {"description": "Project not found"}},
)
async def get_project(project_id: int, service: ProjectServiceDep) -> Project:
    return await service.get(project_id)


@router.post(
    "",
    response_model=Project,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    responses={
        201: {"description": "Project created"},
        400: {"description": "Validation error or unknown owner"},
    },
)
async def create_project(data: ProjectCreate, service: ProjectServiceDep) -> Project:
    return await service.create(data)


@router.put(
    "/{project_id}",
    response_model=Project,
    summary="Update project",
    responses={
        400: {"description": "Validation error or unknown owner"},
        404: {"description": "Project not found"},
    },
)
async def update_project(
    project_id: int, data: ProjectUpdate, service: ProjectServiceDep
) -> Project:
    return await service.update(project_id, data)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={404: {"description": "Project not found"}},
)
async def delete_project(project_id: int, service: ProjectServiceDep) -> None:
    await service.delete(project_id)
