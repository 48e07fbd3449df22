"""File endpoints - what the editor's file tree and save action call."""

from typing import Annotated

from fastapi import APIRouter, Query, status

from src.app.api.dependencies import FileRepo, FileServiceDep
from src.app.core.exceptions import ValidationError
from src.app.models import File
from src.app.schemas.file import FileCreate, FileUpdate

router = APIRouter(prefix="/files", tags=["files"])


@router.get(
    "",
    response_model=list[File],
    summary="List files",
    description="List the files of a project. `projectId` is required; "
    "a project without files yields an empty list.",
    responses={400: {"description": "Missing projectId query parameter"}},
)
async def list_files(
    repo: FileRepo,
    project_id: Annotated[int | None, Query(alias="projectId")] = None,
) -> list[File]:
    if project_id is None:
        raise ValidationError.missing_query("projectId")
    return await repo.list_by_project(project_id)


@router.get(
    "/{file_id}",
    response_model=File,
    summary="Get file",
    responses={404: {"description": "File not found"}},
)
async def get_file(file_id: int, service: FileServiceDep) -> File:
    return await service.get(file_id)


@router.post(
    "",
    response_model=File,
    status_code=status.HTTP_201_CREATED,
    summary="Create file",
    responses={400: {"description": "Validation error or unknown project"}},
)
async def create_file(data: FileCreate, service: FileServiceDep) -> File:
    return await service.create(data)


@router.put(
    "/{file_id}",
    response_model=File,
    summary="Update file",
    responses={
        400: {"description": "Validation error or unknown project"},
        404: {"description": "File not found"},
    },
)
async def update_file(file_id: int, data: FileUpdate, service: FileServiceDep) -> File:
    return await service.update(file_id, data)


@router.delete(
    "/{file_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete file",
    responses={404: {"description": "File not found"}},
)
async def delete_file(file_id: int, service: FileServiceDep) -> None:
    await service.delete(file_id)
