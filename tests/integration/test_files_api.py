"""File endpoints - the editor's open and save calls."""

import pytest
from httpx import AsyncClient

from src.app.repositories import Store
from tests.helpers import create_project, create_project_with_files

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


async def test_list_files_of_project(client: AsyncClient, store: Store):
    _, project, files = await create_project_with_files(store, file_count=3)

    response = await client.get("/api/files", params={"projectId": project.id})

    assert response.status_code == 200
    assert [f["id"] for f in response.json()] == [f.id for f in files]


async def test_project_without_files(client: AsyncClient, store: Store):
    project = await create_project(store)

    response = await client.get(f"/api/files?projectId={project.id}")

    assert response.status_code == 200
    assert response.json() == []


async def test_missing_project_id(client: AsyncClient):
    response = await client.get("/api/files")

    assert response.status_code == 400
    assert response.json()["detail"] == "Missing projectId query parameter"


async def test_create_file(client: AsyncClient, store: Store):
    project = await create_project(store)

    response = await client.post(
        "/api/files",
        json={
            "projectId": project.id,
            "name": "app.py",
            "path": "/app.py",
            "content": "",
            "language": "python",
        },
    )

    assert response.status_code == 201
    data = response.json()
    assert data["projectId"] == project.id
    assert data["content"] == ""


async def test_create_file_in_unknown_project(client: AsyncClient):
    response = await client.post(
        "/api/files", json={"projectId": 9, "name": "a.py", "path": "/a.py"}
    )

    assert response.status_code == 400
    assert response.json()["errors"][0]["path"] == ["projectId"]


async def test_save_updates_content_only(client: AsyncClient, store: Store):
    _, _, [file] = await create_project_with_files(store, file_count=1)

    response = await client.put(f"/api/files/{file.id}", json={"content": "print(42)"})

    assert response.status_code == 200
    data = response.json()
    assert data["content"] == "print(42)"
    assert data["path"] == file.path
    assert data["language"] == file.language
    assert (await store.files.get_by_id(file.id)).content == "print(42)"


async def test_update_unknown_file(client: AsyncClient):
    response = await client.put("/api/files/999", json={"content": "x"})

    assert response.status_code == 404
    assert response.json()["detail"] == "File not found"


async def test_get_and_delete(client: AsyncClient, store: Store):
    _, _, [file] = await create_project_with_files(store, file_count=1)

    assert (await client.get(f"/api/files/{file.id}")).json()["name"] == file.name
    assert (await client.delete(f"/api/files/{file.id}")).status_code == 204
    assert (await client.get(f"/api/files/{file.id}")).status_code == 404


async def test_empty_name_is_accepted(client: AsyncClient, store: Store):
    project = await create_project(store)

    response = await client.post(
        "/api/files", json={"projectId": project.id, "name": "", "path": "/untitled"}
    )

    assert response.status_code == 201
    assert (await client.get(f"/api/files/{response.json()['id']}")).json()["name"] == ""
