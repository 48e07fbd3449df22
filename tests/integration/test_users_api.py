"""User registration and profile endpoints."""

import pytest
from httpx import AsyncClient

from src.app.core.security import verify_password
from src.app.repositories import Store
from tests.helpers import user_payload

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


class TestRegister:
    async def test_short_username_is_rejected(self, client: AsyncClient, store: Store):
        response = await client.post("/api/users", json=user_payload(username="ab"))

        assert response.status_code == 400
        data = response.json()
        assert data["detail"] == "Validation error"
        assert data["errors"][0]["path"] == ["username"]
        assert await store.users.count() == 0

    async def test_created_user_has_no_password(self, client: AsyncClient, store: Store):
        response = await client.post("/api/users", json=user_payload(username="abc"))

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["username"] == "abc"
        assert data["fullName"] == "Alice Example"
        assert "createdAt" in data
        assert "password" not in data

        stored = await store.users.get_by_id(1)
        assert verify_password("secret123", stored.password)

    async def test_long_password_and_username_accepted(
        self, client: AsyncClient, store: Store
    ):
        password = "p" * 101
        username = "u" * 60

        response = await client.post(
            "/api/users", json=user_payload(username=username, password=password)
        )

        assert response.status_code == 201
        fetched = await client.get(f"/api/users/{response.json()['id']}")
        assert fetched.json()["username"] == username
        stored = await store.users.get_by_id(response.json()["id"])
        assert verify_password(password, stored.password)

    async def test_repeat_username_conflicts(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.post(
            "/api/users", json=user_payload(email="other@example.com")
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Username already exists"

    async def test_repeat_email_conflicts(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.post("/api/users", json=user_payload(username="bob"))

        assert response.status_code == 409
        assert response.json()["detail"] == "Email already exists"

    async def test_both_taken_reports_username(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.post("/api/users", json=user_payload())

        assert response.json()["detail"] == "Username already exists"

    async def test_invalid_email(self, client: AsyncClient):
        response = await client.post("/api/users", json=user_payload(email="not-an-email"))

        assert response.status_code == 400
        assert response.json()["errors"][0]["path"] == ["email"]

    async def test_missing_fields_are_listed(self, client: AsyncClient):
        response = await client.post("/api/users", json={"username": "alice"})

        assert response.status_code == 400
        paths = {tuple(e["path"]) for e in response.json()["errors"]}
        assert {("password",), ("email",)} <= paths

    async def test_server_fields_in_body_are_ignored(self, client: AsyncClient):
        response = await client.post(
            "/api/users", json=user_payload(id=99, createdAt="2000-01-01T00:00:00Z")
        )

        assert response.status_code == 201
        assert response.json()["id"] == 1
        assert not response.json()["createdAt"].startswith("2000")


class TestGetUser:
    async def test_get_existing(self, client: AsyncClient):
        created = (await client.post("/api/users", json=user_payload())).json()

        response = await client.get(f"/api/users/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_unknown_user(self, client: AsyncClient):
        response = await client.get("/api/users/999")

        assert response.status_code == 404
        assert response.json()["detail"] == "User not found"


class TestUpdateAndDelete:
    async def test_partial_update(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.put("/api/users/1", json={"fullName": "Alice Renamed"})

        assert response.status_code == 200
        data = response.json()
        assert data["fullName"] == "Alice Renamed"
        assert data["username"] == "alice"
        assert "password" not in data

    async def test_update_to_taken_username(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())
        await client.post(
            "/api/users", json=user_payload(username="bob", email="bob@example.com")
        )

        response = await client.put("/api/users/2", json={"username": "alice"})

        assert response.status_code == 409

    async def test_null_username_is_rejected(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.put("/api/users/1", json={"username": None})

        assert response.status_code == 400

    async def test_update_unknown_user(self, client: AsyncClient):
        response = await client.put("/api/users/5", json={"fullName": "Ghost"})

        assert response.status_code == 404

    async def test_delete(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())

        response = await client.delete("/api/users/1")

        assert response.status_code == 204
        assert (await client.get("/api/users/1")).status_code == 404
        assert (await client.delete("/api/users/1")).status_code == 404

    async def test_username_is_free_again_after_delete(self, client: AsyncClient):
        await client.post("/api/users", json=user_payload())
        await client.delete("/api/users/1")

        response = await client.post("/api/users", json=user_payload())

        assert response.status_code == 201
        assert response.json()["id"] == 2
