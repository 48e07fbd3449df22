"""Integration test fixtures: an app around the per-test store and an HTTP client.

The app is built with an injected store, so nothing is seeded and each test
starts from empty tables.
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.app.main import create_app
from src.app.repositories import Store


@pytest.fixture
def app(store: Store) -> FastAPI:
    return create_app(store=store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client bound to the app."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
