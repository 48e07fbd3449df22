"""Store dependency - the store is built once and lives on app.state."""

from typing import Annotated

from fastapi import Depends, Request

from src.app.repositories import Store


def get_store(request: Request) -> Store:
    """Get the application's store."""
    return request.app.state.store


StoreDep = Annotated[Store, Depends(get_store)]
