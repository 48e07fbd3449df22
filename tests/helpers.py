"""Test helper functions for common data creation patterns."""

from src.app.models import AIConversation, File, Project, User
from src.app.repositories import Store
from src.app.services import UserService
from tests.factories import (
    AIConversationCreateFactory,
    FileCreateFactory,
    ProjectCreateFactory,
    UserCreateFactory,
    user_message,
)


async def create_user(store: Store, **user_kwargs) -> User:
    """Register a user through the service, so the password is hashed."""
    return await UserService(store.users).register(UserCreateFactory.build(**user_kwargs))


async def create_project(store: Store, owner: User | None = None, **project_kwargs) -> Project:
    """Create a project, registering an owner first if none is given."""
    if owner is None:
        owner = await create_user(store)
    return await store.projects.create(
        ProjectCreateFactory.build(owner_id=owner.id, **project_kwargs)
    )


async def create_project_with_files(
    store: Store, file_count: int = 2
) -> tuple[User, Project, list[File]]:
    """Create a user owning one project with ``file_count`` files.

    Returns:
        Tuple of (owner, project, files)
    """
    owner = await create_user(store)
    project = await create_project(store, owner)
    files = [
        await store.files.create(FileCreateFactory.build(project_id=project.id))
        for _ in range(file_count)
    ]
    return owner, project, files


async def create_conversation(
    store: Store, user: User | None = None, **conversation_kwargs
) -> AIConversation:
    """Create a conversation holding one user message."""
    if user is None:
        user = await create_user(store)
    conversation_kwargs.setdefault("messages", (user_message(),))
    return await store.ai_conversations.create(
        AIConversationCreateFactory.build(user_id=user.id, **conversation_kwargs)
    )


def user_payload(**overrides) -> dict:
    """A valid registration body in wire (camelCase) form."""
    payload = {
        "username": "alice",
        "password": "secret123",
        "email": "alice@example.com",
        "fullName": "Alice Example",
    }
    payload.update(overrides)
    return payload
