"""Tests for the demo data loaded at startup."""

import pytest

from src.app.core.security import verify_password
from src.app.core.seed import DEMO_USERNAME, seed_demo_data
from src.app.models import MessageRole
from src.app.repositories import Store

pytestmark = [pytest.mark.unit, pytest.mark.asyncio]


async def test_seeds_one_of_each(store: Store):
    await seed_demo_data(store)

    assert await store.users.count() == 1
    assert await store.projects.count() == 1
    assert await store.files.count() == 2
    assert await store.ai_conversations.count() == 1
    assert await store.collaborators.count() == 0


async def test_demo_records_are_linked(store: Store):
    await seed_demo_data(store)

    user = await store.users.get_by_username(DEMO_USERNAME)
    assert user is not None
    assert verify_password("password123", user.password)

    [project] = await store.projects.list_by_owner(user.id)
    assert project.is_public is True
    files = await store.files.list_by_project(project.id)
    assert [f.name for f in files] == ["index.js", "styles.css"]

    [conversation] = await store.ai_conversations.list_by_user(user.id)
    assert conversation.project_id == project.id
    assert [m.role for m in conversation.messages] == [MessageRole.USER, MessageRole.ASSISTANT]


async def test_seeding_twice_is_a_no_op(store: Store):
    await seed_demo_data(store)
    await seed_demo_data(store)

    assert await store.users.count() == 1
    assert await store.files.count() == 2
