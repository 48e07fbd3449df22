"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import UserCreateFactory, ProjectCreateFactory, ...
"""

from tests.factories.base import BaseFactory, short_id
from tests.factories.conversation import (
    AIConversationCreateFactory,
    assistant_message,
    user_message,
)
from tests.factories.project import (
    CollaboratorCreateFactory,
    FileCreateFactory,
    ProjectCreateFactory,
)
from tests.factories.user import DEFAULT_TEST_PASSWORD, UserCreateFactory

__all__ = [
    # Base
    "BaseFactory",
    "short_id",
    # User
    "DEFAULT_TEST_PASSWORD",
    "UserCreateFactory",
    # Project
    "CollaboratorCreateFactory",
    "FileCreateFactory",
    "ProjectCreateFactory",
    # AI conversation
    "AIConversationCreateFactory",
    "assistant_message",
    "user_message",
]
