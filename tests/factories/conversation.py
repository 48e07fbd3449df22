"""AI conversation payload factories."""

from src.app.models import ChatMessage, MessageRole
from src.app.schemas import AIConversationCreate
from tests.factories.base import BaseFactory


def user_message(content: str = "How do I reverse a list?") -> ChatMessage:
    return ChatMessage(role=MessageRole.USER, content=content)


def assistant_message(content: str = "Use reversed() or slice with [::-1].") -> ChatMessage:
    return ChatMessage(role=MessageRole.ASSISTANT, content=content)


class AIConversationCreateFactory(BaseFactory):
    __model__ = AIConversationCreate

    project_id = None
    messages = ()
