"""AI conversation records."""

from pydantic import ConfigDict

from src.app.models.base import CamelModel, TimestampedRecord
from src.app.models.enums import MessageRole


class ChatMessage(CamelModel):
    """One turn of an AI conversation."""

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str


class AIConversation(TimestampedRecord):
    """An ordered, append-only chat between a user and the assistant."""

    user_id: int
    project_id: int | None = None
    messages: tuple[ChatMessage, ...] = ()
