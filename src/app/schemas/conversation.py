"""AI conversation schemas."""

from pydantic import StrictInt, field_validator

from src.app.models.base import CamelModel
from src.app.models.conversation import ChatMessage


class AIConversationCreate(CamelModel):
    user_id: StrictInt
    project_id: StrictInt | None = None
    messages: tuple[ChatMessage, ...] = ()


class AIConversationUpdate(CamelModel):
    """Partial update of a conversation.

    Clients append through the messages endpoint; replacing ``messages``
    wholesale is reserved for internal callers.
    """

    project_id: StrictInt | None = None
    messages: tuple[ChatMessage, ...] | None = None

    @field_validator("messages")
    @classmethod
    def reject_null(
        cls, v: tuple[ChatMessage, ...] | None
    ) -> tuple[ChatMessage, ...]:
        if v is None:
            raise ValueError("Field cannot be null")
        return v
