"""AI conversation endpoints.

Messages are appended one at a time through ``PUT /{id}/messages``; the
stored sequence is never replaced by a client.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Query, status

from src.app.api.dependencies import ConversationRepo, ConversationServiceDep
from src.app.core.exceptions import ValidationError
from src.app.models import AIConversation
from src.app.schemas.conversation import AIConversationCreate
from src.app.schemas.validation import parse_message

router = APIRouter(prefix="/ai-conversations", tags=["ai-conversations"])


@router.get(
    "",
    response_model=list[AIConversation],
    summary="List AI conversations",
    responses={400: {"description": "Missing userId query parameter"}},
)
async def list_conversations(
    repo: ConversationRepo,
    user_id: Annotated[int | None, Query(alias="userId")] = None,
) -> list[AIConversation]:
    if user_id is None:
        raise ValidationError.missing_query("userId")
    return await repo.list_by_user(user_id)


@router.get(
    "/{conversation_id}",
    response_model=AIConversation,
    summary="Get AI conversation",
    responses={404: {"description": "AI conversation not found"}},
)
async def get_conversation(
    conversation_id: int, service: ConversationServiceDep
) -> AIConversation:
    return await service.get(conversation_id)


@router.post(
    "",
    response_model=AIConversation,
    status_code=status.HTTP_201_CREATED,
    summary="Start AI conversation",
    responses={400: {"description": "Validation error or unknown user/project"}},
)
async def create_conversation(
    data: AIConversationCreate, service: ConversationServiceDep
) -> AIConversation:
    return await service.create(data)


@router.put(
    "/{conversation_id}/messages",
    response_model=AIConversation,
    summary="Append message",
    responses={
        200: {
            "description": "Conversation with the message appended",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "userId": 1,
                        "projectId": 1,
                        "messages": [
                            {"role": "user", "content": "How do I create a React component?"},
                            {"role": "assistant", "content": "Here's a simple example..."},
                        ],
                        "createdAt": "2024-01-15T10:30:00Z",
                        "updatedAt": "2024-01-15T10:31:12Z",
                    }
                }
            },
        },
        400: {"description": "Invalid message format"},
        404: {"description": "AI conversation not found"},
    },
)
async def append_message(
    conversation_id: int,
    service: ConversationServiceDep,
    payload: Annotated[Any, Body()] = None,
) -> AIConversation:
    """Append one ``{role, content}`` message.

    The conversation is looked up before the body is validated, so an unknown
    id is a 404 whatever the body holds.
    """
    await service.get(conversation_id)
    message = parse_message(payload)
    return await service.append_message(conversation_id, message)


@router.delete(
    "/{conversation_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete AI conversation",
    responses={404: {"description": "AI conversation not found"}},
)
async def delete_conversation(conversation_id: int, service: ConversationServiceDep) -> None:
    await service.delete(conversation_id)
