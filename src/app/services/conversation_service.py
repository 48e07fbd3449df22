"""AI conversation service.

Conversations are append-only in normal use: the UI adds the user's prompt
and then the assistant's reply, one message at a time.
"""

from src.app.core.exceptions import NotFoundError
from src.app.core.logging import bind_entity_context, get_logger
from src.app.models import AIConversation, ChatMessage
from src.app.repositories import AIConversationRepository, ProjectRepository, UserRepository
from src.app.schemas.conversation import AIConversationCreate, AIConversationUpdate
from src.app.services.references import ensure_exists

logger = get_logger(__name__)


class ConversationService:
    def __init__(
        self,
        conversation_repo: AIConversationRepository,
        user_repo: UserRepository,
        project_repo: ProjectRepository,
    ):
        self.conversation_repo = conversation_repo
        self.user_repo = user_repo
        self.project_repo = project_repo

    async def get(self, conversation_id: int) -> AIConversation:
        conversation = await self.conversation_repo.get_by_id(conversation_id)
        if conversation is None:
            raise NotFoundError("AI conversation not found")
        return conversation

    async def create(self, data: AIConversationCreate) -> AIConversation:
        await ensure_exists(self.user_repo, data.user_id, "userId", "User")
        if data.project_id is not None:
            await ensure_exists(self.project_repo, data.project_id, "projectId", "Project")

        conversation = await self.conversation_repo.create(data)
        logger.info(
            "AI conversation started",
            conversation_id=conversation.id,
            user_id=conversation.user_id,
            messages=len(conversation.messages),
        )
        return conversation

    async def append_message(self, conversation_id: int, message: ChatMessage) -> AIConversation:
        """Add ``message`` after the existing ones and persist the result.

        Read, append and write happen under the conversations lock so two
        concurrent appends cannot drop each other's message.

        Raises:
            NotFoundError: If the conversation does not exist.
        """
        bind_entity_context("conversation", conversation_id)
        async with self.conversation_repo.lock:
            conversation = await self.get(conversation_id)
            messages = (*conversation.messages, message)
            updated = await self.conversation_repo.update(
                conversation_id, AIConversationUpdate(messages=messages)
            )

        if updated is None:
            raise NotFoundError("AI conversation not found")
        logger.debug("Message appended", role=message.role.value, count=len(updated.messages))
        return updated

    async def delete(self, conversation_id: int) -> None:
        async with self.conversation_repo.lock:
            deleted = await self.conversation_repo.delete(conversation_id)
        if not deleted:
            raise NotFoundError("AI conversation not found")
        logger.info("AI conversation deleted", conversation_id=conversation_id)
