"""Repository for AIConversation entity."""

from src.app.models import AIConversation
from src.app.repositories.base import BaseRepository


class AIConversationRepository(BaseRepository[AIConversation]):
    model = AIConversation

    async def list_by_user(self, user_id: int) -> list[AIConversation]:
        return await self.filter_by(user_id=user_id)
