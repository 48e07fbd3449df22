"""Repository for User entity."""

from src.app.models import User
from src.app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """Repository for User entity."""

    model = User

    async def get_by_username(self, username: str) -> User | None:
        """Get user by username."""
        return await self.find_first(username=username)

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email address."""
        return await self.find_first(email=email)

    async def exists_by_username(self, username: str) -> bool:
        return await self.get_by_username(username) is not None

    async def exists_by_email(self, email: str) -> bool:
        """Check if a user with the given email exists."""
        return await self.get_by_email(email) is not None
