import asyncio

from src.app.core.exceptions import ConflictError, NotFoundError
from src.app.core.logging import get_logger
from src.app.core.security import hash_password
from src.app.models import User
from src.app.repositories import UserRepository
from src.app.schemas.user import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """User registration and profile management."""

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    async def get(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def register(self, data: UserCreate) -> User:
        """Create a user after checking username, then email, are free.

        The check and the create share the users table lock so two concurrent
        registrations cannot both pass the check.

        Raises:
            ConflictError: If the username or the email is already taken.
        """
        # Hash off the event loop, outside the lock
        hashed = await asyncio.to_thread(hash_password, data.password)

        async with self.user_repo.lock:
            await self._ensure_unique(data.username, data.email, operation="register")
            user = await self.user_repo.create(data.model_copy(update={"password": hashed}))

        logger.info("User registered", user_id=user.id, username=user.username)
        return user

    async def update(self, user_id: int, data: UserUpdate) -> User:
        """Update user with provided data."""
        if data.password is not None:
            hashed = await asyncio.to_thread(hash_password, data.password)
            data = data.model_copy(update={"password": hashed})

        async with self.user_repo.lock:
            user = await self.get(user_id)
            await self._ensure_unique(
                data.username if data.username != user.username else None,
                data.email if data.email != user.email else None,
                operation="update",
            )
            updated = await self.user_repo.update(user_id, data)

        if updated is None:
            raise NotFoundError("User not found")
        logger.info("User updated", user_id=user_id, fields=sorted(data.model_fields_set))
        return updated

    async def delete(self, user_id: int) -> None:
        async with self.user_repo.lock:
            deleted = await self.user_repo.delete(user_id)
        if not deleted:
            raise NotFoundError("User not found")
        logger.info("User deleted", user_id=user_id)

    async def _ensure_unique(
        self, username: str | None, email: str | None, *, operation: str
    ) -> None:
        # Username is checked first: a request colliding on both reports the username
        if username is not None and await self.user_repo.exists_by_username(username):
            logger.info("Uniqueness conflict", field="username", operation=operation)
            raise ConflictError("Username already exists")
        if email is not None and await self.user_repo.exists_by_email(email):
            logger.info("Uniqueness conflict", field="email", operation=operation)
            raise ConflictError("Email already exists")
