"""User endpoints. Responses never include the password."""

from fastapi import APIRouter, status

from src.app.api.dependencies import UserServiceDep
from src.app.models import User
from src.app.schemas.user import UserCreate, UserRead, UserUpdate

router = APIRouter(prefix="/users", tags=["users"])


def to_user_read(user: User) -> UserRead:
    """Shape a stored user for a client, dropping the password."""
    return UserRead.model_validate(user.model_dump(exclude={"password"}))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user",
    responses={
        200: {
            "description": "User profile",
            "content": {
                "application/json": {
                    "example": {
                        "id": 1,
                        "username": "demouser",
                        "email": "demo@devsandbox.ai",
                        "fullName": "Demo User",
                        "avatarUrl": None,
                        "createdAt": "2024-01-15T10:30:00Z",
                    }
                }
            },
        },
        404: {"description": "User not found"},
    },
)
async def get_user(user_id: int, service: UserServiceDep) -> UserRead:
    return to_user_read(await service.get(user_id))


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    responses={
        201: {"description": "User created"},
        400: {"description": "Validation error"},
        409: {"description": "Username or email already exists"},
    },
)
async def create_user(data: UserCreate, service: UserServiceDep) -> UserRead:
    """Register a new user.

    Username is checked before email, so a request colliding on both is
    reported as a username conflict.
    """
    return to_user_read(await service.register(data))


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update user",
    responses={
        200: {"description": "User updated"},
        400: {"description": "Validation error"},
        404: {"description": "User not found"},
        409: {"description": "Username or email already exists"},
    },
)
async def update_user(user_id: int, data: UserUpdate, service: UserServiceDep) -> UserRead:
    """Update only the fields present in the body."""
    return to_user_read(await service.update(user_id, data))


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user",
    responses={404: {"description": "User not found"}},
)
async def delete_user(user_id: int, service: UserServiceDep) -> None:
    await service.delete(user_id)
