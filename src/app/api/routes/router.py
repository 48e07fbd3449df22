from fastapi import APIRouter

from src.app.api.routes import collaborators, conversations, files, health, projects, users

api_router = APIRouter(prefix="/api")
api_router.include_router(health.router)
api_router.include_router(users.router)
api_router.include_router(projects.router)
api_router.include_router(files.router)
api_router.include_router(collaborators.router)
api_router.include_router(conversations.router)
