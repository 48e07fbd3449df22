from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from prometheus_fastapi_instrumentator import Instrumentator

from src.app.api.middlewares import setup_middlewares
from src.app.api.routes.router import api_router
from src.app.core.config import get_settings
from src.app.core.exceptions import setup_exception_handlers
from src.app.core.logging import get_logger, setup_logging
from src.app.core.seed import seed_demo_data
from src.app.repositories import Store

logger = get_logger(__name__)

OPENAPI_TAGS = [
    {"name": "health", "description": "Liveness probe"},
    {"name": "users", "description": "User registration and profiles"},
    {"name": "projects", "description": "Projects owned by users"},
    {"name": "files", "description": "Source files inside projects"},
    {"name": "collaborators", "description": "Users invited to a project"},
    {"name": "ai-conversations", "description": "AI assistant chat history"},
]


def create_app(store: Store | None = None) -> FastAPI:
    """Build the application around ``store``.

    When no store is given a fresh one is created and, if enabled in settings,
    filled with demo data at startup. An injected store is used as-is.
    """
    settings = get_settings()
    seed_on_startup = store is None and settings.seed_demo_data
    store = store if store is not None else Store()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Application lifespan - startup and shutdown."""
        setup_logging(settings.debug)
        logger.info(f"Starting {settings.app_name}", env=settings.app_env)
        if seed_on_startup:
            await seed_demo_data(app.state.store)

        yield

        logger.info("Shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Storage and validation API behind the DevSandbox cloud IDE",
        version="0.1.0",
        openapi_tags=OPENAPI_TAGS,
        lifespan=lifespan,
        docs_url="/docs" if settings.enable_openapi else None,
        redoc_url="/redoc" if settings.enable_openapi else None,
        openapi_url="/openapi.json" if settings.enable_openapi else None,
    )
    app.state.store = store

    setup_exception_handlers(app)
    setup_middlewares(app, settings)
    app.include_router(api_router)

    Instrumentator().instrument(app).expose(app, endpoint="/metrics", include_in_schema=False)

    return app


app = create_app()
