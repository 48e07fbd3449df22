"""Application middlewares."""

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.app.core.config import Settings

from .json_content_type import json_content_type_middleware
from .request_logging import request_logging_middleware

__all__ = [
    "setup_middlewares",
    "json_content_type_middleware",
    "request_logging_middleware",
]


def setup_middlewares(app: FastAPI, settings: Settings) -> None:
    """Configure all application middlewares.

    Starlette wraps each added middleware around the previous ones, so they
    are added innermost first.
    """

    # JSON content type for /api/* - closest to the routes
    @app.middleware("http")
    async def _json_content_type(request, call_next):  # type: ignore[no-untyped-def]
        return await json_content_type_middleware(request, call_next)

    # Request logging - binds request_id to structlog context
    @app.middleware("http")
    async def _request_logging(request, call_next):  # type: ignore[no-untyped-def]
        return await request_logging_middleware(request, call_next)

    # CORS - the editor UI runs on its own dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE"],
        allow_headers=["Content-Type", "X-Request-ID"],
    )

    # Correlation ID - generates/propagates X-Request-ID, outermost
    app.add_middleware(CorrelationIdMiddleware)
