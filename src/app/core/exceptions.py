"""Domain errors and the exception handlers that turn them into JSON responses."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from asgi_correlation_id import correlation_id
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from src.app.core.logging import get_logger

logger = get_logger(__name__)

# FastAPI prefixes error locations with where the value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


@dataclass(frozen=True)
class ValidationIssue:
    """A single field-level validation failure."""

    path: tuple[str | int, ...]
    message: str

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "message": self.message}


class AppError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AppError):
    """Malformed, missing or out-of-range input. Always client-correctable."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Validation error"

    def __init__(self, issues: Sequence[ValidationIssue], detail: str | None = None):
        super().__init__(detail)
        self.issues = list(issues)

    @classmethod
    def from_pydantic(
        cls, exc: PydanticValidationError, detail: str | None = None
    ) -> "ValidationError":
        return cls(issues_from_errors(exc.errors()), detail)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls([ValidationIssue(path=(field,), message=message)])

    @classmethod
    def missing_query(cls, *names: str) -> "ValidationError":
        """A list endpoint was called without any of its required filters."""
        return cls(
            [ValidationIssue(path=(name,), message="Field required") for name in names],
            detail=f"Missing {' or '.join(names)} query parameter",
        )


class NotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Resource not found"


class ConflictError(AppError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Resource already exists"


def issues_from_errors(errors: Sequence[Any]) -> list[ValidationIssue]:
    """Convert pydantic/FastAPI error dicts into validation issues.

    The leading request location (``body``, ``query``...) is dropped so that
    paths name the field the client sent.
    """
    issues = []
    for error in errors:
        loc = tuple(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        issues.append(ValidationIssue(path=loc, message=error.get("msg", "Invalid value")))
    return issues


def _error_content(detail: Any, **extra: Any) -> dict[str, Any]:
    return {"detail": detail, **extra, "request_id": correlation_id.get()}


def setup_exception_handlers(app: FastAPI) -> None:
    """Configure exception handlers that include request_id in responses."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=_error_content(
                exc.detail, errors=[issue.to_dict() for issue in exc.issues]
            ),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        issues = issues_from_errors(exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_error_content(
                ValidationError.default_detail, errors=[issue.to_dict() for issue in issues]
            ),
        )

    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_content(exc.detail))

    @app.exception_handler(StarletteHTTPException)
    async def starlette_exception_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_content(exc.detail))

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_content(exc.detail))

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = correlation_id.get()
        logger.exception(
            "Unhandled exception",
            exc_info=exc,
            request_id=request_id,
            path=request.url.path,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "detail": "Internal server error",
                "request_id": request_id,
            },
        )
