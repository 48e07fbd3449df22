"""Force a JSON content type on every /api response."""

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

API_PREFIX = "/api"


async def json_content_type_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    """Mark every /api/* response as application/json."""
    response = await call_next(request)
    path = request.url.path
    if path == API_PREFIX or path.startswith(f"{API_PREFIX}/"):
        response.headers["Content-Type"] = "application/json"
    return response
