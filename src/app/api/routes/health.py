from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health check")
async def health() -> dict[str, str]:
    """Liveness probe. The store is in-process, so there is nothing else to check."""
    return {"status": "ok"}
