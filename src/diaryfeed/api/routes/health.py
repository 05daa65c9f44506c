"""Health check endpoint."""

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Liveness check for the diary feed API; does not contact the feed endpoint."""
    return {"status": "ok"}
