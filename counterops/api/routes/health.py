"""Health — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up
    - Never calls the counter service (a probe must not count hits)
"""

from fastapi import APIRouter, status

router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "counterops",
        "version": "1.0.0",
    }
