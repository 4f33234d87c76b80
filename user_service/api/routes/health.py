"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health always returns 200 {"status": "ok"} if the process is up

Design Decisions:
    - No readiness probe: there is no external dependency to check
"""

from fastapi import APIRouter, status

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {"status": "ok"}
