"""Health Probe — liveness endpoint used by the load runner before each run.

Invariants:
    - GET /health always returns 200 with an empty body if the process is up
"""

from fastapi import APIRouter, Response, status

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Liveness probe. Empty 200."""
    return Response(status_code=status.HTTP_200_OK)
