"""Health Probe — liveness endpoint for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - Reports the number of live navigation sessions (no external dependencies to probe)
"""

import logging
from fastapi import APIRouter, Request, status

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check(request: Request):
    """Basic liveness probe. Returns 200 if the process is up."""
    registry = getattr(request.app.state, "navigation_sessions", None)
    return {
        "status": "healthy",
        "service": "trinity-flow-api",
        "version": "1.0.0",
        "navigation_sessions": len(registry) if registry is not None else 0,
    }
