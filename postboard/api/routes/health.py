"""Health & Readiness Checks — liveness and readiness for the local server.

Invariants:
    - GET /api/v1/health/ always returns 200 if process is up (liveness)
    - GET /api/v1/health/ready returns 503 if the post table is unreachable
    - readiness_check is a plain def: FastAPI runs its blocking table call in the threadpool
"""

import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from postboard.core.repository_protocols import PostRepository
from postboard.dependencies import get_repository

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "postboard",
        "version": "1.0.0",
    }


@router.get("/ready")
def readiness_check(
    repository: PostRepository = Depends(get_repository),
):
    """Readiness check — includes post table reachability."""
    if not repository.health_check():
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "reason": "storage_unavailable",
            },
        )
    return {"status": "ready", "checks": {"storage": "healthy"}}
