"""
Liveness check.

``GET /user`` answers ``{"op": "Success"}`` whenever the process is
serving requests.  It touches no state and cannot fail.
"""

import logging

from fastapi import APIRouter

from user_directory.app.schemas.user import HealthStatus

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/user", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    logger.info("GET /user - Health check")
    return HealthStatus(op="Success")
