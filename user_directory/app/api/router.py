"""
Top‑level router of the API.

The health check keeps its historical path ``/user`` at the root,
while the user collection lives under ``/api/users``.
"""

from fastapi import APIRouter

from .endpoints import health, users

router = APIRouter()

router.include_router(health.router, tags=["health"])
router.include_router(users.router, prefix="/api/users", tags=["users"])
