"""
Health check endpoint.

There are no external services to ping; this reports that the API is up and
whether the render worker is currently draining the queue.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from scheduler.engine import RenderScheduler

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check(
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> dict:
    return {
        "status": "healthy",
        "worker": "active" if scheduler.is_active else "idle",
    }
