"""
FastAPI dependency injection.

An endpoint declares `scheduler: RenderScheduler = Depends(get_scheduler)` and
receives the one scheduler created during app startup. Tests swap it out via
app.dependency_overrides[get_scheduler].
"""

from fastapi import Request

from scheduler.engine import RenderScheduler


async def get_scheduler(request: Request) -> RenderScheduler:
    """Returns the RenderScheduler stored on the app during startup."""
    return request.app.state.scheduler
