"""
FastAPI application factory.

This file:
1. Creates the FastAPI app
2. Runs startup logic (build the RenderScheduler)
3. Registers all routers (renders, scheduler, health)
4. Runs shutdown logic (stop the render worker)

Everything lives in this one process and on one event loop: the route
handlers call scheduler.submit() and the worker task renders in between
requests. Restarting the process drops every queued job and all history.

To run:  uvicorn api.main:app --host 0.0.0.0 --port 8000 --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from config.settings import settings
from api.routers import renders, scheduler, health
from scheduler.engine import RenderScheduler

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # ── Startup ─────────────────────────────────────────────────
    app.state.scheduler = RenderScheduler()
    logger.info(
        f"API ready: ordering={app.state.scheduler.ordering_policy}, "
        f"time scale={settings.RENDER_TIME_SCALE}"
    )

    yield

    # ── Shutdown ────────────────────────────────────────────────
    await app.state.scheduler.shutdown()
    logger.info("API shut down")


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    app = FastAPI(
        title="Render Queue",
        description="Single-worker render job queue with per-segment supersession",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.include_router(health.router)
    app.include_router(renders.router)
    app.include_router(scheduler.router)

    return app


# This is what uvicorn imports: `uvicorn api.main:app`
app = create_app()
