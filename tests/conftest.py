"""
Shared test fixtures.

No real waiting happens in these tests:
- Schedulers run with a tiny time scale, so a 1000ms "render" sleeps 1ms
- The slow_* fixtures use real time for tests that need a job to stay
  pending; their teardown cancels the worker instead of waiting for it
- HTTP server → httpx.AsyncClient with ASGI transport (no network)
"""

import asyncio

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport

from api.dependencies import get_scheduler
from api.main import create_app
from effects.durations import DurationPolicy, coerce_effect
from scheduler.engine import RenderScheduler

FAST_TIME_SCALE = 0.001

TEST_DURATIONS_MS = {
    "color_grade": 800,
    "blur": 600,
    "trim": 200,
    "speed_change": 500,
    "transition": 1000,
}


class RecordingPolicy(DurationPolicy):
    """Duration table that remembers which effects the worker asked about, in order."""

    def __init__(self, durations_ms):
        super().__init__(durations_ms)
        self.calls = []

    def duration_for(self, effect):
        self.calls.append(coerce_effect(effect).value)
        return super().duration_for(effect)


@pytest.fixture
def policy():
    return RecordingPolicy(TEST_DURATIONS_MS)


@pytest_asyncio.fixture
async def scheduler(policy):
    sched = RenderScheduler(duration_policy=policy, ordering="fifo", time_scale=FAST_TIME_SCALE)
    yield sched
    await sched.shutdown()


@pytest_asyncio.fixture
async def slow_scheduler(policy):
    """Real-time renders: anything queued behind the first job stays pending for the test."""
    sched = RenderScheduler(duration_policy=policy, ordering="fifo", time_scale=1.0)
    yield sched
    await sched.shutdown()


@pytest.fixture
def wait_for_status():
    """
    Returns a coroutine function that yields to the event loop until a job
    reaches the given status (or fails the test after `timeout` seconds).
    """
    async def _wait(sched, job_id, status, timeout=2.0):
        loop = asyncio.get_running_loop()
        deadline = loop.time() + timeout
        while sched.get_job(job_id).status is not status:
            if loop.time() > deadline:
                raise AssertionError(
                    f"{job_id} stuck in {sched.get_job(job_id).status.value}, expected {status.value}"
                )
            await asyncio.sleep(0)

    return _wait


def _app_for(sched: RenderScheduler):
    """
    Build the app with get_scheduler overridden.

    ASGITransport does not run the lifespan, so the scheduler created by the
    fixture is the only one in play.
    """
    app = create_app()

    async def override_get_scheduler():
        return sched

    app.dependency_overrides[get_scheduler] = override_get_scheduler
    return app


@pytest_asyncio.fixture
async def client(scheduler):
    transport = ASGITransport(app=_app_for(scheduler))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def slow_client(slow_scheduler):
    transport = ASGITransport(app=_app_for(slow_scheduler))
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
