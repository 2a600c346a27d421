"""
Scheduler control endpoints.

GET /scheduler/status   → ordering policy, queue depth, worker activity, waiting line
PUT /scheduler/ordering → switch ordering policy at runtime

Switching ordering only affects where NEW submissions land. Jobs already in
the queue keep their position.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_scheduler
from api.schemas.scheduler import OrderingConfig, SchedulerStatus
from scheduler.engine import RenderScheduler

router = APIRouter(prefix="/scheduler", tags=["scheduler"])


def _status(scheduler: RenderScheduler) -> SchedulerStatus:
    return SchedulerStatus(
        ordering_policy=scheduler.ordering_policy,
        queue_depth=scheduler.queue_depth,
        worker_active=scheduler.is_active,
        waiting=[job.id for job in scheduler.waiting_line()],
    )


@router.get("/status", response_model=SchedulerStatus)
async def get_scheduler_status(
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    return _status(scheduler)


@router.put("/ordering", response_model=SchedulerStatus)
async def set_ordering_policy(
    config: OrderingConfig,
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> SchedulerStatus:
    scheduler.set_ordering(config.policy)
    return _status(scheduler)
