"""
Pydantic schemas for the /scheduler endpoints.

OrderingConfig: request body for switching the ordering policy at runtime.
SchedulerStatus: response showing current scheduler state.
"""

from pydantic import BaseModel

from models.enums import OrderingPolicy


class OrderingConfig(BaseModel):
    """Request body for PUT /scheduler/ordering."""

    policy: OrderingPolicy  # must be one of: fifo, priority_front


class SchedulerStatus(BaseModel):
    """Response body for GET /scheduler/status."""

    ordering_policy: str
    queue_depth: int           # nodes in the queue, lazily cancelled ones included
    worker_active: bool
    waiting: list[str]         # pending job ids in the order the worker will reach them
