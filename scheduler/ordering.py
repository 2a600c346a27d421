"""
The two ordering strategies.

ArrivalOrdering (default): every job goes to the tail. Priority is recorded
on the job but ignored, so jobs render strictly in submission order.

PriorityFrontOrdering: high priority jobs are linked in at the head, right
behind whatever the worker is rendering at the moment (the active job has
already been dequeued, so it is never interrupted). Normal and low go to the
tail. Two high jobs submitted back to back end up newest-first, since each
one is pushed in front of the other.
"""

from models.enums import JobPriority, OrderingPolicy
from models.job import RenderJob
from scheduler.base import AbstractOrdering
from scheduler.fifo import FIFOQueue


class ArrivalOrdering(AbstractOrdering):

    def place(self, queue: FIFOQueue[RenderJob], job: RenderJob) -> None:
        queue.enqueue(job)

    @property
    def policy_name(self) -> str:
        return OrderingPolicy.FIFO.value


class PriorityFrontOrdering(AbstractOrdering):

    def place(self, queue: FIFOQueue[RenderJob], job: RenderJob) -> None:
        if job.priority is JobPriority.HIGH:
            queue.enqueue_front(job)
        else:
            queue.enqueue(job)

    @property
    def policy_name(self) -> str:
        return OrderingPolicy.PRIORITY_FRONT.value
