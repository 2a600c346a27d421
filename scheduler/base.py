"""
Abstract base class for ordering strategies (Strategy pattern).

An ordering strategy answers one question: where in the FIFO queue does a
newly accepted RenderJob go? The RenderScheduler only knows about
AbstractOrdering; it calls place() without caring which rule is active.

To add a new ordering:
1. Create a class that inherits AbstractOrdering
2. Implement place() and policy_name
3. Register it in scheduler/registry.py

Strategies only get O(1) queue operations (enqueue / enqueue_front), so
whatever rule they implement, submission stays constant time.
"""

from abc import ABC, abstractmethod

from models.job import RenderJob
from scheduler.fifo import FIFOQueue


class AbstractOrdering(ABC):

    @abstractmethod
    def place(self, queue: FIFOQueue[RenderJob], job: RenderJob) -> None:
        """Insert a freshly created pending job into the queue."""
        ...

    @property
    @abstractmethod
    def policy_name(self) -> str:
        """Unique name for this ordering (e.g., 'fifo')."""
        ...
