"""
RenderJob: the unit of work and its state machine.

Lifecycle:

    pending ──> processing ──> done
       │
       └──────> cancelled

Nothing ever leaves processing except to done, and done/cancelled are terminal.
The transition methods below are the only code that writes `status`, so an
illegal move raises InvalidTransitionError instead of silently corrupting
the history.

Key fields:
- id: "RJ-001" style, assigned by the scheduler, never changes
- segment_id: NOT unique; resubmitting a segment creates a new record
- priority: stored on the record, ordering only looks at it when the
  priority_front policy is enabled
- duration_ms: present only once the job is done
- Timestamps at every lifecycle stage, like created_at/started_at/completed_at
"""

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from models.enums import EffectType, JobPriority, JobStatus
from models.errors import InvalidTransitionError


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class RenderJob:
    id: str
    segment_id: str
    effect: EffectType
    priority: JobPriority = JobPriority.NORMAL
    created_at: datetime = field(default_factory=_utcnow)
    status: JobStatus = JobStatus.PENDING
    duration_ms: Optional[int] = None
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # ── Transitions ─────────────────────────────────────────────

    def start(self) -> None:
        """pending → processing. Called by the worker when it pops the job."""
        self._require(JobStatus.PENDING, JobStatus.PROCESSING)
        self.status = JobStatus.PROCESSING
        self.started_at = _utcnow()

    def complete(self, duration_ms: int) -> None:
        """processing → done, recording how long the render took."""
        self._require(JobStatus.PROCESSING, JobStatus.DONE)
        self.status = JobStatus.DONE
        self.duration_ms = duration_ms
        self.completed_at = _utcnow()

    def cancel(self) -> None:
        """pending → cancelled. The queue node is left in place (lazy cancellation)."""
        self._require(JobStatus.PENDING, JobStatus.CANCELLED)
        self.status = JobStatus.CANCELLED

    def _require(self, expected: JobStatus, target: JobStatus) -> None:
        if self.status is not expected:
            raise InvalidTransitionError(self.id, self.status.value, target.value)

    # ── Read helpers ────────────────────────────────────────────

    @property
    def is_terminal(self) -> bool:
        return self.status in (JobStatus.DONE, JobStatus.CANCELLED)

    def snapshot(self) -> "RenderJob":
        """Detached copy handed to readers so they can't mutate scheduler state."""
        return dataclasses.replace(self)

    def __repr__(self) -> str:
        return f"<RenderJob {self.id} [{self.segment_id}/{self.effect.value}] {self.status.value}>"
