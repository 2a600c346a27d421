"""
Statistics over the scheduler's history.

A pure read: it walks the history once, counts every status, and averages
duration_ms over done jobs. The four counts always add up to total because
every job is in exactly one status.

completion_order lists done job ids in the order they finished. Under
priority_front ordering that differs from history (creation) order.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from models.enums import JobStatus
from models.job import RenderJob


@dataclass(frozen=True)
class SchedulerStats:
    total: int
    pending: int
    processing: int
    done: int
    cancelled: int
    avg_duration_ms: int   # 0 until at least one job is done
    completion_order: tuple[str, ...] = ()


def _round_half_up(value: float) -> int:
    # round() would give banker's rounding (2.5 → 2)
    return math.floor(value + 0.5)


def compute_stats(
    history: Iterable[RenderJob],
    completion_order: Optional[Sequence[str]] = None,
) -> SchedulerStats:
    """
    Aggregate a history into SchedulerStats.

    completion_order is the scheduler's own record of finished ids. Without
    it the order is rebuilt from completed_at (stable, so ties keep history order).
    """
    counts = {status: 0 for status in JobStatus}
    durations: list[int] = []
    finished: list[RenderJob] = []

    for job in history:
        counts[job.status] += 1
        if job.status is JobStatus.DONE and job.duration_ms is not None:
            durations.append(job.duration_ms)
            finished.append(job)

    avg = _round_half_up(sum(durations) / len(durations)) if durations else 0

    if completion_order is None:
        finished.sort(key=lambda job: job.completed_at)
        completion_order = [job.id for job in finished]

    return SchedulerStats(
        total=sum(counts.values()),
        pending=counts[JobStatus.PENDING],
        processing=counts[JobStatus.PROCESSING],
        done=counts[JobStatus.DONE],
        cancelled=counts[JobStatus.CANCELLED],
        avg_duration_ms=avg,
        completion_order=tuple(completion_order),
    )
