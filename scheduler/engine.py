"""
RenderScheduler: the core orchestrator.

It owns three things nobody else may touch:
- the FIFO queue of jobs waiting to render
- the history (every job ever created, in creation order)
- the single worker task that drains the queue

Flow of one submission:

    submit(seg, effect, priority)
        │
        ├─ validate effect (InvalidEffectError before anything changes)
        ├─ cancel any PENDING job for the same segment   (supersession)
        ├─ create a new PENDING RenderJob
        ├─ ordering.place(queue, job) + history.append(job)
        └─ start the worker if it is idle, return a snapshot immediately

Worker loop:

    while queue not empty:
        job = queue.dequeue()
        cancelled?  → skip it (lazy cancellation, the node was never removed)
        otherwise   → PROCESSING, sleep for the simulated duration, DONE
        lookup fails → CANCELLED, error logged, loop moves on to the next job

Everything runs on one asyncio event loop. submit() and
cancel_pending_for_segment() never await, so the cancel-then-append step can't
interleave with the worker's dequeue-then-start step. The only suspension
point is the simulated render itself, and new submissions accepted during it
never touch the job being rendered: it is no longer PENDING, so supersession
skips it, and it is no longer in the queue.

Only one worker ever runs. submit() sets _active synchronously before creating
the task, and the loop clears it in the same step in which it finds the queue
empty, so there is no window where two submits could both start a worker.
"""

import asyncio
import logging
from typing import Optional, Union

from config.settings import settings
from effects.durations import DurationPolicy, coerce_effect, default_duration_policy
from models.enums import EffectType, JobPriority, JobStatus, OrderingPolicy
from models.errors import InvalidEffectError, InvalidPriorityError
from models.job import RenderJob
from scheduler.base import AbstractOrdering
from scheduler.fifo import FIFOQueue
from scheduler.registry import create_ordering
from scheduler.stats import SchedulerStats, compute_stats

logger = logging.getLogger(__name__)


def _coerce_priority(priority: Union[JobPriority, str]) -> JobPriority:
    if isinstance(priority, JobPriority):
        return priority
    try:
        return JobPriority(priority)
    except ValueError:
        raise InvalidPriorityError(priority) from None


class RenderScheduler:

    def __init__(
        self,
        duration_policy: Optional[DurationPolicy] = None,
        ordering: Union[AbstractOrdering, OrderingPolicy, str, None] = None,
        time_scale: Optional[float] = None,
    ):
        self._queue: FIFOQueue[RenderJob] = FIFOQueue()
        self._history: list[RenderJob] = []
        self._jobs_by_id: dict[str, RenderJob] = {}
        self._counter: int = 0
        self._completion_order: list[str] = []   # ids of done jobs, in the order they finished

        self._duration_policy = (
            duration_policy if duration_policy is not None else default_duration_policy()
        )
        self._ordering = self._resolve_ordering(
            ordering if ordering is not None else settings.ORDERING_POLICY
        )

        self._time_scale = settings.RENDER_TIME_SCALE if time_scale is None else time_scale
        if self._time_scale < 0:
            raise ValueError(f"time_scale must be >= 0, got {self._time_scale}")

        self._active = False
        self._worker: Optional[asyncio.Task] = None

    # ── Submission ──────────────────────────────────────────────

    def submit(
        self,
        segment_id: str,
        effect: Union[EffectType, str],
        priority: Union[JobPriority, str] = JobPriority.NORMAL,
    ) -> RenderJob:
        """
        Accept a render job for a segment and return its PENDING snapshot.

        Fire-and-forget: the job renders later on the worker task. Must be
        called from code running on the event loop (the worker is started
        with loop.create_task); with no running loop this raises RuntimeError
        before any state changes.

        Raises:
            InvalidEffectError: effect is unknown or missing from the duration policy
            InvalidPriorityError: priority is not high/normal/low
        """
        loop = asyncio.get_running_loop()

        kind = coerce_effect(effect)
        if kind not in self._duration_policy:
            raise InvalidEffectError(kind.value)
        level = _coerce_priority(priority)

        self.cancel_pending_for_segment(segment_id)

        self._counter += 1
        job = RenderJob(
            id=f"RJ-{self._counter:03d}",
            segment_id=segment_id,
            effect=kind,
            priority=level,
        )
        self._ordering.place(self._queue, job)
        self._history.append(job)
        self._jobs_by_id[job.id] = job

        logger.info(
            f"Queued {job.id} [{segment_id}/{kind.value}] priority={level.value} "
            f"| queue depth: {self._queue.size()}"
        )

        self._ensure_worker(loop)
        return job.snapshot()

    def cancel_pending_for_segment(self, segment_id: str) -> list[RenderJob]:
        """
        Cancel every PENDING job for a segment. Returns snapshots of what was cancelled.

        A job already PROCESSING is left alone; the active render always runs
        to completion. Calling this when nothing is pending is a no-op.
        """
        cancelled = []
        for job in self._history:
            if job.segment_id == segment_id and job.status is JobStatus.PENDING:
                job.cancel()
                cancelled.append(job.snapshot())

        if cancelled:
            ids = ", ".join(j.id for j in cancelled)
            logger.info(f"Superseded pending job(s) for {segment_id}: {ids}")
        return cancelled

    # ── Worker ──────────────────────────────────────────────────

    def _ensure_worker(self, loop: asyncio.AbstractEventLoop) -> None:
        if self._active:
            return
        self._active = True
        self._worker = loop.create_task(self._run_loop(), name="render-worker")

    async def _run_loop(self) -> None:
        logger.info("Render worker started")
        try:
            while (job := self._queue.dequeue()) is not None:
                if job.status is JobStatus.CANCELLED:
                    logger.debug(f"Skipping cancelled job {job.id} [{job.segment_id}]")
                    continue
                try:
                    await self._render(job)
                except Exception as e:
                    # One bad job must not stall the ones queued behind it
                    logger.error(f"Render worker error on {job.id}: {e}", exc_info=True)
        except asyncio.CancelledError:
            logger.info("Render worker cancelled")
            raise
        finally:
            self._active = False
        logger.info("Render worker idle")

    async def _render(self, job: RenderJob) -> None:
        # Look the duration up while the job is still PENDING, so a failing
        # lookup can end it as cancelled instead of leaving it PROCESSING.
        try:
            duration_ms = self._duration_policy.duration_for(job.effect)
        except Exception:
            job.cancel()
            raise

        job.start()
        logger.info(f"Rendering {job.id} [{job.segment_id}/{job.effect.value}] ({duration_ms}ms)")

        await asyncio.sleep(duration_ms / 1000 * self._time_scale)

        job.complete(duration_ms)
        self._completion_order.append(job.id)
        logger.info(f"Job {job.id} [{job.segment_id}] done in {duration_ms}ms")

    async def wait_idle(self) -> None:
        """Wait until the worker has drained the queue, including restarts while waiting."""
        while self._worker is not None and not self._worker.done():
            await asyncio.shield(self._worker)

    async def shutdown(self) -> None:
        """Cancel the worker task. A job mid-render stays PROCESSING (nothing is persisted)."""
        worker = self._worker
        if worker is None or worker.done():
            return
        worker.cancel()
        await asyncio.gather(worker, return_exceptions=True)
        # A task cancelled before its first step never reaches the loop's finally
        self._active = False

    # ── Ordering ────────────────────────────────────────────────

    @staticmethod
    def _resolve_ordering(ordering: Union[AbstractOrdering, OrderingPolicy, str]) -> AbstractOrdering:
        if isinstance(ordering, AbstractOrdering):
            return ordering
        return create_ordering(ordering)

    def set_ordering(self, ordering: Union[AbstractOrdering, OrderingPolicy, str]) -> None:
        """Switch the ordering for future submissions. Queued jobs keep their position."""
        new_ordering = self._resolve_ordering(ordering)
        if new_ordering.policy_name != self._ordering.policy_name:
            logger.info(f"Ordering changed: {self._ordering.policy_name} → {new_ordering.policy_name}")
        self._ordering = new_ordering

    @property
    def ordering_policy(self) -> str:
        return self._ordering.policy_name

    # ── Read side ───────────────────────────────────────────────

    def get_stats(self) -> SchedulerStats:
        return compute_stats(self._history, self._completion_order)

    def history(self, status: Optional[JobStatus] = None) -> list[RenderJob]:
        """Snapshots of every job in creation order, optionally filtered by status."""
        return [
            job.snapshot() for job in self._history
            if status is None or job.status is status
        ]

    def get_job(self, job_id: str) -> Optional[RenderJob]:
        job = self._jobs_by_id.get(job_id)
        return job.snapshot() if job is not None else None

    def waiting_line(self) -> list[RenderJob]:
        """Pending jobs in the order the worker will reach them."""
        return [job.snapshot() for job in self._queue if job.status is JobStatus.PENDING]

    @property
    def queue_depth(self) -> int:
        """Nodes still in the queue, lazily cancelled ones included."""
        return self._queue.size()

    @property
    def is_active(self) -> bool:
        return self._active
