"""
Render job endpoints.

POST   /renders/                             → Queue a render for a segment
GET    /renders/                             → History with filtering + pagination
GET    /renders/stats                        → Counts per status + average render time
GET    /renders/{job_id}                     → One job
DELETE /renders/segments/{segment_id}/pending → Cancel whatever is pending for a segment

The API layer stays thin: validate input (Pydantic), call the scheduler,
shape the response. It never touches the queue or the history directly.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.dependencies import get_scheduler
from api.schemas.render import (
    CancelResponse,
    RenderCreate,
    RenderListResponse,
    RenderResponse,
    RenderStats,
)
from models.enums import JobStatus
from models.errors import InvalidEffectError, InvalidPriorityError
from scheduler.engine import RenderScheduler

router = APIRouter(prefix="/renders", tags=["renders"])


@router.post("/", response_model=RenderResponse, status_code=201)
async def submit_render(
    render_in: RenderCreate,
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> RenderResponse:
    """
    Queue a render job.

    Any job still PENDING for the same segment is cancelled first
    (supersession). Returns immediately with the new PENDING job; the worker
    renders it in the background.
    """
    try:
        job = scheduler.submit(render_in.segment_id, render_in.effect, render_in.priority)
    except (InvalidEffectError, InvalidPriorityError) as e:
        # e.g. an effect the configured duration table doesn't cover
        raise HTTPException(status_code=422, detail=str(e))
    return RenderResponse.model_validate(job)


@router.get("/", response_model=RenderListResponse)
async def list_renders(
    status: Optional[JobStatus] = Query(None, description="Filter by job status"),
    segment_id: Optional[str] = Query(None, description="Filter by segment"),
    page: int = Query(1, ge=1, description="Page number"),
    page_size: int = Query(20, ge=1, le=100, description="Jobs per page"),
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> RenderListResponse:
    """History in creation order (oldest first), optionally filtered."""
    jobs = scheduler.history(status)
    if segment_id:
        jobs = [j for j in jobs if j.segment_id == segment_id]

    offset = (page - 1) * page_size
    page_jobs = jobs[offset:offset + page_size]

    return RenderListResponse(
        jobs=[RenderResponse.model_validate(j) for j in page_jobs],
        total=len(jobs),
        page=page,
        page_size=page_size,
    )


@router.get("/stats", response_model=RenderStats)
async def get_render_stats(
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> RenderStats:
    stats = scheduler.get_stats()
    return RenderStats(
        total_jobs=stats.total,
        pending=stats.pending,
        processing=stats.processing,
        done=stats.done,
        cancelled=stats.cancelled,
        avg_duration_ms=stats.avg_duration_ms,
        completion_order=list(stats.completion_order),
    )


@router.get("/{job_id}", response_model=RenderResponse)
async def get_render(
    job_id: str,
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> RenderResponse:
    job = scheduler.get_job(job_id)
    if job is None:
        raise HTTPException(status_code=404, detail=f"Job {job_id} not found")
    return RenderResponse.model_validate(job)


@router.delete("/segments/{segment_id}/pending", response_model=CancelResponse)
async def cancel_pending_renders(
    segment_id: str,
    scheduler: RenderScheduler = Depends(get_scheduler),
) -> CancelResponse:
    """
    Cancel the pending job(s) for a segment without submitting a replacement.

    A render already in progress is never interrupted. Calling this when
    nothing is pending returns an empty list, not an error.
    """
    cancelled = scheduler.cancel_pending_for_segment(segment_id)
    return CancelResponse(segment_id=segment_id, cancelled=[j.id for j in cancelled])
