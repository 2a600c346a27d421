"""
Pydantic schemas for the /renders endpoints.

These define the HTTP contract, not the scheduler's internal types:
- RenderCreate: what the editing UI sends to queue a render (request body)
- RenderResponse: one job record (response body)
- RenderListResponse: paginated history
- RenderStats: status counts + average render time
- CancelResponse: which pending jobs an explicit cancel hit

FastAPI validates incoming data against these automatically.
If someone sends effect="sepia", FastAPI returns a 422 before our code runs.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from models.enums import EffectType, JobPriority, JobStatus


class RenderCreate(BaseModel):
    """Request body for POST /renders/."""

    segment_id: str = Field(
        ...,
        min_length=1,
        max_length=255,
        examples=["seg_002"],
    )
    effect: EffectType  # one of: color_grade, blur, trim, speed_change, transition
    priority: JobPriority = Field(
        default=JobPriority.NORMAL,
        description="Recorded on the job; only reorders when priority_front is active",
    )


class RenderResponse(BaseModel):
    """A single render job, as returned by POST /renders/ and GET /renders/{id}."""

    id: str
    segment_id: str
    effect: EffectType
    priority: JobPriority
    status: JobStatus
    duration_ms: Optional[int] = None
    created_at: datetime
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None

    # Read straight off the RenderJob dataclass attributes
    model_config = {"from_attributes": True}


class RenderListResponse(BaseModel):
    """Paginated history, oldest first."""

    jobs: list[RenderResponse]
    total: int       # total matching jobs (ignoring pagination)
    page: int
    page_size: int


class RenderStats(BaseModel):
    """Returned by GET /renders/stats."""

    total_jobs: int
    pending: int
    processing: int
    done: int
    cancelled: int
    avg_duration_ms: int
    completion_order: list[str]  # done job ids, in the order they finished


class CancelResponse(BaseModel):
    segment_id: str
    cancelled: list[str]  # ids of the jobs flipped to cancelled, empty if nothing was pending
