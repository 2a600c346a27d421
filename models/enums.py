"""
Shared enumerations used across the entire project.

Using Python enums (inheriting from str) means:
- They serialize to JSON automatically ("pending", not "JobStatus.PENDING")
- They work as FastAPI body fields and query parameters
- Typos become immediate errors instead of silent bugs
"""

import enum


class JobStatus(str, enum.Enum):
    PENDING = "pending"          # submitted, waiting in the queue
    PROCESSING = "processing"    # the worker is rendering it right now
    DONE = "done"                # render finished, duration recorded
    CANCELLED = "cancelled"      # superseded or explicitly cancelled while pending


class EffectType(str, enum.Enum):
    COLOR_GRADE = "color_grade"
    BLUR = "blur"
    TRIM = "trim"
    SPEED_CHANGE = "speed_change"
    TRANSITION = "transition"


class JobPriority(str, enum.Enum):
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class OrderingPolicy(str, enum.Enum):
    FIFO = "fifo"                      # strict arrival order, priority is metadata only
    PRIORITY_FRONT = "priority_front"  # high priority jumps to the head of the queue
