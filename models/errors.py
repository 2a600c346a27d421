"""
Exceptions raised by the render queue.

Invalid input is a caller bug, so these are raised eagerly at submit time
instead of letting a bad lookup surface later inside the worker loop.
"""


class RenderQueueError(Exception):
    """Base class for every error raised by this project."""


class InvalidEffectError(RenderQueueError, ValueError):
    """The effect kind is unknown or has no entry in the duration policy."""

    def __init__(self, effect):
        self.effect = effect
        super().__init__(f"Unknown effect: '{effect}'")


class InvalidPriorityError(RenderQueueError, ValueError):

    def __init__(self, priority):
        self.priority = priority
        super().__init__(f"Unknown priority: '{priority}'")


class InvalidTransitionError(RenderQueueError):
    """A job was asked to move to a status its current status cannot reach."""

    def __init__(self, job_id: str, current: str, target: str):
        self.job_id = job_id
        self.current = current
        self.target = target
        super().__init__(f"Job {job_id} cannot move from {current} to {target}")
