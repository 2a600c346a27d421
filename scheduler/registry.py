"""
Ordering factory: maps policy names to ordering strategy classes.

One place knows how to build every strategy, so the scheduler, the settings
loader and the API all go through create_ordering() instead of if/elif chains.
"""

from typing import Union

from models.enums import OrderingPolicy
from scheduler.base import AbstractOrdering
from scheduler.ordering import ArrivalOrdering, PriorityFrontOrdering


_REGISTRY: dict[OrderingPolicy, type[AbstractOrdering]] = {
    OrderingPolicy.FIFO: ArrivalOrdering,
    OrderingPolicy.PRIORITY_FRONT: PriorityFrontOrdering,
}


def create_ordering(policy: Union[OrderingPolicy, str]) -> AbstractOrdering:
    """
    Create an ordering strategy for the given policy.

    Accepts the enum or its string value (as read from settings):
        create_ordering("priority_front")
    """
    try:
        policy = OrderingPolicy(policy)
    except ValueError:
        raise ValueError(f"Unknown ordering policy: {policy}") from None

    cls = _REGISTRY.get(policy)
    if cls is None:
        raise ValueError(f"Unknown ordering policy: {policy}")
    return cls()
