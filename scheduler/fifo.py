"""
FIFO queue backed by a singly linked list.

    head                                  tail
    ┌──────┐     ┌──────┐     ┌──────┐
    │ RJ-1 │ ──> │ RJ-2 │ ──> │ RJ-3 │ ──> None
    └──────┘     └──────┘     └──────┘

Every operation is O(1):
- enqueue:       link a new node after tail
- enqueue_front: link a new node before head (used by priority_front ordering)
- dequeue:       unlink head
- peek/size:     read head / the counter

There is no remove-from-the-middle. Cancelling a queued job flips
its status and the worker skips it when it reaches the head (lazy
cancellation), so the queue never needs an O(n) walk.

Invariants:
- size == number of nodes reachable from head
- tail.next is None
- head is None  <=>  tail is None  <=>  size == 0
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T):
        self.value = value
        self.next: Optional[_Node[T]] = None


class FIFOQueue(Generic[T]):

    def __init__(self):
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size: int = 0

    def enqueue(self, value: T) -> None:
        """Append at the tail."""
        node = _Node(value)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def enqueue_front(self, value: T) -> None:
        """Insert at the head so this value is the next one dequeued."""
        node = _Node(value)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def dequeue(self) -> Optional[T]:
        """Remove and return the head value, or None if the queue is empty."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            self._tail = None
        node.next = None
        self._size -= 1
        return node.value

    def peek(self) -> Optional[T]:
        return self._head.value if self._head is not None else None

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._head is None

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        """Walk head → tail without consuming anything."""
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"<FIFOQueue size={self._size}>"
