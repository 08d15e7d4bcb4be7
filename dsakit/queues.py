"""First-in, first-out queues backed by an array, a ring buffer and linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

from .dynamic_array import _ValueContainer
from .linked_lists import _Node

T = TypeVar("T")

DEFAULT_CAPACITY = 10


class QueueEmptyError(IndexError):
    """Raised when a value is read or removed from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when a value is added to a queue that has no room left."""


class _BoundedQueue(_ValueContainer, Generic[T]):
    """Slot storage shared by the fixed-size queues."""

    _label = "Queue content:"

    def __init__(self, values: Iterable[T] = (), capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._slots: list[Optional[T]] = [None] * capacity
        self._front = 0
        self._rear = 0
        self._length = 0
        for value in values:
            self.enqueue(value)  # type: ignore[attr-defined]

    @property
    def capacity(self) -> int:
        return self._capacity

    def _step(self, index: int) -> int:
        raise NotImplementedError

    def _put(self, value: T) -> None:
        self._slots[self._rear] = value
        self._rear = self._step(self._rear)
        self._length += 1

    def _take(self) -> T:
        if self._length <= 0:
            raise QueueEmptyError("Queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._front = self._step(self._front)
        self._length -= 1
        return value  # type: ignore[return-value]

    def _peek(self) -> T:
        if self._length <= 0:
            raise QueueEmptyError("Queue is empty")
        return self._slots[self._front]  # type: ignore[return-value]

    def _values(self) -> Iterator[Any]:
        for offset in range(self._length):
            yield self._slots[(self._front + offset) % self._capacity]

    def _repr_args(self) -> str:
        return f"{list(self._values())!r}, capacity={self._capacity}"


class ArrayQueue(_BoundedQueue[T]):
    """A queue in a fixed array whose slots are never reused.

    Every enqueue takes the next slot of the array, and dequeued slots are not
    given back, so the queue is full once ``capacity`` values have been
    enqueued over its lifetime.
    """

    def _step(self, index: int) -> int:
        return index + 1

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._put(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        return self._take()

    def front(self) -> T:
        """Return the front value without removing it."""
        return self._peek()

    def is_empty(self) -> bool:
        return self._length <= 0

    def is_full(self) -> bool:
        return self._rear >= self._capacity

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return self._values()


class CircularQueue(_BoundedQueue[T]):
    """A bounded queue in a ring buffer that reuses freed slots."""

    def _step(self, index: int) -> int:
        return (index + 1) % self._capacity

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear; raise QueueFullError when no slot is left."""
        if self.is_full():
            raise QueueFullError("Queue is full")
        self._put(value)

    def dequeue(self) -> T:
        """Remove and return the front value."""
        return self._take()

    def front(self) -> T:
        """Return the front value without removing it."""
        return self._peek()

    def is_empty(self) -> bool:
        return self._length <= 0

    def is_full(self) -> bool:
        return self._length >= self._capacity

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return self._values()


class LinkedQueue(_ValueContainer, Generic[T]):
    """An unbounded queue kept as a chain of linked nodes."""

    _label = "Queue content:"

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node | None = None
        self._rear: _Node | None = None
        self._length = 0
        for value in values:
            self.enqueue(value)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            self._head = node
        else:
            self._rear.next = node
        self._rear = node
        self._length += 1

    def dequeue(self) -> T:
        """Remove and return the front value."""
        head = self._head
        if head is None:
            raise QueueEmptyError("Queue is empty")
        self._head = head.next
        if self._head is None:
            self._rear = None
        self._length -= 1
        return head.data

    def front(self) -> T:
        """Return the front value without removing it."""
        if self._head is None:
            raise QueueEmptyError("Queue is empty")
        return self._head.data

    def is_empty(self) -> bool:
        return self._length <= 0

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next