"""Integer hash tables using separate chaining and linear probing."""

from __future__ import annotations

from collections.abc import Iterator
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")

DEFAULT_CAPACITY = 7


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class ChainedHashTable(Generic[T]):
    """A set of values kept in buckets chosen by ``value % capacity``.

    Colliding values share a bucket; new values go to the head of the chain.
    Duplicates are refused.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._table: list[list[T]] = [[] for _ in range(self._capacity)]
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _bucket(self, value: T) -> list[T]:
        return self._table[value % self._capacity]

    def insert(self, value: T) -> bool:
        """Add ``value``; return False if it is already present."""
        bucket = self._bucket(value)
        if value in bucket:
            return False
        bucket.insert(0, value)
        self._length += 1
        return True

    def find(self, value: T) -> bool:
        """Return whether ``value`` is stored."""
        return value in self._bucket(value)

    def remove(self, value: T) -> bool:
        """Remove ``value``; return False if it was not present."""
        bucket = self._bucket(value)
        try:
            bucket.remove(value)
        except ValueError:
            return False
        self._length -= 1
        return True

    def buckets(self) -> list[list[T]]:
        """Return a copy of every bucket's chain, head first."""
        return [list(bucket) for bucket in self._table]

    def __contains__(self, value: object) -> bool:
        return self.find(value)

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for bucket in self._table:
            yield from bucket

    def __str__(self) -> str:
        return "\n".join(
            f"{index}: " + "".join(f"{value} -> " for value in bucket) + "null"
            for index, bucket in enumerate(self._table)
        )


class _Status(Enum):
    EMPTY = 0
    USED = 1
    DELETED = -1


class OpenAddressingHashTable(Generic[T]):
    """A fixed-size table of slots filled by linear probing from ``value % capacity``.

    Removed slots become tombstones, which later inserts may reuse and
    lookups walk past. Duplicates are not checked for.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._status = [_Status.EMPTY] * self._capacity
        self._elems: list[Optional[T]] = [None] * self._capacity
        self._length = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def _home(self, value: T) -> int:
        return value % self._capacity

    def _probe(self, start: int) -> Iterator[int]:
        for step in range(self._capacity):
            yield (start + step) % self._capacity

    def insert(self, value: T) -> bool:
        """Store ``value`` in the first free slot; return False if the table is full."""
        for slot in self._probe(self._home(value)):
            if self._status[slot] is not _Status.USED:
                self._status[slot] = _Status.USED
                self._elems[slot] = value
                self._length += 1
                return True
        return False

    def find(self, value: T) -> Optional[int]:
        """Return the slot holding ``value``, or None if it is not stored."""
        for slot in self._probe(self._home(value)):
            status = self._status[slot]
            if status is _Status.EMPTY:
                return None
            if status is _Status.USED and self._elems[slot] == value:
                return slot
        return None

    def remove(self, value: T) -> bool:
        """Mark the slot of ``value`` deleted; return False if it was not stored."""
        slot = self.find(value)
        if slot is None:
            return False
        self._status[slot] = _Status.DELETED
        self._elems[slot] = None
        self._length -= 1
        return True

    def clear(self) -> None:
        """Empty every slot."""
        self._status = [_Status.EMPTY] * self._capacity
        self._elems = [None] * self._capacity
        self._length = 0

    def slots(self) -> list[Optional[T]]:
        """Return each slot's value, with None for empty or deleted slots."""
        return [
            elem if status is _Status.USED else None
            for status, elem in zip(self._status, self._elems)
        ]

    def __contains__(self, value: object) -> bool:
        return self.find(value) is not None

    def __len__(self) -> int:
        return self._length

    def __str__(self) -> str:
        return "\n".join(
            f"{index}: {'empty' if value is None else value}"
            for index, value in enumerate(self.slots())
        )