"""A binary min-heap kept in a list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .dynamic_array import _ValueContainer

T = TypeVar("T")


class MinHeap(_ValueContainer, Generic[T]):
    """A min-heap; iteration yields values in the heap's array order."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._data: list[T] = []
        for value in values:
            self.insert(value)

    def _swap(self, i: int, j: int) -> None:
        self._data[i], self._data[j] = self._data[j], self._data[i]

    def _sift_up(self, i: int) -> None:
        data = self._data
        while i > 0 and data[i] < data[(i - 1) // 2]:
            parent = (i - 1) // 2
            self._swap(i, parent)
            i = parent

    def _sift_down(self, i: int) -> None:
        data = self._data
        while True:
            children = [c for c in (2 * i + 1, 2 * i + 2) if c < len(data)]
            smallest = min([i, *children], key=lambda k: (data[k] < data[i], k == i))
            smallest = i
            for child in children:
                if data[child] < data[smallest]:
                    smallest = child
            if smallest == i:
                return
            self._swap(i, smallest)
            i = smallest

    def insert(self, value: T) -> None:
        """Add ``value`` to the heap."""
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def peek(self) -> T:
        """Return the smallest value without removing it."""
        if not self._data:
            raise IndexError("Heap is empty")
        return self._data[0]

    def pop_min(self) -> T:
        """Remove and return the smallest value."""
        smallest = self.peek()
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return smallest

    def is_empty(self) -> bool:
        return not self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))