"""Last-in, first-out stacks backed by a list and by linked nodes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, TypeVar

from .dynamic_array import _ValueContainer
from .linked_lists import _Node

T = TypeVar("T")


class _Stack(_ValueContainer, Generic[T]):
    """Representation shared by both stacks; iteration runs from top to bottom."""

    def _repr_args(self) -> str:
        return repr(list(self)[::-1])  # type: ignore[call-overload]


class ArrayStack(_Stack[T]):
    """A stack kept in a growable array."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the top value; return None if the stack is empty."""
        return self._items.pop() if self._items else None

    def peek(self) -> T:
        """Return the top value without removing it."""
        if not self._items:
            raise IndexError("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Yield values from top to bottom."""
        return reversed(self._items)


class LinkedStack(_Stack[T]):
    """A stack kept as a chain of linked nodes."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._top: _Node | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def push(self, value: T) -> None:
        """Put ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._length += 1

    def pop(self) -> T | None:
        """Remove and return the top value; return None if the stack is empty."""
        node = self._top
        if node is None:
            return None
        self._top = node.next
        self._length -= 1
        return node.data

    def peek(self) -> T:
        """Return the top value without removing it."""
        if self._top is None:
            raise IndexError("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[Any]:
        """Yield values from top to bottom."""
        node = self._top
        while node is not None:
            yield node.data
            node = node.next