"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any, Generic, Optional, TypeVar

from .dynamic_array import _check_index, _ValueContainer

T = TypeVar("T")


@dataclass(eq=False)
class _Node:
    data: Any
    next: Optional[_Node] = None


@dataclass(eq=False)
class _DNode(_Node):
    prev: Optional[_DNode] = None


def _node_at(nodes: Iterator[_Node], index: int, length: int) -> _Node:
    """Return the node at a checked position of ``nodes``."""
    position = _check_index(index, length)
    return next(islice(nodes, position, None))


class SinglyLinkedList(_ValueContainer, Generic[T]):
    """A list of singly linked nodes; values are added and removed at the end."""

    _separator = "   "

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def push(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        new = _Node(value)
        last = None
        for last in self._nodes():
            pass
        if last is None:
            self._head = new
        else:
            last.next = new
        self._length += 1

    def pop(self) -> T | None:
        """Remove and return the last value; return None if the list is empty."""
        if self._head is None:
            return None
        previous, last = None, self._head
        while last.next is not None:
            previous, last = last, last.next
        if previous is None:
            self._head = None
        else:
            previous.next = None
        self._length -= 1
        return last.data

    def __getitem__(self, index: int) -> T:
        return _node_at(self._nodes(), index, self._length).data

    def __setitem__(self, index: int, value: T) -> None:
        _node_at(self._nodes(), index, self._length).data = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data


class DoublyLinkedList(_ValueContainer, Generic[T]):
    """A list of doubly linked nodes that can be walked in both directions."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _DNode | None = None
        self._tail: _DNode | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head
        while node is not None:
            yield node
            node = node.next  # type: ignore[assignment]

    def push(self, value: T) -> None:
        """Append ``value`` at the end of the list."""
        new = _DNode(value, prev=self._tail)
        if self._tail is None:
            self._head = new
        else:
            self._tail.next = new
        self._tail = new
        self._length += 1

    def pop(self) -> T | None:
        """Remove and return the last value; return None if the list is empty."""
        removed = self._tail
        if removed is None:
            return None
        self._tail = removed.prev
        if self._tail is not None:
            self._tail.next = None
        else:
            self._head = None
        self._length -= 1
        return removed.data

    def __getitem__(self, index: int) -> T:
        return _node_at(self._nodes(), index, self._length).data

    def __setitem__(self, index: int, value: T) -> None:
        _node_at(self._nodes(), index, self._length).data = value

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __reversed__(self) -> Iterator[T]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev


class CircularLinkedList(_ValueContainer, Generic[T]):
    """A singly linked ring; the last node links back to the first."""

    _label = "Circular List:"

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._tail: _Node | None = None
        self._length = 0
        for value in values:
            self.push(value)

    def _nodes(self) -> Iterator[_Node]:
        if self._tail is None:
            return
        head = self._tail.next
        node = head
        while True:
            yield node
            node = node.next
            if node is head:
                break

    def push(self, value: T) -> None:
        """Append ``value`` after the current last node."""
        new = _Node(value)
        if self._tail is None:
            new.next = new
        else:
            new.next = self._tail.next
            self._tail.next = new
        self._tail = new
        self._length += 1

    def pop(self) -> T | None:
        """Remove and return the last value; return None if the list is empty."""
        tail = self._tail
        if tail is None:
            return None
        if tail.next is tail:
            self._tail = None
        else:
            current = tail.next
            while current.next is not tail:
                current = current.next
            current.next = tail.next
            self._tail = current
        self._length -= 1
        return tail.data

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        for node in self._nodes():
            yield node.data

    def __str__(self) -> str:
        return super().__str__() if self._length else "List is empty"