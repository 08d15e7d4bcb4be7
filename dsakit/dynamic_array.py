"""A growable array that holds values in insertion order."""

from __future__ import annotations

import operator
from collections.abc import Iterable, Iterator
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


def _check_index(index: int, length: int) -> int:
    """Return ``index`` as an int, raising IndexError unless ``0 <= index < length``."""
    index = operator.index(index)
    if not 0 <= index < length:
        raise IndexError("Index out of range")
    return index


class _ValueContainer:
    """Shared repr and str for containers that iterate over their values."""

    _label: Optional[str] = None
    _separator = " "

    def _repr_args(self) -> str:
        return repr(list(self))  # type: ignore[call-overload]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._repr_args()})"

    def __str__(self) -> str:
        parts = [str(value) for value in self]  # type: ignore[attr-defined]
        if self._label is not None:
            parts.insert(0, self._label)
        return self._separator.join(parts)


class DynamicArray(_ValueContainer, Generic[T]):
    """An array that grows as values are pushed onto its end.

    Indexes are checked strictly: only ``0 <= index < len(self)`` is valid,
    so negative indexes raise ``IndexError``.
    """

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._items: list[T] = list(values)

    def push(self, value: T) -> None:
        """Append ``value`` to the end of the array."""
        self._items.append(value)

    def pop(self) -> T | None:
        """Remove and return the last value; do nothing and return None if empty."""
        return self._items.pop() if self._items else None

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()

    def __getitem__(self, index: int) -> T:
        return self._items[_check_index(index, len(self._items))]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[_check_index(index, len(self._items))] = value

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))