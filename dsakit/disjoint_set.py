"""Union-find over the integers ``0 .. n - 1``, with path compression and union by rank."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets of the elements ``0 .. n - 1``, each starting alone."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n))
        self._rank = [0] * n

    def _check(self, x: int) -> int:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")
        return x

    def find(self, x: int) -> int:
        """Return the root of ``x``'s set, pointing every node on the way at it."""
        parent = self._parent
        root = self._check(x)
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, x: int, y: int) -> None:
        """Merge the sets of ``x`` and ``y``; the higher-ranked root wins, ties go to ``x``."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return
        rank = self._rank
        if rank[root_x] < rank[root_y]:
            self._parent[root_x] = root_y
        elif rank[root_x] > rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            rank[root_x] += 1

    def connected(self, x: int, y: int) -> bool:
        """Return whether ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    def parents(self) -> list[int]:
        """Return a copy of the parent of every element."""
        return list(self._parent)

    def __len__(self) -> int:
        return len(self._parent)

    def __str__(self) -> str:
        return "Parent array: " + "".join(f"{p} " for p in self._parent)