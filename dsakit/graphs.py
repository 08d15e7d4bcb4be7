"""Undirected and directed graphs kept as adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Hashable
from typing import Generic, TypeVar

T = TypeVar("T", bound=Hashable)

MAX_NODES = 100


class AdjacencyListGraph:
    """A graph over the integer nodes ``0 .. MAX_NODES - 1``.

    ``num_nodes`` sets how many nodes are shown by ``adjacency`` and ``str``;
    edges may still touch any node below ``MAX_NODES``.
    """

    def __init__(self, num_nodes: int) -> None:
        if not 0 <= num_nodes <= MAX_NODES:
            raise ValueError(f"num_nodes must be between 0 and {MAX_NODES}")
        self._num_nodes = num_nodes
        self._adj: list[list[int]] = [[] for _ in range(MAX_NODES)]

    @property
    def num_nodes(self) -> int:
        return self._num_nodes

    @staticmethod
    def _check(node: int) -> int:
        if not 0 <= node < MAX_NODES:
            raise IndexError(f"node {node} out of range")
        return node

    def add_edge(self, source: int, target: int, directed: bool = False) -> None:
        """Add an edge; an undirected edge is stored in both directions."""
        self._adj[self._check(source)].append(self._check(target))
        if not directed:
            self._adj[target].append(source)

    def neighbors(self, node: int) -> list[int]:
        """Return the nodes ``node`` has edges to, in the order they were added."""
        return list(self._adj[self._check(node)])

    def adjacency(self) -> dict[int, list[int]]:
        """Return every shown node mapped to its neighbours."""
        return {node: list(self._adj[node]) for node in range(self._num_nodes)}

    def __str__(self) -> str:
        return "\n".join(
            f"{node} = " + "".join(f"{neighbor} " for neighbor in neighbors)
            for node, neighbors in self.adjacency().items()
        )


class LabeledGraph(Generic[T]):
    """An undirected graph whose nodes are labels, created as edges name them."""

    def __init__(self) -> None:
        self._labels: list[T] = []
        self._index: dict[T, int] = {}
        self._adj: list[list[int]] = []

    def _ensure(self, label: T) -> int:
        index = self._index.get(label)
        if index is None:
            index = len(self._labels)
            self._index[label] = index
            self._labels.append(label)
            self._adj.append([])
        return index

    def add_edge(self, u: T, v: T) -> None:
        """Join ``u`` and ``v``, adding either node if it is new."""
        i = self._ensure(u)
        j = self._ensure(v)
        self._adj[i].append(j)
        self._adj[j].append(i)

    def neighbors(self, node: T) -> list[T]:
        """Return the labels joined to ``node``; raise KeyError if it is unknown."""
        return [self._labels[j] for j in self._adj[self._index[node]]]

    def adjacency(self) -> dict[T, list[T]]:
        """Return every node, in order of first appearance, mapped to its neighbours."""
        return {
            label: [self._labels[j] for j in neighbors]
            for label, neighbors in zip(self._labels, self._adj)
        }

    def dfs(self, start: T) -> list[T]:
        """Return nodes in depth-first order from ``start``; empty if it is unknown."""
        s = self._index.get(start)
        if s is None:
            return []
        visited = {s}
        order = [s]
        stack = [iter(self._adj[s])]
        while stack:
            for neighbor in stack[-1]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    order.append(neighbor)
                    stack.append(iter(self._adj[neighbor]))
                    break
            else:
                stack.pop()
        return [self._labels[i] for i in order]

    def bfs(self, start: T) -> list[T]:
        """Return nodes in breadth-first order from ``start``; empty if it is unknown."""
        s = self._index.get(start)
        if s is None:
            return []
        visited = {s}
        order: list[int] = []
        queue = deque([s])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbor in self._adj[current]:
                if neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)
        return [self._labels[i] for i in order]

    def __len__(self) -> int:
        return len(self._labels)

    def __str__(self) -> str:
        lines = ["Adjacency List:"]
        lines.extend(
            f"{label}: " + "".join(f"{neighbor} " for neighbor in neighbors)
            for label, neighbors in self.adjacency().items()
        )
        return "\n".join(lines)