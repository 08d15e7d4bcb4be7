"""A binary search tree and a binary tree built by hand, node by node."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(eq=False)
class TreeNode:
    """A node of a binary tree, linked to its children and its parent."""

    data: Any = None
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None
    parent: Optional[TreeNode] = None


class NodeExistsError(ValueError):
    """Raised when a root or child is added where one already exists."""


def _children(node: TreeNode, mirrored: bool) -> tuple[Optional[TreeNode], Optional[TreeNode]]:
    return (node.right, node.left) if mirrored else (node.left, node.right)


def _inorder(root: Optional[TreeNode], mirrored: bool = False) -> Iterator[Any]:
    """Left-node-right order, or right-node-left when ``mirrored``."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = _children(node, mirrored)[0]
        node = stack.pop()
        yield node.data
        node = _children(node, mirrored)[1]


def _preorder(root: Optional[TreeNode], mirrored: bool = False) -> Iterator[Any]:
    """Node-left-right order, or node-right-left when ``mirrored``."""
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        yield node.data
        first, second = _children(node, mirrored)
        stack.extend(child for child in (second, first) if child is not None)


class _Tree(Generic[T]):
    """Root access common to both trees."""

    def __init__(self) -> None:
        self._root: Optional[TreeNode] = None

    @property
    def root(self) -> Optional[TreeNode]:
        return self._root


class BinarySearchTree(_Tree[T]):
    """A binary search tree; values equal to a node go into its left subtree."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        super().__init__()
        self._length = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> TreeNode:
        """Add ``value`` and return the new node."""
        new = TreeNode(value)
        current = self._root
        if current is None:
            self._root = new
        while current is not None:
            side = "right" if value > current.data else "left"
            child = getattr(current, side)
            if child is None:
                setattr(current, side, new)
                new.parent = current
                break
            current = child
        self._length += 1
        return new

    def inorder(self) -> list[T]:
        """Values in left-node-right order, which is ascending."""
        return list(_inorder(self._root))

    def reverse_inorder(self) -> list[T]:
        """Values in right-node-left order, which is descending."""
        return list(_inorder(self._root, mirrored=True))

    def preorder(self) -> list[T]:
        """Values in node-left-right order."""
        return list(_preorder(self._root))

    def __len__(self) -> int:
        return self._length

    def __iter__(self) -> Iterator[T]:
        return _inorder(self._root)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.preorder()!r})"


class BinaryTree(_Tree[T]):
    """A binary tree whose shape is set by adding children to chosen nodes."""

    def create_root(self, value: T) -> TreeNode:
        """Create the root holding ``value`` and return it."""
        if self._root is not None:
            raise NodeExistsError("Root already exists")
        self._root = TreeNode(value)
        return self._root

    @staticmethod
    def _add_child(node: TreeNode, side: str, value: T) -> TreeNode:
        if getattr(node, side) is not None:
            raise NodeExistsError(f"{side.capitalize()} child already exists")
        child = TreeNode(value, parent=node)
        setattr(node, side, child)
        return child

    def add_left(self, node: TreeNode, value: T) -> TreeNode:
        """Give ``node`` a left child holding ``value`` and return it."""
        return self._add_child(node, "left", value)

    def add_right(self, node: TreeNode, value: T) -> TreeNode:
        """Give ``node`` a right child holding ``value`` and return it."""
        return self._add_child(node, "right", value)

    def inorder(self) -> list[T]:
        """Values in left-node-right order."""
        return list(_inorder(self._root))

    def preorder(self) -> list[T]:
        """Values in node-left-right order."""
        return list(_preorder(self._root))

    def postorder(self) -> list[T]:
        """Values in left-right-node order."""
        # Node-right-left order, reversed, gives left-right-node.
        return list(_preorder(self._root, mirrored=True))[::-1]

    def __str__(self) -> str:
        rows = [
            ("Inorder", self.inorder()),
            ("Preorder", self.preorder()),
            ("Postorder", self.postorder()),
        ]
        return "\n".join(
            " ".join([f"{name}:", *(str(value) for value in values)]) for name, values in rows
        )