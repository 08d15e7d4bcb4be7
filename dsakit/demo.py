"""A walk through every structure in the package, printed section by section."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Iterator, Sequence

from dsakit.disjoint_set import DisjointSet
from dsakit.dynamic_array import DynamicArray
from dsakit.graphs import AdjacencyListGraph, LabeledGraph
from dsakit.hashing import ChainedHashTable, OpenAddressingHashTable
from dsakit.heap import MinHeap
from dsakit.linked_lists import DoublyLinkedList, SinglyLinkedList
from dsakit.queues import ArrayQueue, CircularQueue, LinkedQueue, QueueEmptyError
from dsakit.stacks import ArrayStack, LinkedStack
from dsakit.trees import BinarySearchTree, BinaryTree
from dsakit.trie import Trie

Section = Callable[[], Iterator[str]]


def _heading(title: str) -> str:
    return f"{'-' * 40}{title}{'-' * 40}"


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _joined(values) -> str:
    return " ".join(str(value) for value in values)


def _dynamic_array() -> Iterator[str]:
    arr: DynamicArray[int] = DynamicArray()
    for value in (10, 20, 30):
        arr.push(value)
    yield str(arr)
    arr.pop()
    yield str(arr)
    arr[1] = 99
    yield f"Element at index 1: {arr[1]}"
    try:
        yield str(arr[10])
    except IndexError as error:
        yield f"Error: {error}"
    yield str(arr)
    yield f"Size: {len(arr)}"


def _singly_linked_list() -> Iterator[str]:
    items: SinglyLinkedList[int] = SinglyLinkedList()
    for value in (10, 20, 30):
        items.push(value)
    yield "Values in list:"
    yield str(items)
    yield f"Value at index 1: {items[1]}"
    items[2] = 40
    yield "After set new value:"
    yield str(items)
    items.pop()
    yield "After pop:"
    yield str(items)
    yield f"Size: {len(items)}"


def _stack(stack) -> Iterator[str]:
    for value in (10, 20, 30):
        stack.push(value)
    yield str(stack)
    yield f"Top value: {stack.peek()}"
    stack.pop()
    yield str(stack)
    yield f"Size: {len(stack)}"
    yield f"Empty? {_yes_no(stack.is_empty())}"


def _array_stack() -> Iterator[str]:
    return _stack(ArrayStack())


def _linked_stack() -> Iterator[str]:
    return _stack(LinkedStack())


def _bounded_queue(queue) -> Iterator[str]:
    for value in (10, 20, 30):
        queue.enqueue(value)
    yield str(queue)
    yield f"Front: {queue.front()}"
    queue.dequeue()
    yield str(queue)
    queue.enqueue(40)
    queue.enqueue(50)
    yield str(queue)
    yield f"Size: {len(queue)}"
    for _ in range(4):
        queue.dequeue()
    try:
        yield f"Front: {queue.front()}"
    except QueueEmptyError as error:
        yield f"Exception: {error}"


def _array_queue() -> Iterator[str]:
    return _bounded_queue(ArrayQueue())


def _circular_queue() -> Iterator[str]:
    return _bounded_queue(CircularQueue())


def _linked_queue() -> Iterator[str]:
    queue: LinkedQueue[int] = LinkedQueue()
    for value in (10, 20, 30):
        queue.enqueue(value)
    yield str(queue)
    queue.dequeue()
    yield str(queue)
    yield f"Front value: {queue.front()}"
    yield f"Size: {len(queue)}"
    queue.dequeue()
    queue.dequeue()
    try:
        yield f"Front: {queue.front()}"
    except QueueEmptyError as error:
        yield f"Exception: {error}"


def _doubly_linked_list() -> Iterator[str]:
    items: DoublyLinkedList[int] = DoublyLinkedList()
    for value in (10, 20, 30):
        items.push(value)
    yield f"Print forward: {items}"
    yield f"Print backward: {_joined(reversed(items))}"
    yield f"Value at index 1: {items[1]}"
    items[1] = 99
    yield f"After set new value: {items}"
    items.pop()
    yield f"After pop: {items}"
    yield f"Size: {len(items)}"
    try:
        yield str(items[10])
    except IndexError as error:
        yield f"Exception: {error}"


def _binary_search_tree() -> Iterator[str]:
    bst: BinarySearchTree[int] = BinarySearchTree()
    for value in (30, 20, 40, 10, 25):
        bst.insert(value)
    yield f"Inorder (LNR): {_joined(bst.inorder())}"
    yield f"Reverse inorder (RNL): {_joined(bst.reverse_inorder())}"
    yield f"Preorder (NLR): {_joined(bst.preorder())}"
    yield f"Size of BST: {len(bst)}"
    bst.insert(20)
    yield f"Inorder (LNR): {_joined(bst.inorder())}"


def _binary_tree() -> Iterator[str]:
    tree: BinaryTree[int] = BinaryTree()
    root = tree.create_root(10)
    left = tree.add_left(root, 5)
    right = tree.add_right(root, 15)
    tree.add_left(left, 2)
    tree.add_right(left, 7)
    tree.add_left(right, 12)
    tree.add_right(right, 20)
    yield str(tree)


def _open_addressing() -> Iterator[str]:
    table: OpenAddressingHashTable[int] = OpenAddressingHashTable()
    for value in (10, 22, 3):
        table.insert(value)
    yield str(table)
    table.remove(22)
    yield "After removing 22:"
    yield str(table)
    slot = table.find(10)
    yield f"Index of 10: {-1 if slot is None else slot}"
    yield f"Size: {len(table)}"


def _chained() -> Iterator[str]:
    table: ChainedHashTable[int] = ChainedHashTable()
    for value in (10, 17, 3, 24):
        table.insert(value)
    yield "Table content after inserts:"
    yield str(table)
    yield "Trying to insert duplicate (17):"
    yield "Inserted" if table.insert(17) else "Already exists"
    table.insert(5)
    table.insert(12)
    yield "Table content after more inserts:"
    yield str(table)
    yield f"Size: {len(table)}"


def _min_heap() -> Iterator[str]:
    heap: MinHeap[int] = MinHeap()
    for value in (30, 20, 40, 10):
        heap.insert(value)
    yield f"Heap elements: {heap}"
    yield f"Min value: {heap.peek()}"
    heap.pop_min()
    yield f"After removing min: {heap}"
    heap.insert(5)
    heap.insert(35)
    yield f"After inserting 5 and 35: {heap}"
    yield f"Size: {len(heap)}"


def _basic_graph() -> Iterator[str]:
    graph = AdjacencyListGraph(6)
    for source, target in ((1, 2), (1, 3), (2, 4), (3, 4), (4, 5)):
        graph.add_edge(source, target)
    yield "Graph content:"
    yield str(graph)


def _trie() -> Iterator[str]:
    trie = Trie()
    for word in ("cat", "car", "dog"):
        trie.insert(word)
    for word in ("cat", "can"):
        yield f"Search for '{word}': {'Found' if trie.search(word) else 'Not Found'}"
    for prefix in ("ca", "do", "z"):
        yield f"Starts with '{prefix}': {_yes_no(trie.starts_with(prefix))}"


def _disjoint_set() -> Iterator[str]:
    sets = DisjointSet(6)
    for x, y in ((0, 1), (2, 3), (4, 5), (2, 4)):
        sets.union(x, y)
    for x, y in ((0, 1), (1, 2), (3, 5)):
        yield f"Are {x} and {y} connected? {_yes_no(sets.connected(x, y))}"
    yield str(sets)


def _labeled_graph() -> Iterator[str]:
    graph: LabeledGraph[str] = LabeledGraph()
    for u, v in (("A", "B"), ("A", "C"), ("B", "D"), ("C", "E"), ("D", "F"), ("E", "F")):
        graph.add_edge(u, v)
    yield str(graph)
    yield f"DFS from A: {_joined(graph.dfs('A'))}"
    yield f"BFS from A: {_joined(graph.bfs('A'))}"


SECTIONS: list[tuple[str, Section]] = [
    ("Dynamic Arrays", _dynamic_array),
    ("Singly Linked List", _singly_linked_list),
    ("StackArray", _array_stack),
    ("StackLinkedList", _linked_stack),
    ("queue array", _array_queue),
    ("queue array circular", _circular_queue),
    ("queue linked List", _linked_queue),
    ("Doubly Linked List", _doubly_linked_list),
    ("Binary Search Tree", _binary_search_tree),
    ("Binary Tree", _binary_tree),
    ("Hash Array", _open_addressing),
    ("Hash linked list", _chained),
    ("Min Heap", _min_heap),
    ("Basic Graph", _basic_graph),
    ("Trie Structure", _trie),
    ("Union-Find (Disjoint Set)", _disjoint_set),
    ("Graph without map", _labeled_graph),
]


def main(argv: Sequence[str] | None = None) -> int:
    """Run every demonstration section and print what it shows."""
    parser = argparse.ArgumentParser(
        prog="dsakit-demo",
        description="Exercise each data structure and print the results.",
    )
    parser.parse_args(argv)
    for title, section in SECTIONS:
        print(_heading(title))
        for line in section():
            print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())