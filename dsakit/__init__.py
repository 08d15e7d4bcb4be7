"""Classic data structures: arrays, linked lists, stacks, queues, hash tables, a min-heap, trees, graphs, a trie and disjoint sets."""

__version__ = "0.1.0"