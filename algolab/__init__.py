"""Classic algorithms and data structures in plain Python: number routines,
linked lists, stacks, queues, trees, heaps, graphs and sparse matrices."""

__version__ = "0.1.0"

__all__ = [
    "arith",
    "arrays",
    "doubly",
    "graphs",
    "linked_lists",
    "minheap",
    "queues",
    "segment_tree",
    "sparse",
    "stacks",
    "text",
    "trees",
    "typelist",
]