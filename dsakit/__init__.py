"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "avl",
    "binary_tree",
    "graph",
    "hashing",
    "heap",
    "numeric",
    "queues",
    "searching",
    "sorting",
    "stacks",
    "strings",
]