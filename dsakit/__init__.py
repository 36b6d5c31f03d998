"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "binary_tree",
    "bst",
    "graphs",
    "linked_list",
    "queues",
    "recursion",
    "sorting",
    "stack",
    "trie",
]