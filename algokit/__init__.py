"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "circular_list",
    "doubly_linked_list",
    "graphs",
    "hashing",
    "linked_list",
    "polynomial",
    "recursion",
    "sorting",
    "stacks",
    "strings",
    "tree",
    "tree_construction",
    "tree_properties",
    "tree_traversal",
    "tree_views",
]