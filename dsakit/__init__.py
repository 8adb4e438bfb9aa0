"""Classic data-structure and algorithm routines: arrays, strings, puzzles, matrices and linked lists."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "contests",
    "doubly_linked_list",
    "linked_lists",
    "matrix",
    "strings",
]