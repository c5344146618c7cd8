"""Classic data structures and algorithms on integers in plain Python."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "searching",
    "sorting",
    "stack_algorithms",
    "stacks",
    "queues",
    "graphs",
    "bst",
]