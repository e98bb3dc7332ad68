"""Classic data-structure and algorithm exercises with small command-line programs."""

__version__ = "0.1.0"

__all__ = [
    "arrays",
    "calculator",
    "design_list",
    "grid",
    "linked_list",
    "patterns",
    "search",
    "sorting",
    "strings",
]