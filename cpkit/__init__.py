"""Classic algorithms and data structures for strings, ranges, trees and graphs."""

__version__ = "0.1.0"

__all__ = [
    "strings",
    "tries",
    "numbers",
    "ordered",
    "unionfind",
    "rangequery",
    "graphs",
    "subtree",
]