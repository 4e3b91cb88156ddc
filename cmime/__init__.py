"""Building blocks for MIME message handling: a doubly linked list and line-break and boundary scanning."""

__version__ = "0.2.0"
__all__ = ["linkedlist", "scanning"]