"""Linked binary tree with traversals, measurements, shape checks and rendering."""

__version__ = "0.1.0"
__all__ = ["render", "tree"]