"""Linked binary tree nodes with traversals, measurements, text rendering and demonstrations."""

__version__ = "0.1.0"
__all__ = ["node", "measure", "render", "demo"]