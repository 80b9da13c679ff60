"""Tree adapters for DazzleBST."""

from .bst import BSTAdapter

__all__ = ['BSTAdapter']
