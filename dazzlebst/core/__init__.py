"""Core abstractions and tree operations for DazzleBST.

This package contains the node types, the adapter/traverser machinery,
and the BST mutation and query primitives.
"""

from .node import TreeNode, BSTNode
from .adapter import TreeAdapter
from .traverser import (
    TreeTraverser,
    BreadthFirstTraverser,
    DepthFirstPreOrderTraverser,
    DepthFirstPostOrderTraverser,
    InOrderTraverser,
    create_traverser,
)
from .tree import (
    insert,
    find_node,
    clone_tree,
    can_rotate_left,
    can_rotate_right,
    rotate_left,
    rotate_right,
)

__all__ = [
    "TreeNode",
    "BSTNode",
    "TreeAdapter",
    "TreeTraverser",
    "BreadthFirstTraverser",
    "DepthFirstPreOrderTraverser",
    "DepthFirstPostOrderTraverser",
    "InOrderTraverser",
    "create_traverser",
    "insert",
    "find_node",
    "clone_tree",
    "can_rotate_left",
    "can_rotate_right",
    "rotate_left",
    "rotate_right",
]
