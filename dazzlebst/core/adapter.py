"""TreeAdapter abstraction for DazzleBST.

The adapter holds the navigation logic for a tree structure, keeping it
out of the node type. Traversers only ever talk to an adapter, which is
what lets one traverser implementation walk any tree shape.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional
from .node import TreeNode


class TreeAdapter(ABC):
    """Abstract adapter for navigating a specific kind of tree.

    Subclasses know HOW to reach a node's children and parent. Binary
    trees additionally expose their left/right split so that in-order
    traversal can be expressed; general trees leave those unimplemented.
    """

    @abstractmethod
    def get_children(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get an iterator of child nodes for the given node.

        Args:
            node: The parent node

        Returns:
            Iterator yielding children in left-to-right order
        """
        pass

    @abstractmethod
    def get_parent(self, node: TreeNode) -> Optional[TreeNode]:
        """Get the parent node of the given node.

        Returns:
            Parent TreeNode or None if node is root
        """
        pass

    def get_left(self, node: TreeNode) -> Optional[TreeNode]:
        """Left child of a binary node."""
        raise NotImplementedError(f"{self.__class__.__name__} is not a binary tree adapter")

    def get_right(self, node: TreeNode) -> Optional[TreeNode]:
        """Right child of a binary node."""
        raise NotImplementedError(f"{self.__class__.__name__} is not a binary tree adapter")

    def get_depth(self, node: TreeNode) -> int:
        """Calculate the depth of a node in the tree.

        Default implementation walks up to root. Adapters can override
        for more efficient implementations.

        Returns:
            Depth where root = 0
        """
        depth = 0
        current = node
        while True:
            parent = self.get_parent(current)
            if parent is None:
                break
            depth += 1
            current = parent
        return depth

    def get_siblings(self, node: TreeNode) -> Iterator[TreeNode]:
        """Get siblings of the given node (excluding the node itself)."""
        parent = self.get_parent(node)
        if parent is None:
            return  # Root has no siblings

        node_id = node.identifier()
        for child in self.get_children(parent):
            if child.identifier() != node_id:
                yield child
