"""Binary search tree adapter for DazzleBST.

BSTNode keeps no parent pointer, so the adapter is bound to the root of
the tree it navigates and answers parent/depth questions with a BST
search from that root.
"""

from typing import Iterator, Optional
from ..core.node import BSTNode
from ..core.adapter import TreeAdapter


class BSTAdapter(TreeAdapter):
    """Navigation for trees made of BSTNode.

    Rotations can replace the root; rebind the adapter with ``bind`` (or
    create a new one) after any operation that returns a different root.
    """

    def __init__(self, root: Optional[BSTNode] = None):
        """Initialize the adapter.

        Args:
            root: Root of the tree used to answer parent and depth queries
        """
        self.root = root

    def bind(self, root: Optional[BSTNode]) -> 'BSTAdapter':
        """Point the adapter at a (possibly new) root and return it."""
        self.root = root
        return self

    def get_children(self, node: BSTNode) -> Iterator[BSTNode]:
        """Yield the left child then the right child, skipping empty slots."""
        if node.left is not None:
            yield node.left
        if node.right is not None:
            yield node.right

    def get_left(self, node: BSTNode) -> Optional[BSTNode]:
        return node.left

    def get_right(self, node: BSTNode) -> Optional[BSTNode]:
        return node.right

    def get_parent(self, node: BSTNode) -> Optional[BSTNode]:
        """Find the parent by searching down from the bound root.

        Returns:
            Parent node, or None if node is the root or not in the tree
        """
        parent = None
        current = self.root
        while current is not None:
            if current is node:
                return parent
            parent = current
            current = current.left if node.value < current.value else current.right
        return None

    def get_depth(self, node: BSTNode) -> int:
        """Count the edges from the bound root down to node.

        Raises:
            LookupError: If node is not part of the bound tree
        """
        depth = 0
        current = self.root
        while current is not None:
            if current is node:
                return depth
            depth += 1
            current = current.left if node.value < current.value else current.right
        raise LookupError(f"Node {node.value} is not part of this tree")
