"""Node abstractions for DazzleBST.

TreeNode is the minimal interface the traversal machinery relies on.
BSTNode is the concrete binary search tree element that every tree
operation in the package works with.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class TreeNode(ABC):
    """Abstract base class for nodes that can be traversed.

    A node is a data container. Navigation (how to reach children or the
    parent) is handled by a TreeAdapter, so the same node type can be
    walked in different orders without knowing about them.
    """

    __slots__ = ()

    @abstractmethod
    def identifier(self) -> str:
        """Return a unique, stable identifier for this node.

        Returns:
            str: Identifier unique within the tree
        """
        pass

    @abstractmethod
    def is_leaf(self) -> bool:
        """Check if this node has no children."""
        pass

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return lightweight information about this node."""
        pass

    def __str__(self) -> str:
        return self.identifier()

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, TreeNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())


class BSTNode(TreeNode):
    """One element of a binary search tree.

    Each node exclusively owns its ``left`` and ``right`` subtrees. The
    BST property (everything left is smaller, everything right is larger)
    is maintained by the tree operations in ``dazzlebst.core.tree``, not
    by the node itself, so assigning children directly is allowed but
    unchecked.

    Equality follows the identifier (the value), which makes two nodes
    holding the same value compare equal even when they live in different
    trees. Use ``is`` when identity matters, and
    ``dazzlebst.api.trees_equal`` for structural comparison.
    """

    __slots__ = ("value", "left", "right")

    def __init__(self,
                 value: int,
                 left: Optional["BSTNode"] = None,
                 right: Optional["BSTNode"] = None):
        self.value = value
        self.left = left
        self.right = right

    def identifier(self) -> str:
        return str(self.value)

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def metadata(self) -> Dict[str, Any]:
        return {
            'value': self.value,
            'has_left': self.left is not None,
            'has_right': self.right is not None,
        }

    def __repr__(self) -> str:
        left = self.left.value if self.left is not None else None
        right = self.right.value if self.right is not None else None
        return f"BSTNode(value={self.value!r}, left={left!r}, right={right!r})"
