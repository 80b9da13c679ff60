"""Test fixtures for DazzleBST consumers.

These helpers give test suites a compact way to describe expected tree
shapes and to check the BST invariants without reaching into node
attributes by hand.
"""

from typing import Any, List, Optional, Tuple

from ..api import build_tree, is_valid_bst, tree_values
from ..core.node import BSTNode

Shape = Optional[Tuple[int, Any, Any]]


def tree_shape(root: Optional[BSTNode]) -> Shape:
    """Describe a tree as nested ``(value, left, right)`` tuples.

    Example:
        >>> tree_shape(build_tree([2, 1, 3]))
        (2, (1, None, None), (3, None, None))
    """
    if root is None:
        return None

    # Post-order assembly without recursion
    shapes = {}
    stack: List[Tuple[BSTNode, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if children_done:
            left = shapes.pop(id(node.left)) if node.left is not None else None
            right = shapes.pop(id(node.right)) if node.right is not None else None
            shapes[id(node)] = (node.value, left, right)
            continue
        stack.append((node, True))
        if node.right is not None:
            stack.append((node.right, False))
        if node.left is not None:
            stack.append((node.left, False))

    return shapes[id(root)]


def collect_node_ids(root: Optional[BSTNode]) -> set:
    """Identity of every node object in the tree."""
    ids = set()
    stack = [root] if root is not None else []
    while stack:
        node = stack.pop()
        ids.add(id(node))
        if node.left is not None:
            stack.append(node.left)
        if node.right is not None:
            stack.append(node.right)
    return ids


class TreeTestHelper:
    """Assertion helpers around one tree.

    Example:
        helper = TreeTestHelper.from_values([50, 30, 70])
        helper.assert_valid()
        assert helper.shape() == (50, (30, None, None), (70, None, None))
    """

    def __init__(self, root: Optional[BSTNode]):
        self.root = root

    @classmethod
    def from_values(cls, values) -> 'TreeTestHelper':
        return cls(build_tree(values))

    def shape(self) -> Shape:
        return tree_shape(self.root)

    def values(self) -> List[int]:
        return tree_values(self.root)

    def assert_valid(self) -> None:
        """Raise AssertionError if the BST property does not hold."""
        assert is_valid_bst(self.root), f"BST property violated: {self.shape()}"

    def assert_shares_no_nodes_with(self, other: Optional[BSTNode]) -> None:
        """Raise AssertionError if any node object appears in both trees."""
        shared = collect_node_ids(self.root) & collect_node_ids(other)
        assert not shared, f"{len(shared)} node(s) shared between trees"
