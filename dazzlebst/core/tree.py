"""Binary search tree operations for DazzleBST.

These are the mutation and query primitives every other part of the
package builds on. Mutating operations (insert, rotate_left, rotate_right)
work in place and return the possibly new root; the tree passed in must
be treated as consumed. Callers that need to roll back clone first with
clone_tree.

All walks are loops rather than recursion, so a degenerate tree (every
value inserted in sorted order) of any height is handled without hitting
the interpreter's recursion limit.
"""

import logging
from typing import List, Optional, Tuple

from .node import BSTNode
from ..errors import PivotNotFoundError

logger = logging.getLogger(__name__)


def insert(root: Optional[BSTNode], value: int) -> BSTNode:
    """Insert a value into the tree.

    Values smaller than a node go left, larger go right. A value already in
    the tree is ignored: no node is added and no error is raised.

    Args:
        root: Current root, or None for an empty tree
        value: Value to insert

    Returns:
        The root of the updated tree (a new node if root was None)
    """
    if root is None:
        return BSTNode(value)

    current = root
    while True:
        if value < current.value:
            if current.left is None:
                current.left = BSTNode(value)
                break
            current = current.left
        elif value > current.value:
            if current.right is None:
                current.right = BSTNode(value)
                break
            current = current.right
        else:
            break

    return root


def find_node(root: Optional[BSTNode], value: int) -> Optional[BSTNode]:
    """Find the node holding value.

    Returns:
        The matching node, or None if value is not in the tree
    """
    current = root
    while current is not None:
        if value < current.value:
            current = current.left
        elif value > current.value:
            current = current.right
        else:
            return current
    return None


def clone_tree(root: Optional[BSTNode]) -> Optional[BSTNode]:
    """Create a deep copy of the tree.

    Every node in the copy is freshly allocated with the same value and the
    same left/right shape as the source. Nothing is shared, so the copy can
    be mutated without affecting the original.

    Args:
        root: Root of the tree to copy (None copies to None)

    Returns:
        Root of the copy
    """
    if root is None:
        return None

    copy_root = BSTNode(root.value)
    # Pairs of (source node, its copy) whose children still need copying
    stack: List[Tuple[BSTNode, BSTNode]] = [(root, copy_root)]

    while stack:
        source, copy = stack.pop()
        if source.left is not None:
            copy.left = BSTNode(source.left.value)
            stack.append((source.left, copy.left))
        if source.right is not None:
            copy.right = BSTNode(source.right.value)
            stack.append((source.right, copy.right))

    return copy_root


def can_rotate_left(node: Optional[BSTNode]) -> bool:
    """A left rotation needs a right child to move up."""
    return node is not None and node.right is not None


def can_rotate_right(node: Optional[BSTNode]) -> bool:
    """A right rotation needs a left child to move up."""
    return node is not None and node.left is not None


def _locate(root: Optional[BSTNode],
            value: int) -> Tuple[Optional[BSTNode], Optional[BSTNode]]:
    """Search for value, remembering the parent of the match.

    Returns:
        Tuple of (parent, node). node is None when value is absent; parent
        is None when the match is the root.
    """
    parent = None
    current = root
    while current is not None and current.value != value:
        parent = current
        current = current.left if value < current.value else current.right
    return parent, current


def _replace_child(root: BSTNode,
                   parent: Optional[BSTNode],
                   old: BSTNode,
                   new: BSTNode) -> BSTNode:
    """Hang new where old used to be and return the root of the tree."""
    if parent is None:
        return new
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new
    return root


def rotate_left(root: Optional[BSTNode],
                pivot_value: int,
                strict: bool = False) -> Optional[BSTNode]:
    """Rotate the subtree rooted at pivot_value to the left.

    The pivot's right child R moves up: pivot.right becomes R.left, R.left
    becomes the pivot, and R takes the pivot's place under its parent.

    A pivot without a right child leaves the tree unchanged. A pivot value
    that is not in the tree also leaves it unchanged, unless strict is set.

    Args:
        root: Root of the tree
        pivot_value: Value of the node to rotate
        strict: Raise instead of silently returning when the pivot is missing

    Returns:
        Root of the tree, which is the old right child if the pivot was the root

    Raises:
        PivotNotFoundError: If strict and pivot_value is not in the tree
    """
    parent, pivot = _locate(root, pivot_value)

    if pivot is None:
        if strict:
            raise PivotNotFoundError(pivot_value)
        logger.debug("rotate_left: pivot %s not found, tree unchanged", pivot_value)
        return root

    if pivot.right is None:
        logger.debug("rotate_left: pivot %s has no right child, tree unchanged", pivot_value)
        return root

    child = pivot.right
    pivot.right = child.left
    child.left = pivot

    return _replace_child(root, parent, pivot, child)


def rotate_right(root: Optional[BSTNode],
                 pivot_value: int,
                 strict: bool = False) -> Optional[BSTNode]:
    """Rotate the subtree rooted at pivot_value to the right.

    Mirror image of rotate_left: the pivot's left child moves up.

    Raises:
        PivotNotFoundError: If strict and pivot_value is not in the tree
    """
    parent, pivot = _locate(root, pivot_value)

    if pivot is None:
        if strict:
            raise PivotNotFoundError(pivot_value)
        logger.debug("rotate_right: pivot %s not found, tree unchanged", pivot_value)
        return root

    if pivot.left is None:
        logger.debug("rotate_right: pivot %s has no left child, tree unchanged", pivot_value)
        return root

    child = pivot.left
    pivot.left = child.right
    child.right = pivot

    return _replace_child(root, parent, pivot, child)
