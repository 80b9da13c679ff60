"""High-level API for DazzleBST.

Simple functional helpers around the tree core: building trees from value
lists, walking them in any order, computing summary statistics, and
working out where a value would be inserted. They wrap the adapter and
traverser machinery so that callers only deal with root nodes.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, List, Optional, Union

from .adapters.bst import BSTAdapter
from .config import TraversalOrder, parse_order
from .core.node import BSTNode
from .core.traverser import create_traverser
from .core.tree import clone_tree, find_node, insert


@dataclass(frozen=True)
class InsertionPoint:
    """Where a value gets attached: the parent's value and the side.

    Both fields are None when the value would become the root of an
    empty tree.
    """

    parent_value: Optional[int]
    side: Optional[str]   # "left" or "right"


def build_tree(values: Iterable[int]) -> Optional[BSTNode]:
    """Insert values one by one, in order, into an empty tree.

    Example:
        >>> root = build_tree([50, 30, 70])
        >>> root.value, root.left.value, root.right.value
        (50, 30, 70)
    """
    root = None
    for value in values:
        root = insert(root, value)
    return root


def inserted(root: Optional[BSTNode], value: int) -> BSTNode:
    """Insert value into a copy of the tree, leaving root untouched."""
    return insert(clone_tree(root), value)


def traverse_tree(root: Optional[BSTNode],
                  order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER,
                  max_depth: Optional[int] = None) -> Iterator[BSTNode]:
    """Walk the tree in the given order.

    Args:
        root: Root of the tree (None yields nothing)
        order: in_order, pre_order, post_order or level_order
        max_depth: Deepest level to visit (root = 0)

    Yields:
        BSTNode instances
    """
    traverser = create_traverser(parse_order(order).value, BSTAdapter(root))
    for node, _ in traverser.traverse(root, max_depth=max_depth):
        yield node


def tree_values(root: Optional[BSTNode],
                order: Union[TraversalOrder, str] = TraversalOrder.IN_ORDER) -> List[int]:
    """List the values of the tree in the given order."""
    return [node.value for node in traverse_tree(root, order)]


def count_nodes(root: Optional[BSTNode]) -> int:
    """Count the nodes in the tree."""
    count = 0
    for _ in traverse_tree(root, TraversalOrder.PRE_ORDER):
        count += 1
    return count


def tree_height(root: Optional[BSTNode]) -> int:
    """Number of levels in the tree (empty = 0, single node = 1)."""
    traverser = create_traverser('level_order', BSTAdapter(root))
    height = 0
    for _, depth in traverser.traverse(root):
        height = max(height, depth + 1)
    return height


def get_leaf_nodes(root: Optional[BSTNode]) -> List[BSTNode]:
    """Leaves of the tree, left to right."""
    return [node for node in traverse_tree(root) if node.is_leaf()]


def get_tree_stats(root: Optional[BSTNode]) -> Dict[str, Any]:
    """Summary statistics for the tree.

    Returns:
        Dictionary with node_count, height, leaf_count, min_value and
        max_value (the last two None for an empty tree)
    """
    values = tree_values(root)
    return {
        'node_count': len(values),
        'height': tree_height(root),
        'leaf_count': len(get_leaf_nodes(root)),
        'min_value': values[0] if values else None,
        'max_value': values[-1] if values else None,
    }


def is_valid_bst(root: Optional[BSTNode]) -> bool:
    """Check the BST property: left subtree < node < right subtree.

    Duplicate values make a tree invalid.
    """
    previous = None
    for node in traverse_tree(root, TraversalOrder.IN_ORDER):
        if previous is not None and node.value <= previous:
            return False
        previous = node.value
    return True


def trees_equal(a: Optional[BSTNode], b: Optional[BSTNode]) -> bool:
    """Structural equality: same values in the same shape."""
    stack = [(a, b)]
    while stack:
        left, right = stack.pop()
        if left is None or right is None:
            if left is not right:
                return False
            continue
        if left.value != right.value:
            return False
        stack.append((left.left, right.left))
        stack.append((left.right, right.right))
    return True


def find_parent(root: Optional[BSTNode], value: int) -> Optional[BSTNode]:
    """Parent of the node holding value.

    Returns:
        The parent node, or None if value is the root or not in the tree
    """
    node = find_node(root, value)
    if node is None:
        return None
    return BSTAdapter(root).get_parent(node)


def find_insertion_point(root: Optional[BSTNode], value: int) -> Optional[InsertionPoint]:
    """Work out where insert would attach value.

    The answer comes from actually inserting into a copy of the tree, so
    it always agrees with insert.

    Returns:
        InsertionPoint, or None if value is already in the tree
    """
    if find_node(root, value) is not None:
        return None

    result = inserted(root, value)
    parent = find_parent(result, value)
    if parent is None:
        return InsertionPoint(None, None)

    side = "left" if parent.left is not None and parent.left.value == value else "right"
    return InsertionPoint(parent.value, side)
