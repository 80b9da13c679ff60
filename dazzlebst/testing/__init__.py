"""Testing utilities for DazzleBST consumers."""

from .fixtures import TreeTestHelper, tree_shape, collect_node_ids

__all__ = ['TreeTestHelper', 'tree_shape', 'collect_node_ids']
