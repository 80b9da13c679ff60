"""Tests for the high-level functional API."""

import pytest

from dazzlebst import (
    BSTNode,
    InsertionPoint,
    TraversalOrder,
    build_tree,
    count_nodes,
    find_insertion_point,
    find_parent,
    get_leaf_nodes,
    get_tree_stats,
    inserted,
    is_valid_bst,
    traverse_tree,
    tree_height,
    tree_values,
    trees_equal,
)
from dazzlebst.testing import tree_shape


def test_build_tree_empty():
    assert build_tree([]) is None


def test_build_tree_accepts_generators():
    root = build_tree(v for v in (2, 1, 3))
    assert tree_shape(root) == (2, (1, None, None), (3, None, None))


def test_inserted_does_not_mutate(sample_tree):
    before = tree_shape(sample_tree)

    result = inserted(sample_tree, 45)

    assert tree_shape(sample_tree) == before
    assert result is not sample_tree
    assert result.left.right.right.value == 45


def test_inserted_into_empty_tree():
    assert inserted(None, 3).value == 3


@pytest.mark.parametrize("order,expected", [
    ("in_order", [20, 30, 40, 50, 70]),
    ("pre_order", [50, 30, 20, 40, 70]),
    ("post_order", [20, 40, 30, 70, 50]),
    ("level_order", [50, 30, 70, 20, 40]),
    (TraversalOrder.LEVEL_ORDER, [50, 30, 70, 20, 40]),
    ("bfs", [50, 30, 70, 20, 40]),
    ("InOrder", [20, 30, 40, 50, 70]),
])
def test_tree_values_orders(sample_tree, order, expected):
    assert tree_values(sample_tree, order) == expected


def test_unknown_order(sample_tree):
    with pytest.raises(ValueError, match="Unknown traversal order"):
        tree_values(sample_tree, "spiral")


def test_traverse_tree_max_depth(sample_tree):
    values = [n.value for n in traverse_tree(sample_tree, "level_order", max_depth=0)]
    assert values == [50]


def test_count_and_height(sample_tree):
    assert count_nodes(sample_tree) == 5
    assert tree_height(sample_tree) == 3
    assert count_nodes(None) == 0
    assert tree_height(None) == 0
    assert tree_height(BSTNode(1)) == 1


def test_leaf_nodes(sample_tree):
    assert [n.value for n in get_leaf_nodes(sample_tree)] == [20, 40, 70]


def test_tree_stats(sample_tree):
    assert get_tree_stats(sample_tree) == {
        'node_count': 5,
        'height': 3,
        'leaf_count': 3,
        'min_value': 20,
        'max_value': 70,
    }


def test_tree_stats_empty():
    stats = get_tree_stats(None)
    assert stats['node_count'] == 0
    assert stats['min_value'] is None
    assert stats['max_value'] is None


def test_is_valid_bst(sample_tree):
    assert is_valid_bst(sample_tree)
    assert is_valid_bst(None)

    # 60 sits under 30 but is greater than the root
    broken = BSTNode(50, BSTNode(30, None, BSTNode(60)), BSTNode(70))
    assert not is_valid_bst(broken)

    duplicate = BSTNode(5, BSTNode(5))
    assert not is_valid_bst(duplicate)


def test_trees_equal():
    a = build_tree([2, 1, 3])
    assert trees_equal(a, build_tree([2, 3, 1]))
    assert not trees_equal(a, build_tree([1, 2, 3]))
    assert not trees_equal(a, None)
    assert trees_equal(None, None)


def test_find_parent(sample_tree):
    assert find_parent(sample_tree, 40).value == 30
    assert find_parent(sample_tree, 70).value == 50
    assert find_parent(sample_tree, 50) is None
    assert find_parent(sample_tree, 99) is None


@pytest.mark.parametrize("value,expected", [
    (10, InsertionPoint(20, "left")),
    (25, InsertionPoint(20, "right")),
    (35, InsertionPoint(40, "left")),
    (45, InsertionPoint(40, "right")),
    (60, InsertionPoint(70, "left")),
    (99, InsertionPoint(70, "right")),
])
def test_find_insertion_point(sample_tree, value, expected):
    before = tree_shape(sample_tree)
    assert find_insertion_point(sample_tree, value) == expected
    assert tree_shape(sample_tree) == before


def test_insertion_point_existing_value(sample_tree):
    assert find_insertion_point(sample_tree, 40) is None


def test_insertion_point_empty_tree():
    assert find_insertion_point(None, 7) == InsertionPoint(None, None)
