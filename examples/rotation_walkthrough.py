#!/usr/bin/env python3
"""Demo script for DazzleBST practice sessions.

Builds a random tree, grades an insertion, then walks through a left
rotation forward and back, printing the tree after each stage.
"""

import logging
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from dazzlebst import (
    InsertionPractice,
    PracticeConfig,
    RotationPractice,
    find_insertion_point,
    traverse_tree,
)
from dazzlebst.adapters import BSTAdapter


def print_tree(root):
    """Print one node per line, indented by depth, in pre-order."""
    adapter = BSTAdapter(root)
    for node in traverse_tree(root, "pre_order"):
        print(f"{'  ' * adapter.get_depth(node)}{node.value}")


def demo_insertion(seed: int):
    print("\n=== Insertion Practice ===")
    session = InsertionPractice(PracticeConfig(seed=seed))
    session.new_problem()
    print_tree(session.root)

    value = session.value_to_insert
    point = find_insertion_point(session.root, value)
    print(f"\nWhere does {value} go? Under {point.parent_value}, on the {point.side}.")
    print(f"Graded: {session.check_answer(point.parent_value, point.side)}")

    session.show_answer()
    print_tree(session.root)
    return session.root


def demo_rotation(root):
    print("\n=== Rotation Practice ===")
    session = RotationPractice(root)
    session.select(root.value)
    session.set_direction("left" if root.right is not None else "right")

    session.start()
    print(session.message)

    session.next_step()
    print(session.message)
    print_tree(session.root)

    session.previous_step()
    print("\nStepped back:")
    print_tree(session.root)


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    seed = int(sys.argv[1]) if len(sys.argv) > 1 else 7
    root = demo_insertion(seed)
    demo_rotation(root)


if __name__ == "__main__":
    main()
