"""Rotation planning for DazzleBST.

A rotation is presented in two stages so a driver can show the tree
before the change and then after it. get_rotation_steps validates the
request and describes those stages without touching the tree;
apply_rotation performs the mutation when the driver reaches the
``after`` stage.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union

from .config import RotationDirection, parse_direction
from .core.node import BSTNode
from .core.tree import (
    can_rotate_left,
    can_rotate_right,
    clone_tree,
    find_node,
    rotate_left,
    rotate_right,
)


class StepKind(Enum):
    """Stage of a rotation walkthrough."""
    BEFORE = "before"     # Rotation announced, tree not yet changed
    AFTER = "after"       # Rotation applied
    INVALID = "invalid"   # Request cannot be carried out


@dataclass(frozen=True)
class RotationStep:
    """One stage of a rotation walkthrough, ready for display."""

    kind: StepKind
    description: str
    pivot_value: Optional[int] = None


def get_rotation_steps(root: Optional[BSTNode],
                       pivot_value: int,
                       direction: Union[RotationDirection, str]) -> List[RotationStep]:
    """Plan the stages of a rotation.

    Args:
        root: Root of the tree
        pivot_value: Value of the node to rotate
        direction: RotationDirection or "left" / "right"

    Returns:
        ``[BEFORE, AFTER]`` for a valid rotation, or a single ``INVALID``
        step (with pivot_value None) explaining why it cannot be done
    """
    direction = parse_direction(direction)
    name = direction.value

    pivot = find_node(root, pivot_value)
    if pivot is None:
        return [RotationStep(
            StepKind.INVALID,
            f"Node with value {pivot_value} not found in the tree",
        )]

    if direction is RotationDirection.LEFT:
        if not can_rotate_left(pivot):
            return [RotationStep(
                StepKind.INVALID,
                f"Cannot rotate left at {pivot_value}: the node has no right child",
            )]
        child = pivot.right
    else:
        if not can_rotate_right(pivot):
            return [RotationStep(
                StepKind.INVALID,
                f"Cannot rotate right at {pivot_value}: the node has no left child",
            )]
        child = pivot.left

    return [
        RotationStep(
            StepKind.BEFORE,
            f"Before {name} rotation at {pivot_value}: "
            f"{child.value} will move up to take its place",
            pivot_value,
        ),
        RotationStep(
            StepKind.AFTER,
            f"After {name} rotation at {pivot_value}: "
            f"{child.value} is now the parent of {pivot_value}",
            pivot_value,
        ),
    ]


def apply_rotation(root: Optional[BSTNode],
                   pivot_value: int,
                   direction: Union[RotationDirection, str]) -> Optional[BSTNode]:
    """Perform the rotation in place.

    No validation beyond what rotate_left / rotate_right do; call
    get_rotation_steps first to find out whether the rotation is valid.

    Returns:
        Root of the rotated tree
    """
    if parse_direction(direction) is RotationDirection.LEFT:
        return rotate_left(root, pivot_value)
    return rotate_right(root, pivot_value)


def preview_rotation(root: Optional[BSTNode],
                     pivot_value: int,
                     direction: Union[RotationDirection, str]) -> Optional[BSTNode]:
    """Rotate a copy of the tree, leaving root untouched."""
    return apply_rotation(clone_tree(root), pivot_value, direction)
