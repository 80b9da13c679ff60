"""Configuration system for DazzleBST.

This module defines the enums used to pick rotation directions and
traversal orders, and the PracticeConfig that controls how practice
trees are generated.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class RotationDirection(Enum):
    """Which way a single rotation turns the pivot."""
    LEFT = "left"       # Right child moves up
    RIGHT = "right"     # Left child moves up


class TraversalOrder(Enum):
    """Order in which tree nodes are visited."""
    IN_ORDER = "in_order"         # Left, node, right (sorted values)
    PRE_ORDER = "pre_order"       # Node before children
    POST_ORDER = "post_order"     # Children before node
    LEVEL_ORDER = "level_order"   # Level by level, left to right


def parse_direction(direction: Union[RotationDirection, str]) -> RotationDirection:
    """Parse a rotation direction from string or enum.

    Args:
        direction: Direction as enum or string ("left" / "right")

    Returns:
        RotationDirection enum value

    Raises:
        ValueError: If the direction is not recognized
    """
    if isinstance(direction, RotationDirection):
        return direction

    direction_lower = direction.lower() if isinstance(direction, str) else str(direction)
    for member in RotationDirection:
        if member.value == direction_lower:
            return member

    raise ValueError(f"Unknown rotation direction: {direction}")


def parse_order(order: Union[TraversalOrder, str]) -> TraversalOrder:
    """Parse a traversal order from string or enum.

    Args:
        order: Order as enum or string

    Returns:
        TraversalOrder enum value

    Raises:
        ValueError: If the order is not recognized
    """
    if isinstance(order, TraversalOrder):
        return order

    order_map = {
        'in_order': TraversalOrder.IN_ORDER,
        'inorder': TraversalOrder.IN_ORDER,
        'pre_order': TraversalOrder.PRE_ORDER,
        'preorder': TraversalOrder.PRE_ORDER,
        'dfs_pre': TraversalOrder.PRE_ORDER,
        'post_order': TraversalOrder.POST_ORDER,
        'postorder': TraversalOrder.POST_ORDER,
        'dfs_post': TraversalOrder.POST_ORDER,
        'level_order': TraversalOrder.LEVEL_ORDER,
        'level': TraversalOrder.LEVEL_ORDER,
        'bfs': TraversalOrder.LEVEL_ORDER,
    }

    order_lower = order.lower() if isinstance(order, str) else str(order)
    if order_lower in order_map:
        return order_map[order_lower]

    raise ValueError(
        f"Unknown traversal order: {order}. "
        f"Choose from: {', '.join(order_map.keys())}"
    )


@dataclass
class PracticeConfig:
    """Configuration for randomly generated practice trees.

    The defaults match the classic insertion exercise: seven nodes drawn
    from 1..50, leaving plenty of unused values to ask about.
    """

    node_count: int = 7                 # Nodes in a freshly generated tree
    min_value: int = 1                  # Smallest value that may be drawn
    max_value: int = 50                 # Largest value that may be drawn
    seed: Optional[int] = None          # Seed for reproducible sessions

    @property
    def capacity(self) -> int:
        """Number of distinct values in [min_value, max_value]."""
        return max(0, self.max_value - self.min_value + 1)

    @classmethod
    def small(cls) -> 'PracticeConfig':
        """Create config for a short warm-up tree."""
        return cls(node_count=5)

    @classmethod
    def large(cls) -> 'PracticeConfig':
        """Create config for a deeper tree with a wider value range."""
        return cls(node_count=15, min_value=1, max_value=99)

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if self.node_count < 0:
            errors.append("node_count cannot be negative")

        if self.max_value < self.min_value:
            errors.append("max_value cannot be less than min_value")
        elif self.node_count >= self.capacity:
            # One value must stay free so there is something left to insert
            errors.append(
                f"node_count must be less than the {self.capacity} values "
                f"available in [{self.min_value}, {self.max_value}]"
            )

        return errors
