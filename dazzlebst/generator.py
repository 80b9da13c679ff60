"""Random value generation and random tree building for DazzleBST.

Values are drawn uniformly without replacement. The number of distinct
values in the range is checked up front, so asking for more values than
the range holds fails immediately instead of retrying forever.
"""

import logging
import random
from typing import Iterable, List, Optional

from .core.node import BSTNode
from .core.tree import insert
from .errors import CapacityExceededError, InvalidConfigError

logger = logging.getLogger(__name__)


class RandomValueGenerator:
    """Draws distinct integers from the inclusive range [min_value, max_value].

    Example:
        >>> gen = RandomValueGenerator(1, 50, seed=7)
        >>> values = gen.sample(7)
        >>> len(set(values))
        7
    """

    def __init__(self,
                 min_value: int,
                 max_value: int,
                 seed: Optional[int] = None,
                 rng: Optional[random.Random] = None):
        """Initialize the generator.

        Args:
            min_value: Smallest value that may be drawn
            max_value: Largest value that may be drawn
            seed: Seed for a private random.Random (ignored if rng is given)
            rng: Random instance to draw from

        Raises:
            InvalidConfigError: If max_value is less than min_value
        """
        if max_value < min_value:
            raise InvalidConfigError(
                f"Invalid value range: max_value {max_value} is less than "
                f"min_value {min_value}"
            )
        self.min_value = min_value
        self.max_value = max_value
        self.rng = rng if rng is not None else random.Random(seed)

    @property
    def capacity(self) -> int:
        """Number of distinct values the range holds."""
        return self.max_value - self.min_value + 1

    def sample(self, count: int) -> List[int]:
        """Draw count distinct values in random order.

        Raises:
            CapacityExceededError: If count exceeds capacity
        """
        if count <= 0:
            return []
        if count > self.capacity:
            raise CapacityExceededError(
                f"Cannot draw {count} distinct values from "
                f"[{self.min_value}, {self.max_value}]: only {self.capacity} available"
            )
        return self.rng.sample(range(self.min_value, self.max_value + 1), count)

    def pick_unused(self, used: Iterable[int]) -> int:
        """Draw one value from the range that is not in used.

        Every remaining value is equally likely.

        Raises:
            CapacityExceededError: If every value in the range is used
        """
        used = set(used)
        remaining = [
            value for value in range(self.min_value, self.max_value + 1)
            if value not in used
        ]
        if not remaining:
            raise CapacityExceededError(
                f"Every value in [{self.min_value}, {self.max_value}] is already used"
            )
        return self.rng.choice(remaining)


def generate_random_bst(size: int,
                        min_value: int = 1,
                        max_value: int = 100,
                        seed: Optional[int] = None,
                        rng: Optional[random.Random] = None) -> Optional[BSTNode]:
    """Build a BST from size distinct random values.

    Values are inserted in the order they are drawn and the tree is not
    rebalanced, so its shape depends entirely on that order.

    Args:
        size: Number of nodes (<= 0 returns an empty tree)
        min_value: Smallest value that may be drawn
        max_value: Largest value that may be drawn
        seed: Seed for reproducible trees
        rng: Random instance to draw from (takes precedence over seed)

    Returns:
        Root of the new tree, or None when size <= 0

    Raises:
        CapacityExceededError: If size exceeds max_value - min_value + 1
    """
    if size <= 0:
        return None

    generator = RandomValueGenerator(min_value, max_value, seed=seed, rng=rng)
    values = generator.sample(size)

    root = None
    for value in values:
        root = insert(root, value)

    logger.debug("Generated random BST from insertion order %s", values)
    return root
