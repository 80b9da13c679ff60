"""Insertion practice session.

Holds the state of one "where does this value go?" exercise: a random
tree, the value the learner has to place, whether the answer has been
revealed, and the values inserted so far. Rendering is left entirely to
the caller.
"""

import logging
import random
from typing import FrozenSet, Optional, Tuple

from ..api import find_insertion_point, inserted, tree_values
from ..config import PracticeConfig
from ..core.node import BSTNode
from ..errors import InvalidConfigError
from ..generator import RandomValueGenerator, generate_random_bst

logger = logging.getLogger(__name__)


class InsertionPractice:
    """Drives a sequence of insertion exercises on one growing tree.

    Typical flow::

        session = InsertionPractice(PracticeConfig(seed=3))
        session.new_problem()
        session.check_answer(parent_value=30, side="right")
        session.show_answer()
        session.continue_practice()
    """

    def __init__(self,
                 config: Optional[PracticeConfig] = None,
                 rng: Optional[random.Random] = None):
        """Create a session.

        Args:
            config: Tree size and value range (defaults to PracticeConfig())
            rng: Random instance to draw from (defaults to one seeded from config)

        Raises:
            InvalidConfigError: If config fails validation
        """
        self.config = config if config is not None else PracticeConfig()

        config_errors = self.config.validate()
        if config_errors:
            raise InvalidConfigError(
                f"Invalid configuration: {'; '.join(config_errors)}"
            )

        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self._values = RandomValueGenerator(
            self.config.min_value, self.config.max_value, rng=self.rng
        )

        self._root: Optional[BSTNode] = None
        self._existing: set = set()
        self._history: list = []
        self._value_to_insert: Optional[int] = None
        self._answer_shown = False

    @property
    def root(self) -> Optional[BSTNode]:
        return self._root

    @property
    def value_to_insert(self) -> Optional[int]:
        return self._value_to_insert

    @property
    def existing_values(self) -> FrozenSet[int]:
        return frozenset(self._existing)

    @property
    def history(self) -> Tuple[int, ...]:
        """Values inserted so far, oldest first."""
        return tuple(self._history)

    @property
    def answer_shown(self) -> bool:
        return self._answer_shown

    def new_problem(self) -> Optional[BSTNode]:
        """Start over with a fresh random tree and a new value to place.

        Returns:
            Root of the new tree
        """
        self._root = generate_random_bst(
            self.config.node_count,
            self.config.min_value,
            self.config.max_value,
            rng=self.rng,
        )
        self._existing = set(tree_values(self._root))
        self._history = []
        self._answer_shown = False
        self._value_to_insert = self._values.pick_unused(self._existing)

        logger.debug(
            "New insertion problem: tree %s, value to insert %s",
            tree_values(self._root, 'pre_order'), self._value_to_insert,
        )
        return self._root

    def set_value(self, value: int) -> None:
        """Replace the value to insert with one chosen by the learner.

        Raises:
            ValueError: If value is already in the tree
        """
        self._require_problem()
        if value in self._existing:
            raise ValueError(f"Value {value} is already in the tree")
        self._value_to_insert = value
        self._answer_shown = False

    def randomize_value(self) -> int:
        """Draw a different unused value to insert into the current tree.

        Returns:
            The new value to insert

        Raises:
            CapacityExceededError: If every value in the range is used
        """
        self._require_problem()
        self._value_to_insert = self._values.pick_unused(self._existing)
        self._answer_shown = False
        return self._value_to_insert

    def check_answer(self, parent_value: Optional[int], side: Optional[str]) -> bool:
        """Grade a proposed insertion point.

        Args:
            parent_value: Value of the node the new value should hang from
                (None when the tree is empty)
            side: "left" or "right" (None when the tree is empty)

        Returns:
            True if the proposal matches where insert puts the value
        """
        self._require_problem()
        expected = find_insertion_point(self._root, self._value_to_insert)
        if expected is None:
            return False
        if side is not None:
            side = side.lower()
        return expected.parent_value == parent_value and expected.side == side

    def show_answer(self) -> BSTNode:
        """Insert the value and make the result the current tree.

        The insertion runs on a copy, so trees handed out earlier keep
        their shape.

        Returns:
            Root of the tree including the inserted value
        """
        self._require_problem()
        if self._answer_shown:
            return self._root

        self._root = inserted(self._root, self._value_to_insert)
        self._existing.add(self._value_to_insert)
        self._answer_shown = True
        return self._root

    def continue_practice(self) -> int:
        """Keep the current tree and pick the next value to insert.

        Returns:
            The new value to insert

        Raises:
            RuntimeError: If the current answer has not been shown yet
            CapacityExceededError: If every value in the range is used
        """
        if not self._answer_shown:
            raise RuntimeError("Show the answer before moving to the next value")

        next_value = self._values.pick_unused(self._existing)
        self._history.append(self._value_to_insert)
        self._value_to_insert = next_value
        self._answer_shown = False
        return self._value_to_insert

    def _require_problem(self) -> None:
        if self._value_to_insert is None:
            raise RuntimeError("No active problem; call new_problem() first")
