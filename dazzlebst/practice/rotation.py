"""Rotation practice session.

Walks a learner through a single rotation in two stages. The session
moves through ``IDLE -> PLANNED -> APPLIED -> IDLE``: planning snapshots
a clone of the tree, reaching APPLIED performs the rotation, and stepping
back from APPLIED restores the snapshot.
"""

import logging
from enum import Enum
from typing import List, Optional, Union

from ..api import tree_values
from ..config import RotationDirection, parse_direction
from ..core.node import BSTNode
from ..core.tree import can_rotate_left, can_rotate_right, clone_tree, find_node, insert
from ..planning import RotationStep, StepKind, apply_rotation, get_rotation_steps

logger = logging.getLogger(__name__)


class RotationState(Enum):
    """Where the session is in the rotation walkthrough."""
    IDLE = "idle"
    PLANNED = "planned"
    APPLIED = "applied"


class RotationPractice:
    """Holds the tree, the selected pivot and the rotation in progress.

    Every user-facing outcome is also written to ``message`` so a front
    end can show it without composing its own text.
    """

    def __init__(self, root: Optional[BSTNode] = None):
        self.root = root
        self.selected_value: Optional[int] = None
        self.direction = RotationDirection.LEFT
        self.steps: List[RotationStep] = []
        self.step_index = -1
        self.message = ""
        self._snapshot: Optional[BSTNode] = None

    @property
    def state(self) -> RotationState:
        if self.step_index < 0:
            return RotationState.IDLE
        if self.steps[self.step_index].kind is StepKind.AFTER:
            return RotationState.APPLIED
        return RotationState.PLANNED

    @property
    def current_step(self) -> Optional[RotationStep]:
        if self.step_index < 0:
            return None
        return self.steps[self.step_index]

    def node_values(self) -> List[int]:
        """Sorted values, for a pivot picker."""
        return tree_values(self.root)

    def add_node(self, value: int) -> bool:
        """Insert a value, abandoning any rotation in progress.

        Returns:
            False if the value was already in the tree
        """
        if find_node(self.root, value) is not None:
            self.message = f"Node with value {value} already exists"
            return False

        self.reset()
        self.root = insert(self.root, value)
        self.message = f"Added node with value {value}"
        return True

    def select(self, value: int) -> bool:
        """Choose the pivot for the next rotation.

        Returns:
            False if no node holds value
        """
        self.reset()
        if find_node(self.root, value) is None:
            self.selected_value = None
            self.message = f"Node with value {value} not found"
            return False

        self.selected_value = value
        self.message = f"Selected node {value}"
        return True

    def set_direction(self, direction: Union[RotationDirection, str]) -> None:
        self.direction = parse_direction(direction)
        self.reset()

    def can_rotate(self) -> bool:
        """Whether the selected node can rotate in the chosen direction."""
        if self.root is None or self.selected_value is None:
            return False
        node = find_node(self.root, self.selected_value)
        if node is None:
            return False
        if self.direction is RotationDirection.LEFT:
            return can_rotate_left(node)
        return can_rotate_right(node)

    def start(self) -> Optional[RotationStep]:
        """Plan the rotation and move to the BEFORE stage.

        Returns:
            The BEFORE step, the INVALID step if the rotation cannot be
            done, or None if no node is selected. While a rotation is
            already in progress the current step is returned unchanged.
        """
        if self.state is not RotationState.IDLE:
            return self.current_step

        if self.root is None or self.selected_value is None:
            self.message = "Please select a node first"
            return None

        steps = get_rotation_steps(self.root, self.selected_value, self.direction)
        if steps[0].kind is StepKind.INVALID:
            self.message = steps[0].description
            return steps[0]

        self._snapshot = clone_tree(self.root)
        self.steps = steps
        self.step_index = 0
        self.message = steps[0].description
        logger.debug("Planned %s rotation at %s", self.direction.value, self.selected_value)
        return steps[0]

    def next_step(self) -> Optional[RotationStep]:
        """Advance one stage, applying the rotation on reaching AFTER.

        Returns:
            The new current step, or None if there is nothing to advance to
        """
        if self.step_index < 0 or self.step_index >= len(self.steps) - 1:
            return None

        self.step_index += 1
        step = self.steps[self.step_index]
        self.message = step.description

        if step.kind is StepKind.AFTER and step.pivot_value is not None:
            self.root = apply_rotation(self.root, step.pivot_value, self.direction)
            logger.debug("Applied %s rotation at %s", self.direction.value, step.pivot_value)
        return step

    def previous_step(self) -> Optional[RotationStep]:
        """Go back one stage, restoring the pre-rotation tree if needed.

        Returns:
            The new current step, or None if already at the first stage
        """
        if self.step_index <= 0:
            return None

        leaving = self.steps[self.step_index]
        self.step_index -= 1
        step = self.steps[self.step_index]
        self.message = step.description

        if leaving.kind is StepKind.AFTER and step.kind is StepKind.BEFORE:
            # Restore from a fresh copy so the snapshot survives another round
            self.root = clone_tree(self._snapshot)
            logger.debug("Rolled back rotation at %s", step.pivot_value)
        return step

    def finish(self) -> bool:
        """Accept the applied rotation and return to IDLE.

        Returns:
            False if the rotation has not been applied yet
        """
        if self.state is not RotationState.APPLIED:
            return False
        self.reset()
        return True

    def reset(self) -> None:
        """Drop any rotation in progress; the tree is left as it is."""
        self.steps = []
        self.step_index = -1
        self._snapshot = None
