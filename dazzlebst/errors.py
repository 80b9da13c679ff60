"""Exceptions raised by DazzleBST.

Most operations are soft: they resolve expected edge cases to ``None``,
a no-op, or an invalid rotation step. The exceptions below cover the
cases where continuing would be wrong.
"""


class BSTError(Exception):
    """Base class for all DazzleBST errors."""
    pass


class CapacityExceededError(BSTError, ValueError):
    """Raised when more distinct values are requested than a range holds."""
    pass


class InvalidConfigError(BSTError, ValueError):
    """Raised when a configuration fails validation."""
    pass


class PivotNotFoundError(BSTError, LookupError):
    """Raised by strict rotations when the pivot value is not in the tree."""

    def __init__(self, pivot_value: int):
        self.pivot_value = pivot_value
        super().__init__(f"Node with value {pivot_value} not found in the tree")
