"""DazzleBST - Binary Search Tree Practice Library.

DazzleBST provides the exact, textbook BST operations behind interactive
insertion and rotation exercises: insert, find, clone, single rotations
and two-stage rotation plans, plus random tree generation.

Typical use:
━━━━━━━━━━━━━━━━━━━━━━━━━━
    from dazzlebst import build_tree, get_rotation_steps, apply_rotation

    root = build_tree([50, 30, 70, 20, 40])
    steps = get_rotation_steps(root, 50, "left")
    root = apply_rotation(root, 50, "left")
━━━━━━━━━━━━━━━━━━━━━━━━━━

Mutating operations work in place; clone_tree first when the original
tree must survive.
"""

__version__ = "0.1.0"

# Core components
from .core.node import TreeNode, BSTNode
from .core.tree import (
    insert,
    find_node,
    clone_tree,
    can_rotate_left,
    can_rotate_right,
    rotate_left,
    rotate_right,
)

# Configuration and errors
from .config import (
    PracticeConfig,
    RotationDirection,
    TraversalOrder,
)
from .errors import (
    BSTError,
    CapacityExceededError,
    InvalidConfigError,
    PivotNotFoundError,
)

# Planning and generation
from .planning import (
    StepKind,
    RotationStep,
    get_rotation_steps,
    apply_rotation,
    preview_rotation,
)
from .generator import RandomValueGenerator, generate_random_bst

# High-level API
from .api import (
    InsertionPoint,
    build_tree,
    inserted,
    traverse_tree,
    tree_values,
    count_nodes,
    tree_height,
    get_leaf_nodes,
    get_tree_stats,
    is_valid_bst,
    trees_equal,
    find_parent,
    find_insertion_point,
)

# Practice sessions
from .practice import InsertionPractice, RotationPractice, RotationState

__all__ = [
    "__version__",
    # Core
    "TreeNode",
    "BSTNode",
    "insert",
    "find_node",
    "clone_tree",
    "can_rotate_left",
    "can_rotate_right",
    "rotate_left",
    "rotate_right",
    # Config and errors
    "PracticeConfig",
    "RotationDirection",
    "TraversalOrder",
    "BSTError",
    "CapacityExceededError",
    "InvalidConfigError",
    "PivotNotFoundError",
    # Planning and generation
    "StepKind",
    "RotationStep",
    "get_rotation_steps",
    "apply_rotation",
    "preview_rotation",
    "RandomValueGenerator",
    "generate_random_bst",
    # API
    "InsertionPoint",
    "build_tree",
    "inserted",
    "traverse_tree",
    "tree_values",
    "count_nodes",
    "tree_height",
    "get_leaf_nodes",
    "get_tree_stats",
    "is_valid_bst",
    "trees_equal",
    "find_parent",
    "find_insertion_point",
    # Practice
    "InsertionPractice",
    "RotationPractice",
    "RotationState",
]
