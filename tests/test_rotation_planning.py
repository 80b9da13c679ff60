"""Tests for rotation step planning and application."""

import dataclasses

import pytest

from dazzlebst import (
    RotationDirection,
    RotationStep,
    StepKind,
    apply_rotation,
    build_tree,
    get_rotation_steps,
    preview_rotation,
    tree_values,
)
from dazzlebst.testing import tree_shape


class TestGetRotationSteps:
    """Validation and step content of get_rotation_steps."""

    @pytest.mark.parametrize("direction", ["left", "right"])
    def test_leaf_is_invalid(self, sample_tree, direction):
        steps = get_rotation_steps(sample_tree, 20, direction)

        assert len(steps) == 1
        assert steps[0].kind is StepKind.INVALID
        assert steps[0].pivot_value is None
        assert "20" in steps[0].description

    def test_missing_pivot_is_invalid(self, sample_tree):
        steps = get_rotation_steps(sample_tree, 99, RotationDirection.LEFT)

        assert len(steps) == 1
        assert steps[0].kind is StepKind.INVALID
        assert "not found" in steps[0].description

    def test_empty_tree_is_invalid(self):
        steps = get_rotation_steps(None, 1, "left")
        assert [s.kind for s in steps] == [StepKind.INVALID]

    def test_missing_child_message_names_child_side(self, sample_tree):
        steps = get_rotation_steps(sample_tree, 70, "right")
        assert "no left child" in steps[0].description

        steps = get_rotation_steps(build_tree([50, 30]), 50, "left")
        assert "no right child" in steps[0].description

    def test_valid_left_rotation_plan(self, sample_tree):
        steps = get_rotation_steps(sample_tree, 50, "left")

        assert [s.kind for s in steps] == [StepKind.BEFORE, StepKind.AFTER]
        assert all(s.pivot_value == 50 for s in steps)
        assert "70" in steps[0].description
        assert "left" in steps[0].description

    def test_valid_right_rotation_plan(self, sample_tree):
        steps = get_rotation_steps(sample_tree, 50, RotationDirection.RIGHT)

        assert [s.kind for s in steps] == [StepKind.BEFORE, StepKind.AFTER]
        assert "30" in steps[1].description

    def test_planning_does_not_mutate(self, sample_tree):
        before = tree_shape(sample_tree)
        get_rotation_steps(sample_tree, 50, "left")
        assert tree_shape(sample_tree) == before

    def test_direction_string_is_case_insensitive(self, sample_tree):
        steps = get_rotation_steps(sample_tree, 50, "LEFT")
        assert steps[0].kind is StepKind.BEFORE

    def test_unknown_direction_raises(self, sample_tree):
        with pytest.raises(ValueError, match="Unknown rotation direction"):
            get_rotation_steps(sample_tree, 50, "sideways")

    def test_steps_are_immutable(self, sample_tree):
        step = get_rotation_steps(sample_tree, 50, "left")[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            step.description = "changed"

    def test_step_equality(self):
        assert RotationStep(StepKind.BEFORE, "x", 1) == RotationStep(StepKind.BEFORE, "x", 1)


class TestApplyRotation:
    """apply_rotation and preview_rotation."""

    def test_apply_left_matches_rotate_left(self, sample_tree):
        result = apply_rotation(sample_tree, 50, "left")
        assert tree_shape(result) == (
            70, (50, (30, (20, None, None), (40, None, None)), None), None
        )

    def test_apply_right(self, sample_tree):
        result = apply_rotation(sample_tree, 30, RotationDirection.RIGHT)
        assert result is sample_tree
        assert tree_shape(result.left) == (20, None, (30, None, (40, None, None)))

    def test_apply_invalid_rotation_is_noop(self, sample_tree):
        before = tree_shape(sample_tree)
        assert apply_rotation(sample_tree, 20, "left") is sample_tree
        assert tree_shape(sample_tree) == before

    def test_preview_leaves_input_untouched(self, sample_tree):
        before = tree_shape(sample_tree)

        preview = preview_rotation(sample_tree, 50, "left")

        assert tree_shape(sample_tree) == before
        assert preview.value == 70
        assert tree_values(preview) == tree_values(sample_tree)

    def test_preview_empty_tree(self):
        assert preview_rotation(None, 1, "right") is None
