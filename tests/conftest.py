"""Shared pytest configuration and fixtures for the DazzleBST test suite."""

import pytest

from dazzlebst import build_tree


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: long-running tests excluded by run_tests.py unless --all"
    )


@pytest.fixture
def sample_tree():
    """The five-node tree used throughout the docs.

        50
       /  \\
      30   70
     /  \\
    20   40
    """
    return build_tree([50, 30, 70, 20, 40])
