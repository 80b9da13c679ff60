"""Headless practice sessions for DazzleBST.

Each session holds the state of one exercise and drives the tree core;
drawing the tree is up to the caller.
"""

from .insertion import InsertionPractice
from .rotation import RotationPractice, RotationState

__all__ = [
    'InsertionPractice',
    'RotationPractice',
    'RotationState',
]
