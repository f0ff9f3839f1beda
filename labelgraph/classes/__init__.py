"""
Core data classes for graph representation.

This module contains the small value types shared by the list and matrix
graph models.
"""

from .vertex import pyvertex
from .results import EdgeResult, EdgeStatus, PathResult, PathState

__all__ = [
    'pyvertex',
    'EdgeResult',
    'EdgeStatus',
    'PathResult',
    'PathState',
]
