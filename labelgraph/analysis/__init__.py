"""
Graph analysis modules for traversal and path finding.

This module contains depth-first traversal for list graphs and shortest-path
and path enumeration algorithms for matrix graphs.
"""

__all__ = []
