"""
Core graph data structures and management.

This module contains the list and matrix graph representations and the
vertex storage they share, without the text input or reporting layers.
"""

__all__ = []
