"""
Text input and report formatting for graphs.

These modules sit outside the core: the reader turns graph descriptions into
build calls, and the display functions turn computed results into text.
"""

from .reader import (
    GraphDescription,
    iter_graph_descriptions,
    load_list_graph,
    load_matrix_graph,
    read_graph_description,
)
from .display import format_all_paths, format_depth_first, format_list_graph, format_path

__all__ = [
    'GraphDescription',
    'iter_graph_descriptions',
    'load_list_graph',
    'load_matrix_graph',
    'read_graph_description',
    'format_all_paths',
    'format_depth_first',
    'format_list_graph',
    'format_path',
]
