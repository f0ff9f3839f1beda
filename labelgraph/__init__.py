"""
PyLabelGraph - Labeled Graph Models Library

A Python library providing two small directed graph models over a bounded,
labeled vertex set (at most 100 vertices).

Main Classes:
    ListGraph: Adjacency-list graph with depth-first traversal
    MatrixGraph: Adjacency-matrix graph with all-pairs shortest paths
    pyvertex: Vertex representation shared by both models
    EdgeResult: Outcome of an edge insertion or removal
    PathResult: Shortest distance and path between two vertices

Example:
    >>> from labelgraph import MatrixGraph
    >>> graph = MatrixGraph()
    >>> graph.build_graph(["A", "B", "C"], [(1, 2, 5), (2, 3, 3), (1, 3, 20), (0, 0, 0)])
    True
    >>> graph.report(1, 3).path
    (1, 2, 3)
"""

__version__ = "0.1.0"

from labelgraph.classes.vertex import pyvertex
from labelgraph.classes.results import EdgeResult, EdgeStatus, PathResult, PathState
from labelgraph.core.vertices import GRAPH_NODE_LIMIT
from labelgraph.core.list_graph import ListGraph
from labelgraph.core.matrix_graph import MatrixGraph

__all__ = [
    'ListGraph',
    'MatrixGraph',
    'pyvertex',
    'EdgeResult',
    'EdgeStatus',
    'PathResult',
    'PathState',
    'GRAPH_NODE_LIMIT',
]
