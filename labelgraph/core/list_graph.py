"""
Adjacency-list graph supporting depth-first traversal.

Each vertex owns an ordered collection of destination indices. Insertion
prepends, so the most recently inserted edge is the first one traversed.
"""

import logging
from collections import deque
from typing import Deque, Iterable, List, Optional, Sequence

from ..classes.results import EdgeResult, EdgeStatus
from ..analysis.traversal import DepthFirstTraversal
from .vertices import GRAPH_NODE_LIMIT, VertexTable, iter_edge_records

logger = logging.getLogger(__name__)


class ListGraph:
    """
    Directed, unweighted graph stored as adjacency lists.

    Self-loops are rejected. Duplicate edges are kept; each insertion adds
    another entry to the source vertex's list.
    """

    def __init__(self, node_limit: int = GRAPH_NODE_LIMIT):
        """
        Create an empty graph.

        Args:
            node_limit: Largest vertex count build_graph() accepts
        """
        self.vertices = VertexTable(node_limit)
        # Slot 0 is reserved so vertex indices address the list directly
        self.adjacency_list: List[Deque[int]] = [deque()]
        self.aRejected_edge: List[EdgeResult] = []
        self._traversal = DepthFirstTraversal(self)

    @property
    def size(self) -> int:
        return self.vertices.size

    def build_graph(self, labels: Iterable[str], edges: Iterable[Sequence[int]]) -> bool:
        """
        Build the graph from vertex labels and (source, dest) edge records.

        Edge records are consumed until a record with source 0. Records that
        fail validation are logged and skipped.

        Args:
            labels: One label per vertex, vertex 1 first
            edges: (source, dest) records ending with a sentinel record

        Returns:
            True if the graph was built, False if the vertex count was out of
            range and the graph was left empty
        """
        self.adjacency_list = [deque()]
        self.aRejected_edge = []

        if not self.vertices.load(labels):
            return False

        self.adjacency_list.extend(deque() for _ in self.vertices.indices())

        for source, dest in iter_edge_records(edges):
            result = self.insert_edge(source, dest)
            if not result:
                logger.warning(f"Could not insert {result.describe()}")
                self.aRejected_edge.append(result)

        logger.debug(f"Built list graph with {self.size} vertices and {self.get_edge_count()} edges")
        return True

    def insert_edge(self, source: int, dest: int) -> EdgeResult:
        """
        Insert a directed edge at the head of the source vertex's list.

        Args:
            source: Starting vertex index
            dest: Ending vertex index

        Returns:
            EdgeResult describing whether the edge was inserted
        """
        status = self.vertices.check_edge(source, dest)
        if status is EdgeStatus.OK:
            self.adjacency_list[source].appendleft(int(dest))
        return EdgeResult(source, dest, status)

    def get_edges(self, vertex: int) -> List[int]:
        """Destinations of a vertex's outgoing edges in traversal order."""
        vertex = self.vertices.require_index(vertex)
        return list(self.adjacency_list[vertex])

    def get_edge_count(self) -> int:
        return sum(len(edges) for edges in self.adjacency_list)

    def get_vertex_count(self) -> int:
        return self.vertices.size

    def get_label(self, vertex: int) -> Optional[str]:
        return self.vertices.get_label(vertex)

    def depth_first_search(self) -> List[int]:
        """Vertex indices in depth-first order, covering every component."""
        return self._traversal.depth_first_search()
