"""
Adjacency-matrix graph with all-pairs shortest paths.

The cost matrix and the shortest-path table are numpy arrays sized to the
declared vertex count plus one, so vertex indices address them directly and
row and column 0 stay unused.
"""

import logging
from numbers import Integral
from typing import Iterable, List, Optional, Sequence, Tuple

import numpy as np

from ..classes.results import EdgeResult, EdgeStatus, PathResult, PathState
from ..analysis.shortest_path import INFINITY, MAX_WEIGHT, ShortestPathFinder
from ..analysis.pathfinding import PathFinder
from .vertices import GRAPH_NODE_LIMIT, VertexTable, iter_edge_records

logger = logging.getLogger(__name__)


class MatrixGraph:
    """
    Directed graph with positive integer edge costs stored in a matrix.

    Shortest paths are computed lazily. Any successful edge mutation marks
    the shortest-path table stale, and the next query recomputes it.
    """

    def __init__(self, node_limit: int = GRAPH_NODE_LIMIT):
        """
        Create an empty graph.

        Args:
            node_limit: Largest vertex count build_graph() accepts
        """
        self.vertices = VertexTable(node_limit)
        self.cost = np.full((1, 1), INFINITY, dtype=np.int64)
        self.state = PathState.STALE
        self.aRejected_edge: List[EdgeResult] = []

        self._finder = ShortestPathFinder(self)
        self._pathfinder = PathFinder(self)

    @property
    def size(self) -> int:
        return self.vertices.size

    # ========================================================================
    # BUILD & EDGE MUTATION
    # ========================================================================

    def build_graph(self, labels: Iterable[str], edges: Iterable[Sequence[int]]) -> bool:
        """
        Build the graph from vertex labels and (source, dest, cost) records.

        Edge records are consumed until a record with source 0. Records that
        fail validation are logged and skipped.

        Args:
            labels: One label per vertex, vertex 1 first
            edges: (source, dest, cost) records ending with a sentinel record

        Returns:
            True if the graph was built, False if the vertex count was out of
            range and the graph was left empty
        """
        self.aRejected_edge = []
        loaded = self.vertices.load(labels)

        n = self.size + 1
        self.cost = np.full((n, n), INFINITY, dtype=np.int64)
        for v in self.vertices.indices():
            self.cost[v, v] = 0
        self._invalidate()
        self._finder.reset()

        if not loaded:
            return False

        for source, dest, cost in iter_edge_records(edges):
            result = self.insert_edge(source, dest, cost)
            if not result:
                logger.warning(f"Could not insert {result.describe()}")
                self.aRejected_edge.append(result)

        logger.debug(f"Built matrix graph with {self.size} vertices and {self.get_edge_count()} edges")
        return True

    def insert_edge(self, source: int, dest: int, weight: int) -> EdgeResult:
        """
        Set the cost of the edge from source to dest, replacing any prior cost.

        Args:
            source: Starting vertex index
            dest: Ending vertex index
            weight: Positive integer cost of the edge, at most MAX_WEIGHT

        Returns:
            EdgeResult describing whether the edge was inserted
        """
        status = self.vertices.check_edge(source, dest)

        if status is EdgeStatus.OK:
            if not isinstance(weight, Integral) or isinstance(weight, bool):
                status = EdgeStatus.INVALID_WEIGHT
            elif weight <= 0:
                status = EdgeStatus.NON_POSITIVE_WEIGHT
            elif weight > MAX_WEIGHT:
                status = EdgeStatus.INVALID_WEIGHT

        if status is EdgeStatus.OK:
            self.cost[source, dest] = int(weight)
            self._invalidate()

        return EdgeResult(source, dest, status, weight)

    def remove_edge(self, source: int, dest: int) -> EdgeResult:
        """
        Remove the edge from source to dest.

        Removing an edge that is not present still succeeds when both indices
        are valid; afterwards the edge is not in the graph either way.

        Returns:
            EdgeResult describing whether the indices were valid
        """
        status = self.vertices.check_edge(source, dest)

        if status is EdgeStatus.OK:
            self.cost[source, dest] = INFINITY
            self._invalidate()

        return EdgeResult(source, dest, status)

    def _invalidate(self) -> None:
        if self.state is PathState.CURRENT:
            logger.debug("Shortest paths marked stale")
        self.state = PathState.STALE

    # ========================================================================
    # EDGE QUERIES
    # ========================================================================

    def get_cost(self, source: int, dest: int) -> Optional[int]:
        """
        Cost of the edge from source to dest.

        Returns:
            The edge cost, 0 when source equals dest, or None when there is
            no edge or either index is invalid
        """
        if not (self.vertices.is_valid_index(source) and self.vertices.is_valid_index(dest)):
            return None
        cost = int(self.cost[source, dest])
        return None if cost == INFINITY else cost

    def has_edge(self, source: int, dest: int) -> bool:
        return source != dest and self.get_cost(source, dest) is not None

    def get_neighbors(self, vertex: int) -> List[int]:
        """Destinations of the outgoing edges of a vertex, in index order."""
        if not self.vertices.is_valid_index(vertex):
            return []
        row = self.cost[vertex]
        return [w for w in self.vertices.indices() if w != vertex and row[w] != INFINITY]

    def get_edge_count(self) -> int:
        return sum(len(self.get_neighbors(v)) for v in self.vertices.indices())

    def get_vertex_count(self) -> int:
        return self.vertices.size

    def get_label(self, vertex: int) -> Optional[str]:
        return self.vertices.get_label(vertex)

    # ========================================================================
    # SHORTEST PATHS
    # ========================================================================

    def find_shortest_path(self) -> None:
        """Run Dijkstra's algorithm from every vertex unless the table is current."""
        if self.state is PathState.CURRENT:
            return

        self._finder.find_shortest_paths()
        self.state = PathState.CURRENT

    def get_distance(self, source: int, dest: int) -> Optional[int]:
        """Shortest distance from source to dest, None when unreachable."""
        source = self.vertices.require_index(source, "source")
        dest = self.vertices.require_index(dest, "dest")
        self.find_shortest_path()
        return self._finder.get_distance(source, dest)

    def path_to(self, source: int, dest: int) -> Optional[Tuple[int, ...]]:
        """
        Vertices along the shortest path from source to dest.

        Returns:
            Vertex indices from source to dest inclusive, or None when dest
            is unreachable

        Raises:
            ValueError: If either index is not a vertex of this graph
        """
        source = self.vertices.require_index(source, "source")
        dest = self.vertices.require_index(dest, "dest")
        self.find_shortest_path()
        return self._finder.get_path(source, dest)

    def report(self, source: int, dest: int) -> PathResult:
        """
        Shortest distance and path for one ordered pair.

        Raises:
            ValueError: If either index is not a vertex of this graph
        """
        path = self.path_to(source, dest)
        if path is None:
            return PathResult(int(source), int(dest), None)
        return PathResult(int(source), int(dest), self._finder.get_distance(source, dest), path)

    def report_all(self) -> List[PathResult]:
        """Shortest distance and path for every ordered pair of distinct vertices."""
        self.find_shortest_path()

        results = []
        for source in self.vertices.indices():
            for dest in self.vertices.indices():
                if dest != source:
                    results.append(self.report(source, dest))

        return results

    # ========================================================================
    # PATH ENUMERATION
    # ========================================================================

    def find_all_paths(self, source: int, dest: int, max_depth: Optional[int] = None) -> List[List[int]]:
        """Find every simple path from source to dest."""
        source = self.vertices.require_index(source, "source")
        dest = self.vertices.require_index(dest, "dest")
        return self._pathfinder.find_all_paths(source, dest, max_depth)

    def path_cost(self, path: Sequence[int]) -> Optional[int]:
        """Sum of edge costs along a path, None if the path uses a missing edge."""
        return self._pathfinder.path_cost(path)
