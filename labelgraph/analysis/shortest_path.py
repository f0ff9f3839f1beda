"""
All-pairs shortest paths for adjacency-matrix graphs.

Dijkstra's algorithm is run once per source vertex. Results are kept in a
table of numpy arrays indexed [source, dest], with row and column 0 unused.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Tuple

import numpy as np

from ..core.vertices import GRAPH_NODE_LIMIT

if TYPE_CHECKING:
    from ..core.matrix_graph import MatrixGraph

logger = logging.getLogger(__name__)

# Cost of a missing edge and distance of an unreachable vertex
INFINITY = int(np.iinfo(np.int64).max)

# Largest edge cost; a simple path of GRAPH_NODE_LIMIT - 1 such edges stays below INFINITY
MAX_WEIGHT = INFINITY // GRAPH_NODE_LIMIT


class ShortestPathFinder:
    """
    Dijkstra's algorithm over a MatrixGraph cost matrix.

    This class holds the shortest-path table:
    - visited[s, v]: v has been settled while solving from s
    - distance[s, v]: shortest known distance from s to v
    - predecessor[s, v]: vertex preceding v on that path, 0 for none
    """

    def __init__(self, graph: 'MatrixGraph'):
        """
        Initialize the finder with an empty table.

        Args:
            graph: MatrixGraph instance whose cost matrix is searched
        """
        self.graph = graph
        self.reset()

    def reset(self) -> None:
        """Clear the table and size it to the graph."""
        n = self.graph.size + 1
        self.visited = np.zeros((n, n), dtype=bool)
        self.distance = np.full((n, n), INFINITY, dtype=np.int64)
        self.predecessor = np.zeros((n, n), dtype=np.int64)

    def find_shortest_paths(self) -> None:
        """Recompute the table for every source vertex."""
        self.reset()

        for source in self.graph.vertices.indices():
            self._solve_from(source)

        logger.debug(f"Computed shortest paths for {self.graph.size} source vertices")

    def _solve_from(self, source: int) -> None:
        self.distance[source, source] = 0

        for _ in range(self.graph.size):
            v = self._find_next_vertex(source)
            if v is None:
                # Remaining vertices are unreachable from source
                break
            self.visited[source, v] = True
            self._relax_neighbors(source, v)

    def _find_next_vertex(self, source: int) -> Optional[int]:
        """
        Pick the unvisited vertex closest to source.

        Ties go to the lowest index, since argmin returns the first minimum.

        Returns:
            Vertex index, or None if no unvisited vertex is reachable
        """
        row = np.where(self.visited[source, 1:], INFINITY, self.distance[source, 1:])
        offset = int(np.argmin(row))

        if row[offset] == INFINITY:
            return None
        return offset + 1

    def _relax_neighbors(self, source: int, v: int) -> None:
        # Python ints so the sum of two large costs cannot wrap around
        dist_v = int(self.distance[source, v])
        cost_row = self.graph.cost[v]

        for w in range(1, self.graph.size + 1):
            if self.visited[source, w]:
                continue

            edge_cost = int(cost_row[w])
            if edge_cost == INFINITY:
                continue

            candidate = dist_v + edge_cost
            if candidate < int(self.distance[source, w]):
                self.distance[source, w] = candidate
                self.predecessor[source, w] = v

    def get_distance(self, source: int, dest: int) -> Optional[int]:
        """Shortest distance from source to dest, None if unreachable."""
        distance = int(self.distance[source, dest])
        return None if distance == INFINITY else distance

    def get_path(self, source: int, dest: int) -> Optional[Tuple[int, ...]]:
        """
        Reconstruct the shortest path by walking predecessors back from dest.

        Args:
            source: Starting vertex index
            dest: Ending vertex index

        Returns:
            Vertex indices from source to dest inclusive, or None if dest is
            unreachable from source
        """
        if self.get_distance(source, dest) is None:
            return None

        chain: List[int] = [dest]
        current = dest

        while current != source:
            current = int(self.predecessor[source, current])
            if current == 0:
                raise RuntimeError(f"Broken predecessor chain from {source} to {dest}")
            chain.append(current)

        chain.reverse()
        return tuple(chain)
