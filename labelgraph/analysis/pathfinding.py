"""
Path enumeration and path costing for adjacency-matrix graphs.

This module provides exhaustive path search, used to cross-check the
shortest paths computed by Dijkstra's algorithm on small graphs.
"""

import logging
from typing import TYPE_CHECKING, List, Optional, Sequence, Set

if TYPE_CHECKING:
    from ..core.matrix_graph import MatrixGraph

logger = logging.getLogger(__name__)


class PathFinder:
    """
    Path finding algorithms for matrix graphs.

    This class provides methods for:
    - Finding all simple paths between vertices
    - Summing the edge costs along a path
    """

    def __init__(self, graph: 'MatrixGraph'):
        """
        Initialize the path finder.

        Args:
            graph: MatrixGraph instance to analyze
        """
        self.graph = graph

    def find_all_paths(self, start_id: int, target_id: int, max_depth: Optional[int] = None) -> List[List[int]]:
        """
        Find all simple paths from start to target vertex using DFS.

        Args:
            start_id: Starting vertex ID
            target_id: Target vertex ID
            max_depth: Maximum number of edges per path, defaults to the
                vertex count

        Returns:
            List of paths, where each path is a list of vertex IDs
        """
        if max_depth is None:
            max_depth = self.graph.size

        if start_id == target_id:
            return [[start_id]]

        paths = []

        def dfs_paths(current_id: int, path: List[int], visited: Set[int], depth: int):
            if depth > max_depth:
                return

            if current_id == target_id:
                paths.append(path.copy())
                return

            visited.add(current_id)

            for neighbor_id in self.graph.get_neighbors(current_id):
                if neighbor_id not in visited:
                    path.append(neighbor_id)
                    dfs_paths(neighbor_id, path, visited, depth + 1)
                    path.pop()

            visited.remove(current_id)

        dfs_paths(start_id, [start_id], set(), 0)

        logger.debug(f"Found {len(paths)} paths from {start_id} to {target_id}")
        return paths

    def path_cost(self, path: Sequence[int]) -> Optional[int]:
        """
        Sum the edge costs along a path.

        Args:
            path: Vertex IDs in travel order

        Returns:
            Total cost, or None if some consecutive pair has no edge
        """
        total = 0

        for i in range(len(path) - 1):
            cost = self.graph.get_cost(path[i], path[i + 1])
            if cost is None:
                return None
            total += cost

        return total
