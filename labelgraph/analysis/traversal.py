"""
Depth-first traversal for adjacency-list graphs.
"""

import logging
from typing import TYPE_CHECKING, Iterator, List

if TYPE_CHECKING:
    from ..core.list_graph import ListGraph

logger = logging.getLogger(__name__)


class DepthFirstTraversal:
    """
    Depth-first search over a ListGraph.

    The traversal uses an explicit stack of edge iterators, which yields the
    same order as the recursive formulation: visit a vertex, then descend into
    each unvisited destination in adjacency-list order.
    """

    def __init__(self, graph: 'ListGraph'):
        """
        Initialize the traversal.

        Args:
            graph: ListGraph instance to traverse
        """
        self.graph = graph
        self.visited: List[bool] = []

    def depth_first_search(self) -> List[int]:
        """
        List every vertex in depth-first order.

        Vertices are tried as roots in increasing index order, so disconnected
        components are picked up at the next unvisited index.

        Returns:
            Vertex indices, each exactly once
        """
        size = self.graph.size
        self.visited = [False] * (size + 1)
        order: List[int] = []

        for root in range(1, size + 1):
            if not self.visited[root]:
                self._visit_from(root, order)

        logger.debug(f"Depth-first ordering: {order}")
        return order

    def _visit_from(self, root: int, order: List[int]) -> None:
        adjacency_list = self.graph.adjacency_list

        self.visited[root] = True
        order.append(root)
        stack: List[Iterator[int]] = [iter(adjacency_list[root])]

        while stack:
            for neighbor in stack[-1]:
                if not self.visited[neighbor]:
                    self.visited[neighbor] = True
                    order.append(neighbor)
                    stack.append(iter(adjacency_list[neighbor]))
                    break
            else:
                # All edges of the vertex on top have been followed
                stack.pop()
