"""
Vertex label storage and edge index validation.

Both graph models keep their vertices in a VertexTable. Vertex indices are
1-based; index 0 is reserved and never addressed.
"""

import logging
from numbers import Integral
from typing import Iterable, Iterator, List, Optional, Sequence

from ..classes.vertex import pyvertex
from ..classes.results import EdgeStatus

logger = logging.getLogger(__name__)

# Largest vertex count a graph may declare
GRAPH_NODE_LIMIT = 100


def is_index(value) -> bool:
    """True for integral values that are not booleans."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def iter_edge_records(edges: Iterable[Sequence[int]]) -> Iterator[Sequence[int]]:
    """
    Yield edge records up to, but not including, the sentinel record.

    A record whose source field is 0 terminates the edge list. Nothing after
    it is consumed.

    Args:
        edges: Iterable of (source, dest) or (source, dest, cost) records

    Yields:
        Edge records preceding the sentinel
    """
    for record in edges:
        if record[0] == 0:
            logger.debug("Reached end-of-edges sentinel")
            return
        yield record


class VertexTable:
    """
    Fixed-size table of labeled vertices.

    The vertex count is set once by load() and bounded by node_limit, which
    itself cannot exceed GRAPH_NODE_LIMIT.
    """

    def __init__(self, node_limit: int = GRAPH_NODE_LIMIT):
        if not is_index(node_limit) or not 1 <= node_limit <= GRAPH_NODE_LIMIT:
            raise ValueError(f"node_limit must be between 1 and {GRAPH_NODE_LIMIT}, got {node_limit!r}")
        self.node_limit = node_limit
        self.aVertex: List[pyvertex] = []

    @property
    def size(self) -> int:
        return len(self.aVertex)

    def __len__(self) -> int:
        return len(self.aVertex)

    def is_valid_count(self, count: int) -> bool:
        return is_index(count) and 1 <= count <= self.node_limit

    def load(self, labels: Iterable[str]) -> bool:
        """
        Replace the vertex set with one vertex per label.

        Args:
            labels: Vertex labels, the first label belongs to vertex 1

        Returns:
            True if the labels were loaded, False if their count is outside
            1..node_limit (the table is left empty)
        """
        labels = list(labels)
        self.aVertex = []

        if not self.is_valid_count(len(labels)):
            logger.debug(f"Vertex count {len(labels)} outside 1..{self.node_limit}, graph left empty")
            return False

        self.aVertex = [pyvertex(index, label) for index, label in enumerate(labels, start=1)]
        return True

    def indices(self) -> range:
        """Valid vertex indices in increasing order."""
        return range(1, self.size + 1)

    def is_valid_index(self, index) -> bool:
        return is_index(index) and 1 <= index <= self.size

    def require_index(self, index, name: str = "vertex") -> int:
        """
        Validate a vertex index used by a query.

        Raises:
            ValueError: If the index is not a vertex of this table
        """
        if not self.is_valid_index(index):
            raise ValueError(f"{name} {index!r} is not a vertex index (1..{self.size})")
        return int(index)

    def get_vertex(self, index: int) -> Optional[pyvertex]:
        if not self.is_valid_index(index):
            return None
        return self.aVertex[index - 1]

    def get_label(self, index: int) -> Optional[str]:
        vertex = self.get_vertex(index)
        return vertex.sLabel if vertex is not None else None

    def check_edge(self, source, dest) -> EdgeStatus:
        """
        Validate the endpoints of a directed edge.

        Returns:
            EdgeStatus.OK when both endpoints are vertices and distinct,
            otherwise the reason the edge is rejected
        """
        if not self.is_valid_index(source):
            return EdgeStatus.SOURCE_OUT_OF_RANGE
        if not self.is_valid_index(dest):
            return EdgeStatus.DEST_OUT_OF_RANGE
        if source == dest:
            return EdgeStatus.SELF_LOOP
        return EdgeStatus.OK
