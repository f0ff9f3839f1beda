"""
Reader for textual graph descriptions.

A description is laid out line by line:

    <vertex count>
    <label of vertex 1>
    ...
    <label of vertex n>
    <source> <dest> [<cost>]
    ...
    0 0 [0]

The edge list ends at the first record whose source is 0. Several
descriptions may follow one another in the same stream.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, TextIO, Tuple

from ..core.vertices import GRAPH_NODE_LIMIT
from ..core.list_graph import ListGraph
from ..core.matrix_graph import MatrixGraph

logger = logging.getLogger(__name__)


@dataclass
class GraphDescription:
    """Vertex labels and edge records read from one graph description."""
    node_count: int
    labels: List[str] = field(default_factory=list)
    edges: List[Tuple[int, ...]] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return 1 <= self.node_count <= GRAPH_NODE_LIMIT


def _next_nonblank(stream: TextIO) -> Optional[str]:
    for line in iter(stream.readline, ''):
        if line.strip():
            return line
    return None


def _parse_ints(line: str) -> List[int]:
    try:
        return [int(token) for token in line.split()]
    except ValueError:
        raise ValueError(f"Expected integers, got {line.strip()!r}") from None


def read_graph_description(stream: TextIO, weighted: bool) -> Optional[GraphDescription]:
    """
    Read one graph description from a text stream.

    Args:
        stream: Text stream positioned at a vertex count line
        weighted: True for (source, dest, cost) records, False for
            (source, dest) records

    Returns:
        The description, or None at end of stream. When the vertex count is
        outside 1..GRAPH_NODE_LIMIT the description carries no labels or
        edges and nothing after the count line is read.

    Raises:
        ValueError: If a count or edge line is malformed, or the stream ends
            inside the label block
    """
    line = _next_nonblank(stream)
    if line is None:
        return None

    counts = _parse_ints(line)
    if len(counts) != 1:
        raise ValueError(f"Expected a single vertex count, got {line.strip()!r}")

    description = GraphDescription(counts[0])
    if not description.is_valid:
        logger.error(f"Vertex count {description.node_count} outside 1..{GRAPH_NODE_LIMIT}")
        return description

    for index in range(1, description.node_count + 1):
        label = stream.readline()
        if label == '':
            raise ValueError(f"Input ended before the label of vertex {index}")
        description.labels.append(label.rstrip('\r\n'))

    width = 3 if weighted else 2

    while True:
        line = _next_nonblank(stream)
        if line is None:
            logger.warning("Edge list ended without a terminating record")
            break

        values = _parse_ints(line)
        if values[0] == 0:
            break
        if len(values) != width:
            raise ValueError(f"Expected {width} integers per edge record, got {line.strip()!r}")

        description.edges.append(tuple(values))

    logger.debug(f"Read graph description with {description.node_count} vertices and {len(description.edges)} edges")
    return description


def iter_graph_descriptions(stream: TextIO, weighted: bool) -> Iterator[GraphDescription]:
    """
    Yield the graph descriptions in a stream until it is exhausted.

    Reading stops after a description with an out-of-range vertex count,
    since the rest of the stream cannot be aligned with record boundaries.
    """
    while True:
        description = read_graph_description(stream, weighted)
        if description is None:
            return
        yield description
        if not description.is_valid:
            return


def load_list_graph(stream: TextIO) -> Optional[ListGraph]:
    """Read one unweighted description and build a ListGraph from it."""
    description = read_graph_description(stream, weighted=False)
    if description is None:
        return None

    graph = ListGraph()
    graph.build_graph(description.labels, description.edges)
    return graph


def load_matrix_graph(stream: TextIO) -> Optional[MatrixGraph]:
    """Read one weighted description and build a MatrixGraph from it."""
    description = read_graph_description(stream, weighted=True)
    if description is None:
        return None

    graph = MatrixGraph()
    graph.build_graph(description.labels, description.edges)
    return graph
