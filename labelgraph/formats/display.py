"""
Plain-text reports for list and matrix graphs.

Every function returns a string; printing is left to the caller.
"""

from typing import Iterable, List

from ..core.list_graph import ListGraph
from ..core.matrix_graph import MatrixGraph

UNREACHABLE = "----"
DIJKSTRA_HEADER = "Dijkstra's"


def format_list_graph(graph: ListGraph) -> str:
    """List every vertex with its label followed by its outgoing edges."""
    lines = ["Graph:"]

    for v in graph.vertices.indices():
        lines.append(f"Node {v:>4}        {graph.get_label(v)}")
        for dest in graph.get_edges(v):
            lines.append(f"  edge {v} {dest}")

    return "\n".join(lines)


def format_depth_first(order: Iterable[int]) -> str:
    return "Depth-first ordering: " + " ".join(str(v) for v in order)


def _format_chain(path: Iterable[int]) -> str:
    return " ".join(str(v) for v in path)


def format_all_paths(graph: MatrixGraph) -> str:
    """
    Table of shortest distances and paths between every pair of vertices.

    Each source vertex is introduced by its label, followed by one row per
    other vertex. Unreachable destinations show ``----`` and no path.
    """
    lines = [f"{'Description':<26}{'From node':<11}{'To node':<9}{DIJKSTRA_HEADER:<12}Path"]
    results = graph.report_all()

    for source in graph.vertices.indices():
        lines.append(f"{graph.get_label(source)}")
        for result in results:
            if result.source != source:
                continue
            row = f"{result.source:>35}{result.dest:>5}"
            if result.reachable:
                row += f"{result.distance:>14}    {_format_chain(result.path)}"
            else:
                row += f"{UNREACHABLE:>14}"
            lines.append(row)

    return "\n".join(lines)


def format_path(graph: MatrixGraph, source: int, dest: int) -> str:
    """
    Shortest distance and path for one pair, then the label of every vertex
    along the path. The source vertex gets a label line too, so there is
    exactly one label line per vertex on the path.
    """
    result = graph.report(source, dest)

    if not result.reachable:
        return f"No path from {result.source} to {result.dest}."

    lines: List[str] = [
        f"{result.source:>4}{result.dest:>8}{result.distance:>8}        {_format_chain(result.path)}"
    ]
    lines.extend(graph.get_label(v) for v in result.path)
    return "\n".join(lines)
