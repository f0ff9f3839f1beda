"""Shared pytest fixtures for labelgraph tests."""

from __future__ import annotations

import pytest

from labelgraph import ListGraph, MatrixGraph

SENTINEL_PAIR = (0, 0)
SENTINEL_TRIPLE = (0, 0, 0)


@pytest.fixture
def abc_matrix() -> MatrixGraph:
    """A -> B (5), B -> C (3), A -> C (20)."""
    graph = MatrixGraph()
    assert graph.build_graph(["A", "B", "C"], [(1, 2, 5), (2, 3, 3), (1, 3, 20), SENTINEL_TRIPLE])
    return graph


@pytest.fixture
def campus_matrix() -> MatrixGraph:
    """Five locations with a cycle and several competing routes."""
    graph = MatrixGraph()
    labels = ["Aurora and 85th", "Green Lake Starbucks", "Woodland Park Zoo", "Troll under bridge", "PCC on Fremont"]
    edges = [
        (1, 2, 50),
        (1, 3, 20),
        (1, 5, 30),
        (2, 4, 10),
        (3, 2, 20),
        (3, 4, 40),
        (5, 2, 20),
        (5, 4, 25),
        (4, 1, 15),
        SENTINEL_TRIPLE,
    ]
    assert graph.build_graph(labels, edges)
    return graph


@pytest.fixture
def tree_list() -> ListGraph:
    """1 -> {2, 3}, 2 -> {4}, 3 -> {4}, plus an isolated vertex 5."""
    graph = ListGraph()
    assert graph.build_graph(
        ["one", "two", "three", "four", "five"],
        [(1, 3), (1, 2), (2, 4), (3, 4), SENTINEL_PAIR],
    )
    return graph
