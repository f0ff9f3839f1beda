"""Tests for the graph description reader."""

from __future__ import annotations

import io
import logging

import pytest

from labelgraph.formats import (
    iter_graph_descriptions,
    load_list_graph,
    load_matrix_graph,
    read_graph_description,
)

MATRIX_INPUT = """\
3
Aurora and 85th
Green Lake Starbucks
Woodland Park Zoo
1 2 5
2 3 3
1 3 20
0 0 0
2
north
south
2 1 4
0 0 0
"""

LIST_INPUT = """\
4
one
two
three
four
1 2
1 3
3 4
0 0
"""


class TestReadGraphDescription:
    def test_weighted(self) -> None:
        description = read_graph_description(io.StringIO(MATRIX_INPUT), weighted=True)
        assert description.node_count == 3
        assert description.labels == ["Aurora and 85th", "Green Lake Starbucks", "Woodland Park Zoo"]
        assert description.edges == [(1, 2, 5), (2, 3, 3), (1, 3, 20)]

    def test_unweighted(self) -> None:
        description = read_graph_description(io.StringIO(LIST_INPUT), weighted=False)
        assert description.edges == [(1, 2), (1, 3), (3, 4)]

    def test_labels_are_verbatim(self) -> None:
        stream = io.StringIO("2\n  padded label \n\n0 0\n")
        description = read_graph_description(stream, weighted=False)
        assert description.labels == ["  padded label ", ""]

    def test_end_of_stream(self) -> None:
        assert read_graph_description(io.StringIO("\n\n"), weighted=True) is None

    def test_out_of_range_count(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.ERROR, logger="labelgraph"):
            description = read_graph_description(io.StringIO("101\nlabel\n"), weighted=False)
        assert not description.is_valid
        assert description.labels == []
        assert description.edges == []
        assert "outside 1..100" in caplog.text

    def test_invalid_records_are_passed_through(self) -> None:
        # Validation of edge indices belongs to the graph, not the reader
        description = read_graph_description(io.StringIO("1\nx\n1 1\n3 1\n0 0\n"), weighted=False)
        assert description.edges == [(1, 1), (3, 1)]

    def test_missing_terminator(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="labelgraph"):
            description = read_graph_description(io.StringIO("2\na\nb\n1 2\n"), weighted=False)
        assert description.edges == [(1, 2)]
        assert "without a terminating record" in caplog.text

    @pytest.mark.parametrize(
        "text",
        [
            "three\n",
            "2 2\n",
            "2\na\n",
            "2\na\nb\n1 x\n0 0\n",
            "2\na\nb\n1 2 3\n0 0\n",
        ],
    )
    def test_malformed_input_raises(self, text: str) -> None:
        with pytest.raises(ValueError):
            read_graph_description(io.StringIO(text), weighted=False)


def test_iter_graph_descriptions() -> None:
    descriptions = list(iter_graph_descriptions(io.StringIO(MATRIX_INPUT), weighted=True))
    assert [d.node_count for d in descriptions] == [3, 2]
    assert descriptions[1].edges == [(2, 1, 4)]


def test_iter_stops_after_invalid_count() -> None:
    stream = io.StringIO("0\n1\nlabel\n0 0\n")
    descriptions = list(iter_graph_descriptions(stream, weighted=False))
    assert len(descriptions) == 1
    assert not descriptions[0].is_valid


def test_load_matrix_graph() -> None:
    stream = io.StringIO(MATRIX_INPUT)
    first = load_matrix_graph(stream)
    second = load_matrix_graph(stream)
    assert first.report(1, 3).path == (1, 2, 3)
    assert second.get_label(1) == "north"
    assert second.get_distance(2, 1) == 4
    assert load_matrix_graph(stream) is None


def test_load_list_graph() -> None:
    graph = load_list_graph(io.StringIO(LIST_INPUT))
    assert graph.depth_first_search() == [1, 3, 4, 2]
