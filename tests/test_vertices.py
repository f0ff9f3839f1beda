"""Tests for VertexTable and edge record handling."""

from __future__ import annotations

import pytest

from labelgraph import EdgeStatus, GRAPH_NODE_LIMIT
from labelgraph.core.vertices import VertexTable, iter_edge_records


class TestVertexTable:
    def test_load_assigns_one_based_indices(self) -> None:
        table = VertexTable()
        assert table.load(["first", "second"])
        assert table.size == 2
        assert list(table.indices()) == [1, 2]
        assert table.get_label(1) == "first"
        assert table.get_vertex(2).lVertexID == 2

    def test_index_zero_and_past_end_are_invalid(self) -> None:
        table = VertexTable()
        table.load(["a", "b", "c"])
        assert not table.is_valid_index(0)
        assert not table.is_valid_index(4)
        assert not table.is_valid_index(-1)
        assert not table.is_valid_index(True)
        assert table.get_label(0) is None

    @pytest.mark.parametrize("count", [0, GRAPH_NODE_LIMIT + 1])
    def test_out_of_range_count_leaves_table_empty(self, count: int) -> None:
        table = VertexTable()
        table.load(["a"])
        assert not table.load(f"v{i}" for i in range(count))
        assert table.size == 0

    def test_full_capacity_loads(self) -> None:
        table = VertexTable()
        assert table.load(f"v{i}" for i in range(GRAPH_NODE_LIMIT))
        assert table.size == GRAPH_NODE_LIMIT

    def test_custom_node_limit(self) -> None:
        table = VertexTable(node_limit=2)
        assert not table.load(["a", "b", "c"])
        with pytest.raises(ValueError):
            VertexTable(node_limit=GRAPH_NODE_LIMIT + 1)

    def test_require_index_raises(self) -> None:
        table = VertexTable()
        table.load(["a"])
        assert table.require_index(1) == 1
        with pytest.raises(ValueError, match="not a vertex index"):
            table.require_index(2, "dest")

    @pytest.mark.parametrize(
        ("source", "dest", "status"),
        [
            (1, 2, EdgeStatus.OK),
            (0, 2, EdgeStatus.SOURCE_OUT_OF_RANGE),
            (4, 2, EdgeStatus.SOURCE_OUT_OF_RANGE),
            (1, 0, EdgeStatus.DEST_OUT_OF_RANGE),
            (1, 4, EdgeStatus.DEST_OUT_OF_RANGE),
            (2, 2, EdgeStatus.SELF_LOOP),
        ],
    )
    def test_check_edge(self, source: int, dest: int, status: EdgeStatus) -> None:
        table = VertexTable()
        table.load(["a", "b", "c"])
        assert table.check_edge(source, dest) is status


def test_iter_edge_records_stops_at_sentinel() -> None:
    consumed = []

    def records():
        for record in [(1, 2), (2, 3), (0, 0), (3, 1)]:
            consumed.append(record)
            yield record

    assert list(iter_edge_records(records())) == [(1, 2), (2, 3)]
    assert (3, 1) not in consumed


def test_iter_edge_records_without_sentinel() -> None:
    assert list(iter_edge_records([(1, 2, 7)])) == [(1, 2, 7)]
