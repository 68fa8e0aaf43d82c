"""
Tests for GraphStore: edge ordering, visitation state and tree validation.

Run with: pytest tests/test_graph.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from treewalk.graph import (
    GraphStore, EdgeState, MalformedGraphError, make_demo_graph, DEMO_EDGES
)


def test_add_edge_keeps_insertion_order():
    graph = GraphStore()
    graph.add_edge(0, 5)
    graph.add_edge(0, 1)
    graph.add_edge(0, 3)

    assert [e.target for e in graph.children(0)] == [5, 1, 3]
    assert all(e.state is EdgeState.UNVISITED for e in graph.children(0))


def test_children_of_unknown_node_is_empty():
    graph = GraphStore.from_edges([(0, 1)])
    assert graph.children(1) == []
    assert graph.children(42) == []


def test_mark_visited_transitions_one_edge():
    graph = GraphStore.from_edges([(0, 1), (0, 2)])
    graph.mark_visited(0, 1)

    states = [e.state for e in graph.children(0)]
    assert states == [EdgeState.UNVISITED, EdgeState.VISITED]
    assert graph.visited_edges() == ((0, 2),)


def test_remark_is_idempotent():
    graph = GraphStore.from_edges([(0, 1)])
    graph.mark_visited(0, 0)
    graph.mark_visited(0, 0)

    assert graph.children(0)[0].visited
    assert graph.visited_edges() == ((0, 1),)


@pytest.mark.parametrize("source,index", [(0, 2), (0, -1), (7, 0)])
def test_mark_visited_out_of_range_raises(source, index):
    graph = GraphStore.from_edges([(0, 1), (0, 2)])
    with pytest.raises(IndexError):
        graph.mark_visited(source, index)


def test_edge_count_and_nodes():
    graph = GraphStore.from_edges([(0, 1), (0, 2), (1, 3)])
    assert graph.edge_count() == 3
    assert graph.nodes() == [0, 1, 2, 3]


def test_reset_clears_state_and_log():
    graph = GraphStore.from_edges([(0, 1), (1, 2)])
    graph.mark_visited(0, 0)
    graph.mark_visited(1, 0)
    graph.reset()

    assert graph.visited_edges() == ()
    assert not graph.children(0)[0].visited
    assert not graph.children(1)[0].visited


def test_dict_roundtrip_preserves_state():
    graph = GraphStore.from_edges([(0, 1), (0, 2), (2, 3)])
    graph.mark_visited(0, 1)

    restored = GraphStore.from_dict(graph.to_dict())

    assert [e.target for e in restored.children(0)] == [1, 2]
    assert restored.children(0)[1].visited
    assert not restored.children(0)[0].visited
    assert restored.visited_edges() == ((0, 2),)


def test_demo_graph():
    graph = make_demo_graph()
    assert graph.edge_count() == len(DEMO_EDGES) == 23
    assert [e.target for e in graph.children(4)] == [5, 6, 7]
    graph.validate(0)


# ============================================================
# Validation
# ============================================================

def test_validate_accepts_single_node():
    GraphStore().validate(0)


def test_validate_rejects_cycle():
    graph = GraphStore.from_edges([(0, 1), (1, 2), (2, 0)])
    with pytest.raises(MalformedGraphError):
        graph.validate(0)


def test_validate_rejects_shared_child():
    graph = GraphStore.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])
    with pytest.raises(MalformedGraphError, match="Node 3"):
        graph.validate(0)


def test_malformed_graph_error_is_value_error():
    assert issubclass(MalformedGraphError, ValueError)


def test_from_dict_without_log_rebuilds_it():
    d = {"edges": [[0, 1, "visited"], [0, 2, "unvisited"], [1, 3, "visited"]]}
    graph = GraphStore.from_dict(d)
    assert graph.visited_edges() == ((0, 1), (1, 3))


@pytest.mark.parametrize("log", [
    [[0, 1]],
    [[0, 1], [0, 2]],
    [[0, 1], [0, 1]],
])
def test_from_dict_rejects_inconsistent_log(log):
    d = {"edges": [[0, 1, "visited"], [0, 2, "unvisited"], [1, 3, "visited"]], "visited": log}
    with pytest.raises(ValueError):
        GraphStore.from_dict(d)
