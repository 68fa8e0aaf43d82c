"""
Tests for interval layout: subdivision policies, node positions, pre-order output.

Run with: pytest tests/test_layout.py -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest

from treewalk.config import RenderConfig
from treewalk.graph import GraphStore, make_demo_graph
from treewalk.layout import subdivide_interval, node_position, compute_layout


def star(k):
    """Root 0 with children 1..k."""
    return GraphStore.from_edges((0, i) for i in range(1, k + 1))


def positions(placements):
    return {p.node: (p.x, p.y) for p in placements}


# ============================================================
# Subdivision
# ============================================================

def test_truncate_drops_remainder():
    assert subdivide_interval(0, 400, 3) == [(0, 133), (133, 266), (266, 399)]


def test_distribute_spreads_remainder_left_first():
    slices = subdivide_interval(0, 400, 3, remainder="distribute")
    assert slices == [(0, 134), (134, 267), (267, 400)]


def test_even_split_is_policy_independent():
    assert subdivide_interval(100, 300, 4) == subdivide_interval(100, 300, 4, "distribute")
    assert subdivide_interval(100, 300, 4) == [(100, 150), (150, 200), (200, 250), (250, 300)]


def test_zero_children_is_empty():
    assert subdivide_interval(0, 400, 0) == []


def test_more_children_than_pixels():
    assert subdivide_interval(0, 2, 3) == [(0, 0), (0, 0), (0, 0)]
    assert subdivide_interval(0, 2, 3, "distribute") == [(0, 1), (1, 2), (2, 2)]


# ============================================================
# Positions
# ============================================================

def test_node_position_defaults():
    config = RenderConfig()
    assert node_position(0, 400, 0, config) == (194, 10)
    assert node_position(0, 200, 1, config) == (94, 60)
    assert node_position(200, 400, 3, config) == (294, 160)


def test_narrow_interval_stays_at_start():
    config = RenderConfig(point_size=12)
    assert node_position(50, 55, 0, config) == (50, 10)


def test_two_children_layout():
    placements = compute_layout(GraphStore.from_edges([(0, 1), (0, 2)]), RenderConfig())

    assert positions(placements) == {0: (194, 10), 1: (94, 60), 2: (294, 60)}
    root, left, right = placements
    assert root.parent is None and root.edge is None
    assert left.parent == (194, 10)
    assert left.interval == (0, 200)
    assert right.interval == (200, 400)
    assert right.edge.target == 2


def test_single_child_is_directly_below():
    placements = compute_layout(GraphStore.from_edges([(0, 1)]), RenderConfig())
    assert positions(placements) == {0: (194, 10), 1: (194, 60)}


def test_layout_is_pre_order():
    graph = GraphStore.from_edges([(0, 1), (0, 2), (1, 3), (1, 4), (2, 5)])
    nodes = [p.node for p in compute_layout(graph, RenderConfig())]
    assert nodes == [0, 1, 3, 4, 2, 5]


def test_levels_follow_depth():
    graph = GraphStore.from_edges([(0, 1), (1, 2), (2, 3)])
    config = RenderConfig(level_spacing=30, base_offset=5)
    ys = [p.y for p in compute_layout(graph, config)]
    assert ys == [5, 35, 65, 95]


def test_single_node_layout():
    placements = compute_layout(GraphStore(), RenderConfig())
    assert len(placements) == 1
    assert (placements[0].x, placements[0].y) == (194, 10)


@pytest.mark.parametrize("k", range(1, 10))
@pytest.mark.parametrize("remainder", ["truncate", "distribute"])
def test_child_center_inside_its_slice(k, remainder):
    config = RenderConfig(remainder=remainder)
    placements = compute_layout(star(k), config)
    children = placements[1:]
    step = config.canvas_size // k

    for i, child in enumerate(children):
        x1, x2 = child.interval
        assert x1 <= child.x < x2
        if remainder == "truncate":
            assert (x1, x2) == (i * step, (i + 1) * step)
    if remainder == "distribute":
        assert children[-1].interval[1] == config.canvas_size


def test_layout_ignores_visitation_state():
    graph = make_demo_graph()
    config = RenderConfig()
    before = positions(compute_layout(graph, config))

    for node in graph.nodes():
        for i in range(len(graph.children(node))):
            graph.mark_visited(node, i)

    assert positions(compute_layout(graph, config)) == before


def test_deep_chain_layout():
    depth = 5000
    graph = GraphStore.from_edges((i, i + 1) for i in range(depth))
    placements = compute_layout(graph, RenderConfig(canvas_size=8, point_size=2, level_spacing=1))

    assert [p.node for p in placements] == list(range(depth + 1))
    assert placements[-1].level == depth
