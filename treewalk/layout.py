"""
Recursive interval layout for tree nodes.

Each node owns a half-open horizontal interval [x1, x2) and a depth level.
Its children split that interval into equal-width slices, left to right in
edge insertion order. Positions depend on topology only, never on
visitation state, so every frame places nodes identically.
"""

from typing import List, Tuple, Optional
from dataclasses import dataclass

from .graph import GraphStore, Edge
from .config import RenderConfig


@dataclass(frozen=True)
class Placement:
    """Where one node lands, plus what is needed to draw its incoming edge."""

    node: int
    x: int
    y: int
    level: int
    interval: Tuple[int, int]
    parent: Optional[Tuple[int, int]] = None
    edge: Optional[Edge] = None


def subdivide_interval(
    x1: int,
    x2: int,
    k: int,
    remainder: str = "truncate",
) -> List[Tuple[int, int]]:
    """
    Split [x1, x2) into k equal slices.

    With "truncate" each slice is (x2 - x1) // k wide and the leftover
    pixels after the last slice are dropped. With "distribute" the first
    (x2 - x1) % k slices are one pixel wider so the last slice ends at x2.

    Returns:
        List of (start, end) pairs, empty when k == 0
    """
    if k <= 0:
        return []

    step = (x2 - x1) // k
    if remainder == "truncate":
        return [(x1 + i * step, x1 + (i + 1) * step) for i in range(k)]

    extra = (x2 - x1) % k
    slices = []
    start = x1
    for i in range(k):
        end = start + step + (1 if i < extra else 0)
        slices.append((start, end))
        start = end
    return slices


def node_position(x1: int, x2: int, level: int, config: RenderConfig) -> Tuple[int, int]:
    """
    Position of a node allotted [x1, x2) at depth level.

    x is the interval's midpoint shifted left by half a point so that
    narrow intervals still start at x1; y grows linearly with depth.
    """
    x = x1 + max(x2 - x1 - config.point_size, 0) // 2
    y = config.base_offset + level * config.level_spacing
    return x, y


def compute_layout(
    graph: GraphStore,
    config: RenderConfig,
    root: int = 0,
) -> List[Placement]:
    """
    Lay out the tree under root in pre-order.

    The root gets the full canvas width and no parent. Every other
    placement carries its parent's position and the edge leading to it.

    Args:
        graph: Tree to lay out
        config: Canvas geometry
        root: Node placed at the top

    Returns:
        Placements in pre-order (parents before children, children left to right)
    """
    placements: List[Placement] = []
    # Children pushed right to left pop in pre-order
    stack: List[Tuple[int, int, int, int, Optional[Tuple[int, int]], Optional[Edge]]] = [
        (root, 0, config.canvas_size, 0, None, None)
    ]
    while stack:
        node, x1, x2, level, parent, edge = stack.pop()
        x, y = node_position(x1, x2, level, config)
        placements.append(Placement(node, x, y, level, (x1, x2), parent, edge))

        children = graph.children(node)
        slices = subdivide_interval(x1, x2, len(children), config.remainder)
        for child, (cx1, cx2) in reversed(list(zip(children, slices))):
            stack.append((child.target, cx1, cx2, level + 1, (x, y), child))

    return placements
