"""
Snapshot renderer: draws the tree's current visitation state onto a fresh canvas.
"""

from typing import Optional

from .canvas import Canvas, LINE, VISITED
from .graph import GraphStore, EdgeState
from .layout import compute_layout
from .config import RenderConfig
from .animation import Frame

ROOT_COLOR = VISITED


def edge_color(state: EdgeState) -> int:
    """Palette index used for an edge (and the node it leads to)."""
    return VISITED if state is EdgeState.VISITED else LINE


class Renderer:
    """
    Turns a GraphStore into canvases and frames.

    Every render starts from a cleared canvas owned by that call alone.
    """

    def __init__(self, config: Optional[RenderConfig] = None, root: int = 0):
        self.config = (config or RenderConfig()).validate()
        self.root = root

    def render(self, graph: GraphStore) -> Canvas:
        config = self.config
        canvas = Canvas(config.canvas_size, config.canvas_size, config.palette, config.point_size)

        for placement in compute_layout(graph, config, self.root):
            if placement.edge is None:
                color = ROOT_COLOR
            else:
                color = edge_color(placement.edge.state)

            # Line first so the point covers its endpoint
            if placement.parent is not None:
                px, py = placement.parent
                canvas.draw_line(px, py, placement.x, placement.y, color)
            canvas.draw_point(placement.x, placement.y, color)

        return canvas

    def snapshot(self, graph: GraphStore) -> Frame:
        """Render graph and freeze the result into a Frame."""
        canvas = self.render(graph)
        return Frame.from_raster(canvas.raster, self.config.frame_delay, graph.visited_edges())
