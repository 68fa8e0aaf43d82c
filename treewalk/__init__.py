"""
Treewalk: frame-by-frame animation of tree traversals.

This package provides:
1. GraphStore, an ordered adjacency list with per-edge visitation state
2. Interval layout that places every node from tree structure alone
3. A renderer drawing the current visitation state onto an indexed canvas
4. DFS and BFS drivers that emit one frame per traversal step
5. An append-only sink and GIF encoding for the resulting frames

Example:
    >>> from treewalk import make_demo_graph, run_traversal
    >>> frames = run_traversal(make_demo_graph(), "dfs")
    >>> len(frames)
    24
"""

from .graph import GraphStore, Edge, EdgeState, MalformedGraphError, make_demo_graph
from .canvas import Canvas, Palette, BACKGROUND, LINE, VISITED
from .config import RenderConfig, load_config, save_config, create_default_config
from .layout import Placement, subdivide_interval, node_position, compute_layout
from .animation import Frame, AnimationSink, encode_gif
from .render import Renderer, edge_color
from .traversal import TraversalMode, dfs, bfs, run_traversal
from .image_io import save_animation, save_frame

__all__ = [
    # Graph
    'GraphStore', 'Edge', 'EdgeState', 'MalformedGraphError', 'make_demo_graph',
    # Canvas
    'Canvas', 'Palette', 'BACKGROUND', 'LINE', 'VISITED',
    # Config
    'RenderConfig', 'load_config', 'save_config', 'create_default_config',
    # Layout
    'Placement', 'subdivide_interval', 'node_position', 'compute_layout',
    # Frames
    'Frame', 'AnimationSink', 'encode_gif',
    'Renderer', 'edge_color',
    # Traversal
    'TraversalMode', 'dfs', 'bfs', 'run_traversal',
    # Output
    'save_animation', 'save_frame',
]
