"""
Traversal drivers: walk the tree, mark edges visited, emit frames.

Frame order is the observable contract. Both drivers snapshot the whole
graph through a Renderer and append to an AnimationSink in call order.
"""

from typing import List, Optional, Union
from enum import Enum
import logging

from .graph import GraphStore
from .render import Renderer
from .animation import AnimationSink, Frame
from .config import RenderConfig

logger = logging.getLogger(__name__)


class TraversalMode(Enum):
    DFS = "dfs"
    BFS = "bfs"


def dfs(graph: GraphStore, renderer: Renderer, sink: AnimationSink, node: int) -> None:
    """
    Pre-order depth-first walk from node.

    One frame is emitted on entering each node, so a full walk yields one
    frame for the initial state plus one per edge. The stack holds
    (node, index of the next child edge to take).
    """
    sink.append(renderer.snapshot(graph))

    stack = [(node, 0)]
    while stack:
        vertex, i = stack.pop()
        children = graph.children(vertex)
        if i >= len(children):
            continue
        stack.append((vertex, i + 1))
        graph.mark_visited(vertex, i)
        sink.append(renderer.snapshot(graph))
        stack.append((children[i].target, 0))


def bfs(
    graph: GraphStore,
    renderer: Renderer,
    sink: AnimationSink,
    start: int,
    trailing_sweeps: bool = True,
) -> None:
    """
    Level-order walk from start using a rescanned queue.

    Each pass scans the nodes queued before the pass began; every unvisited
    edge found is marked, drawn and its target queued for the next pass.
    Passes repeat until one finds nothing new.

    With trailing_sweeps the walk then re-marks start's child edges and
    their children's edges, one frame per edge. Those edges are already
    visited, so the extra frames repeat the final state.
    """
    sink.append(renderer.snapshot(graph))

    queue = [start]
    while True:
        done = True
        for vertex in list(queue):
            for i, edge in enumerate(graph.children(vertex)):
                if edge.visited:
                    continue
                done = False
                graph.mark_visited(vertex, i)
                sink.append(renderer.snapshot(graph))
                queue.append(edge.target)
        if done:
            break

    if not trailing_sweeps:
        return

    children = graph.children(start)
    for i in range(len(children)):
        graph.mark_visited(start, i)
        sink.append(renderer.snapshot(graph))

    for child in children:
        for i in range(len(graph.children(child.target))):
            graph.mark_visited(child.target, i)
            sink.append(renderer.snapshot(graph))


def run_traversal(
    graph: GraphStore,
    mode: Union[TraversalMode, str] = TraversalMode.DFS,
    start: int = 0,
    config: Optional[RenderConfig] = None,
    sink: Optional[AnimationSink] = None,
    validate: bool = True,
) -> List[Frame]:
    """
    Animate a DFS or BFS over graph.

    Args:
        graph: Tree rooted at node 0; its edge states are mutated
        mode: TraversalMode or "dfs" / "bfs"
        start: Node the traversal starts from
        config: Canvas geometry, delay and BFS options (defaults if None)
        sink: Sink to append to (a new one if None)
        validate: Check the tree shape first

    Returns:
        Frames in emission order

    Raises:
        ValueError: for an unknown mode
        MalformedGraphError: if validate is set and the graph is not a tree
    """
    if isinstance(mode, str):
        mode = mode.lower()
    mode = TraversalMode(mode)
    config = config or RenderConfig()
    renderer = Renderer(config)
    sink = sink if sink is not None else AnimationSink()

    if validate:
        graph.validate(renderer.root)
        if start != renderer.root:
            graph.validate(start)

    logger.debug("Starting %s from node %d over %r", mode.value, start, graph)
    if mode is TraversalMode.DFS:
        dfs(graph, renderer, sink, start)
    else:
        bfs(graph, renderer, sink, start, trailing_sweeps=config.trailing_sweeps)
    logger.debug("%s emitted %d frames", mode.value, len(sink))

    return sink.finalize()
