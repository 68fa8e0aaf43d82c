"""
Adjacency-list tree with per-edge visitation state.

The graph is built once with add_edge() and is afterwards only mutated
through mark_visited(). Insertion order of a node's edges decides both the
left-to-right placement of its children and the order traversals visit them.
"""

from typing import Dict, List, Tuple, Optional, Any, Iterable
from dataclasses import dataclass
from enum import Enum
import logging

logger = logging.getLogger(__name__)


class MalformedGraphError(ValueError):
    """Raised when the graph is not a tree rooted at the requested node."""
    pass


class EdgeState(Enum):
    UNVISITED = "unvisited"
    VISITED = "visited"


@dataclass
class Edge:
    """Directed edge owned by its source node's adjacency list."""

    target: int
    state: EdgeState = EdgeState.UNVISITED

    @property
    def visited(self) -> bool:
        return self.state is EdgeState.VISITED


class GraphStore:
    """
    Mapping from node id to its ordered outgoing edges.

    Edge state only moves UNVISITED -> VISITED. The order in which edges
    first became visited is kept in a log so frames can snapshot it.
    """

    def __init__(self):
        self._adjacency: Dict[int, List[Edge]] = {}
        self._visit_log: List[Tuple[int, int]] = []

    def add_edge(self, source: int, target: int) -> Edge:
        """Append an unvisited edge source -> target. No duplicate or cycle checks."""
        edge = Edge(target)
        self._adjacency.setdefault(source, []).append(edge)
        return edge

    def children(self, node: int) -> List[Edge]:
        """Ordered outgoing edges of node, empty if it has none."""
        return self._adjacency.get(node, [])

    def mark_visited(self, source: int, index: int) -> None:
        """
        Transition the edge at index in source's adjacency list to VISITED.

        Re-marking a visited edge is allowed and leaves it visited.

        Raises:
            IndexError: if source has no edge at index
        """
        edges = self._adjacency.get(source, [])
        if not 0 <= index < len(edges):
            raise IndexError(
                f"Node {source} has no edge at index {index} ({len(edges)} edges)"
            )
        edge = edges[index]
        if edge.state is EdgeState.UNVISITED:
            edge.state = EdgeState.VISITED
            self._visit_log.append((source, edge.target))

    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adjacency.values())

    def visited_edges(self) -> Tuple[Tuple[int, int], ...]:
        """(source, target) pairs in the order they first became visited."""
        return tuple(self._visit_log)

    def nodes(self) -> List[int]:
        """All node ids: sources first in insertion order, then leaf targets."""
        seen = dict.fromkeys(self._adjacency)
        for edges in self._adjacency.values():
            for edge in edges:
                seen.setdefault(edge.target)
        return list(seen)

    def reset(self) -> None:
        """Return every edge to UNVISITED."""
        for edges in self._adjacency.values():
            for edge in edges:
                edge.state = EdgeState.UNVISITED
        self._visit_log.clear()

    def validate(self, root: int = 0) -> None:
        """
        Check that everything reachable from root forms a tree.

        Raises:
            MalformedGraphError: if a node is reached twice (shared child or cycle)
        """
        seen = {root}
        stack = [root]
        while stack:
            node = stack.pop()
            for edge in self.children(node):
                if edge.target in seen:
                    raise MalformedGraphError(
                        f"Node {edge.target} reached twice from root {root} "
                        f"(via edge {node} -> {edge.target})"
                    )
                seen.add(edge.target)
                stack.append(edge.target)
        logger.debug("Validated tree rooted at %d: %d nodes", root, len(seen))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "edges": [
                [source, edge.target, edge.state.value]
                for source, edges in self._adjacency.items()
                for edge in edges
            ],
            "visited": [list(pair) for pair in self._visit_log],
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GraphStore":
        """
        Rebuild a graph from to_dict() output.

        Without a "visited" log, visited edges are logged in adjacency order.

        Raises:
            ValueError: if the log does not list each visited edge exactly once
        """
        graph = cls()
        visited = []
        for entry in d.get("edges", []):
            source, target = int(entry[0]), int(entry[1])
            edge = graph.add_edge(source, target)
            if len(entry) > 2:
                edge.state = EdgeState(entry[2])
            if edge.visited:
                visited.append((source, target))

        if "visited" not in d:
            graph._visit_log = visited
            return graph

        log = [(int(a), int(b)) for a, b in d["visited"]]
        if len(log) != len(set(log)) or sorted(log) != sorted(visited):
            raise ValueError(
                f"Visited log {log} does not match visited edges {visited}"
            )
        graph._visit_log = log
        return graph

    @classmethod
    def from_edges(cls, edges: Iterable[Tuple[int, int]]) -> "GraphStore":
        graph = cls()
        for source, target in edges:
            graph.add_edge(source, target)
        return graph

    def __repr__(self) -> str:
        return f"GraphStore(nodes={len(self.nodes())}, edges={self.edge_count()})"


DEMO_EDGES: List[Tuple[int, int]] = [
    (0, 1), (0, 2),
    (1, 3), (1, 4),
    (2, 20),
    (20, 200), (20, 201),
    (200, 2000), (200, 2001),
    (2001, 20010),
    (201, 2010), (201, 2011),
    (2010, 20100),
    (20100, 201000), (20100, 201001),
    (201001, 2010010),
    (4, 5), (4, 6), (4, 7),
    (5, 50), (5, 51),
    (51, 510),
    (510, 5100),
]


def make_demo_graph(edges: Optional[Iterable[Tuple[int, int]]] = None) -> GraphStore:
    """Build the demo tree (23 edges, rooted at 0), or a tree from the given edges."""
    return GraphStore.from_edges(DEMO_EDGES if edges is None else edges)
