"""
Utility functions for graph algorithm results.

Provides path reconstruction from predecessor arrays and helpers for edge
sequences.
"""

from typing import Iterable, List, Optional, Sequence, Tuple

from .core import Graph
from .edge import Edge


def reconstruct_path(
    pred: Sequence[Optional[int]], target: int, start: Optional[int] = None
) -> Optional[List[int]]:
    """
    Reconstruct the path ending at target from a predecessor array.

    The array should come from bfs, a DFS variant, or Dijkstra, where
    pred[v] is the previous vertex on the path, or None if v is the start
    or unreachable. Pass start to tell the two apart: a path that does not
    begin at start means target is unreachable.

    Args:
        pred: Predecessor array indexed by vertex id.
        target: Last vertex of the path.
        start: Optional root the path must begin at.

    Returns:
        List of vertices from the tree root to target (inclusive), or None
        if target is unreachable from start or the links loop.

    Raises:
        IndexError: If target is not a valid index into pred.

    Example:
        >>> reconstruct_path([None, 0, 1, None], 2, start=0)
        [0, 1, 2]
        >>> reconstruct_path([None, 0, 1, None], 3, start=0) is None
        True
    """
    if not 0 <= target < len(pred):
        raise IndexError(f"Vertex {target} out of range [0, {len(pred)})")

    path = []
    seen = set()
    current: Optional[int] = target
    while current is not None:
        if current in seen:
            # Not a tree
            return None
        seen.add(current)
        path.append(current)
        current = pred[current]

    path.reverse()
    if start is not None and path[0] != start:
        return None
    return path


def total_weight(edges: Iterable[Edge]) -> float:
    """Return the sum of edge weights."""
    return sum((edge.weight for edge in edges), 0.0)


def edge_triples(graph: Graph) -> List[Tuple[int, int, float]]:
    """
    Return (source, dest, weight) for every edge in deterministic order.

    Undirected edges are listed once, as the arc with source <= dest.
    """
    triples = []
    for edge in graph.edges():
        if graph.directed or edge.source <= edge.dest:
            triples.append(edge.as_tuple())
    return triples
