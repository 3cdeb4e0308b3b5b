"""
Minimum spanning tree: Prim's algorithm.

Grows a single tree from a start vertex. Candidate edges wait in a
priority queue ordered by weight; an edge whose destination has joined
the tree since it was queued is stale and gets discarded on pop. This
stands in for the decrease-key operation a plain binary heap lacks.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

from typing import List

from indexgraph.diagnostics import is_debug_enabled, is_symmetric
from indexgraph.exceptions import NoSpanningTreeError
from indexgraph.logging import get_logger

from .core import Graph
from .edge import Edge
from .heap import PriorityQueue

logger = get_logger(__name__)


def prim_mst(graph: Graph, start: int = 0) -> List[Edge]:
    """
    Prim's algorithm for minimum spanning tree.

    Edges are returned in the order they joined the tree. Each edge points
    away from the tree, so every vertex other than start appears exactly
    once as a destination. Equal-weight candidates are taken in the order
    they were queued.

    Args:
        graph: Connected graph, normally undirected.
        start: Root vertex of the tree (default 0).

    Returns:
        List of num_v - 1 edges forming a minimum spanning tree.

    Raises:
        VertexIndexError: If start is out of range.
        NoSpanningTreeError: If some vertex cannot be reached from start.

    Complexity: O(E log E) using binary heap.

    Example:
        >>> G = ListGraph(3)
        >>> G.add_edge(0, 1, 1.0)
        >>> G.add_edge(1, 2, 2.0)
        >>> G.add_edge(0, 2, 3.0)
        >>> [e.as_tuple() for e in prim_mst(G, 0)]
        [(0, 1, 1.0), (1, 2, 2.0)]
    """
    graph.validate_vertex(start)
    n = graph.vertex_count()

    if is_debug_enabled() and not is_symmetric(graph):
        logger.warning("prim_mst: graph is not symmetric; result is a tree of out-edges only")

    result: List[Edge] = []
    outside = [True] * n
    outside[start] = False
    remaining = n - 1

    pq: PriorityQueue[Edge] = PriorityQueue(key=lambda e: e.weight)
    current = start
    stale = 0

    while remaining:
        for edge in graph.neighbors(current):
            if outside[edge.dest]:
                pq.push(edge)

        while True:
            if not pq:
                raise NoSpanningTreeError(
                    f"No spanning tree exists: {remaining} of {n} vertices "
                    f"are unreachable from vertex {start}"
                )
            edge = pq.pop()
            if outside[edge.dest]:
                break
            stale += 1

        outside[edge.dest] = False
        remaining -= 1
        result.append(edge)
        current = edge.dest

    logger.debug("prim_mst: %d edges in tree, %d stale queue entries discarded", len(result), stale)
    return result
