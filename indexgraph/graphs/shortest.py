"""
Single-source shortest paths: Dijkstra's algorithm.

Two variants with the same result contract:

- dijkstra: the classic O(V^2) form. It scans the remaining vertices for the
  minimum distance and relaxes through Graph.has_edge/get_edge, which suits
  dense graphs and MatrixGraph.
- dijkstra_heap: O((V + E) log V) form driven by a binary-heap priority queue
  and Graph.neighbors, which suits sparse graphs and ListGraph.

Both break ties between equal distances by picking the smaller vertex id,
so they finalize vertices in the same order and return identical arrays.

Edge weights must be non-negative. This is checked only in debug mode
(see indexgraph.diagnostics.debug_mode).

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

import math
from typing import List, Optional, Tuple

from indexgraph.diagnostics import assert_non_negative_weights, is_debug_enabled
from indexgraph.logging import get_logger

from .core import Graph
from .heap import PriorityQueue

logger = get_logger(__name__)


def _check_preconditions(graph: Graph, start: int) -> None:
    graph.validate_vertex(start)
    if is_debug_enabled():
        logger.debug("Checking edge weights of %r", graph)
        assert_non_negative_weights(graph)


def dijkstra(graph: Graph, start: int) -> Tuple[List[float], List[Optional[int]]]:
    """
    Dijkstra's algorithm for single-source shortest paths.

    Computes shortest-path distances from start to every vertex in a graph
    with non-negative edge weights.

    Args:
        graph: Graph with non-negative edge weights.
        start: Start vertex id.

    Returns:
        Tuple of:
        - dist: dist[v] = shortest distance from start (inf if unreachable)
        - pred: pred[v] = previous vertex on a shortest path (None for start/unreachable)

    Raises:
        VertexIndexError: If start is out of range.
        NegativeWeightError: In debug mode, if some edge weight is negative.

    Complexity: O(V^2) graph queries.

    Example:
        >>> G = ListGraph(3, directed=True)
        >>> G.add_edge(0, 1, 1.0)
        >>> G.add_edge(1, 2, 2.0)
        >>> dist, pred = dijkstra(G, 0)
        >>> dist
        [0.0, 1.0, 3.0]
    """
    _check_preconditions(graph, start)
    n = graph.vertex_count()

    dist: List[float] = [math.inf] * n
    pred: List[Optional[int]] = [None] * n
    dist[start] = 0.0

    # Kept in ascending order so min() picks the smallest id on ties
    remaining = list(range(n))

    while remaining:
        idx = min(range(len(remaining)), key=lambda i: dist[remaining[i]])
        u = remaining.pop(idx)

        if math.isinf(dist[u]):
            # Everything left is unreachable; relaxing cannot improve it
            logger.debug("dijkstra: %d vertices unreachable from %d", len(remaining) + 1, start)
            break

        for v in remaining:
            if not graph.has_edge(u, v):
                continue
            new_dist = dist[u] + graph.get_edge(u, v).weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                pred[v] = u

    return dist, pred


def dijkstra_heap(graph: Graph, start: int) -> Tuple[List[float], List[Optional[int]]]:
    """
    Dijkstra's algorithm driven by a binary-heap priority queue.

    Same inputs, outputs and errors as dijkstra. Outdated queue entries are
    skipped on pop instead of being decreased in place.

    Complexity: O((V + E) log V) using binary heap priority queue.
    """
    _check_preconditions(graph, start)
    n = graph.vertex_count()

    dist: List[float] = [math.inf] * n
    pred: List[Optional[int]] = [None] * n
    done = [False] * n
    dist[start] = 0.0

    # Entries are (distance, vertex) so equal distances pop by vertex id
    pq: PriorityQueue[Tuple[float, int]] = PriorityQueue([(0.0, start)])

    while pq:
        d, u = pq.pop()
        if done[u]:
            continue
        done[u] = True

        for edge in graph.neighbors(u):
            v = edge.dest
            if done[v]:
                continue
            new_dist = d + edge.weight
            if new_dist < dist[v]:
                dist[v] = new_dist
                pred[v] = u
                pq.push((new_dist, v))

    return dist, pred
