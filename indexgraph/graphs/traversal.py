"""
Graph traversal algorithms: BFS, DFS and topological sort.

All traversals follow the graph's native neighbor order (insertion order
for ListGraph, ascending vertex id for MatrixGraph), which decides the
winner whenever two vertices could be discovered at the same time.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 22.4 (topological sort).
"""

import math
from collections import deque
from typing import Iterator, List, Optional, Tuple

from indexgraph.exceptions import CycleError, InputError

from .core import Graph
from .edge import Edge


def bfs(graph: Graph, start: int) -> Tuple[List[int], List[float], List[Optional[int]]]:
    """
    Breadth-first search from a start vertex.

    Returns vertices in BFS visitation order, hop counts from start, and the
    predecessor array of the BFS tree.

    Args:
        graph: Graph to traverse.
        start: Start vertex id.

    Returns:
        Tuple of:
        - order: List of vertices in the order they were dequeued
        - distance: distance[v] = number of edges on the BFS path (inf if unreached)
        - parent: parent[v] = predecessor on the BFS tree (None for start/unreached)

    Raises:
        VertexIndexError: If start is out of range.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = ListGraph(3, directed=True)
        >>> G.add_edge(0, 1)
        >>> G.add_edge(0, 2)
        >>> order, dist, parent = bfs(G, 0)
        >>> order
        [0, 1, 2]
    """
    graph.validate_vertex(start)
    n = graph.vertex_count()

    order: List[int] = []
    distance: List[float] = [math.inf] * n
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n

    visited[start] = True
    distance[start] = 0
    queue = deque([start])

    while queue:
        current = queue.popleft()
        order.append(current)

        for edge in graph.neighbors(current):
            v = edge.dest
            if not visited[v]:
                visited[v] = True
                distance[v] = distance[current] + 1
                parent[v] = current
                queue.append(v)

    return order, distance, parent


def dfs_recursive(graph: Graph, start: int) -> Tuple[List[int], List[int], List[Optional[int]]]:
    """
    Depth-first search (recursive implementation).

    Returns pre-order and post-order visitation lists, plus the predecessor
    array. Only vertices reachable from start are visited. Recursion depth
    grows with the longest DFS path, so prefer dfs_iterative on large graphs.

    Args:
        graph: Graph to traverse.
        start: Start vertex id.

    Returns:
        Tuple of:
        - preorder: Vertices in the order they were first discovered
        - postorder: Vertices in the order they were finished
        - parent: parent[v] = predecessor on the DFS tree (None for start/unreached)

    Raises:
        VertexIndexError: If start is out of range.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    graph.validate_vertex(start)
    n = graph.vertex_count()

    preorder: List[int] = []
    postorder: List[int] = []
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n

    def dfs_visit(u: int) -> None:
        visited[u] = True
        preorder.append(u)

        for edge in graph.neighbors(u):
            v = edge.dest
            if not visited[v]:
                parent[v] = u
                dfs_visit(v)

        postorder.append(u)

    dfs_visit(start)

    return preorder, postorder, parent


def dfs_iterative(graph: Graph, start: int) -> Tuple[List[int], List[int], List[Optional[int]]]:
    """
    Depth-first search (iterative implementation using stack).

    Produces exactly the same preorder, postorder and parent array as
    dfs_recursive, without growing the Python call stack. The stack holds
    each open vertex together with its partly consumed neighbor iterator.

    Args:
        graph: Graph to traverse.
        start: Start vertex id.

    Returns:
        Same as dfs_recursive.

    Raises:
        VertexIndexError: If start is out of range.

    Complexity: O(V + E) where V is vertices and E is edges.
    """
    graph.validate_vertex(start)
    n = graph.vertex_count()

    preorder: List[int] = [start]
    postorder: List[int] = []
    parent: List[Optional[int]] = [None] * n
    visited = [False] * n

    visited[start] = True
    stack: List[Tuple[int, Iterator[Edge]]] = [(start, iter(graph.neighbors(start)))]

    while stack:
        u, pending = stack[-1]
        for edge in pending:
            v = edge.dest
            if not visited[v]:
                visited[v] = True
                parent[v] = u
                preorder.append(v)
                stack.append((v, iter(graph.neighbors(v))))
                break
        else:
            # Neighbors exhausted
            stack.pop()
            postorder.append(u)

    return preorder, postorder, parent


_WHITE, _GREY, _BLACK = 0, 1, 2


def topological_sort(graph: Graph) -> List[int]:
    """
    Topological order of a directed acyclic graph.

    Runs depth-first search from every undiscovered vertex in ascending id
    order and returns the reverse of the finish order, so every edge u -> v
    has u before v.

    Args:
        graph: Directed graph.

    Returns:
        List of all vertex ids in topological order.

    Raises:
        InputError: If the graph is undirected.
        CycleError: If the graph contains a directed cycle.

    Complexity: O(V + E) where V is vertices and E is edges.

    Example:
        >>> G = ListGraph(3, directed=True)
        >>> G.add_edge(2, 0)
        >>> G.add_edge(0, 1)
        >>> topological_sort(G)
        [2, 0, 1]
    """
    if not graph.directed:
        raise InputError("Topological sort requires a directed graph")

    n = graph.vertex_count()
    color = [_WHITE] * n
    finished: List[int] = []

    for root in range(n):
        if color[root] != _WHITE:
            continue

        color[root] = _GREY
        stack: List[Tuple[int, Iterator[Edge]]] = [(root, iter(graph.neighbors(root)))]
        while stack:
            u, pending = stack[-1]
            for edge in pending:
                v = edge.dest
                if color[v] == _GREY:
                    raise CycleError(f"Graph has a cycle through edge ({u}, {v})")
                if color[v] == _WHITE:
                    color[v] = _GREY
                    stack.append((v, iter(graph.neighbors(v))))
                    break
            else:
                stack.pop()
                color[u] = _BLACK
                finished.append(u)

    finished.reverse()
    return finished
