"""
Graph algorithms package for indexgraph.

This package provides:
- Graph contract over vertex ids 0..n-1 (Graph) with two backends
  (ListGraph, MatrixGraph) and a factory (create_graph)
- Traversal algorithms (BFS, DFS, topological sort)
- Shortest paths (Dijkstra, linear-scan and heap-driven)
- Minimum spanning tree (Prim)
- The priority queue Prim and Dijkstra run on

Algorithms only read the graph through the Graph contract, so every
algorithm works unchanged on either backend.
"""

from .core import Graph, ListGraph, MatrixGraph, create_graph
from .edge import Edge
from .heap import PriorityQueue
from .mst import prim_mst
from .shortest import dijkstra, dijkstra_heap
from .traversal import bfs, dfs_iterative, dfs_recursive, topological_sort
from .utils import edge_triples, reconstruct_path, total_weight

__all__ = [
    "Edge",
    "Graph",
    "ListGraph",
    "MatrixGraph",
    "create_graph",
    "PriorityQueue",
    "bfs",
    "dfs_recursive",
    "dfs_iterative",
    "topological_sort",
    "dijkstra",
    "dijkstra_heap",
    "prim_mst",
    "reconstruct_path",
    "total_weight",
    "edge_triples",
]

# Example usage:
# from indexgraph.graphs import create_graph, dijkstra, reconstruct_path
#
# G = create_graph(3, directed=True, backend="matrix")
# G.add_edge(0, 1, 1.0)
# G.add_edge(1, 2, 2.0)
# dist, pred = dijkstra(G, 0)
# path = reconstruct_path(pred, 2, start=0)  # [0, 1, 2]
