"""
Example: Shortest Paths and Spanning Trees in indexgraph

Loads a small road network from edge-list text, then runs traversal,
Dijkstra's shortest paths and Prim's minimum spanning tree on both storage
backends.
"""

import indexgraph as ig

ROADS = """\
5
0 1 2
0 2 4
1 2 1
1 3 7
2 4 3
3 4 1
"""


def example_traversal(graph):
    """Example: Breadth-first and depth-first orders."""
    print("=" * 60)
    print("Example 1: Traversal")
    print("=" * 60)

    order, hops, _ = ig.bfs(graph, 0)
    print(f"BFS order from 0: {order}")
    print(f"Hop counts: {hops}")

    preorder, postorder, _ = ig.dfs_iterative(graph, 0)
    print(f"DFS preorder: {preorder}")
    print(f"DFS postorder: {postorder}")
    print()


def example_shortest_paths(graph):
    """Example: Dijkstra distances and reconstructed routes."""
    print("=" * 60)
    print("Example 2: Shortest Paths")
    print("=" * 60)

    dist, pred = ig.dijkstra_heap(graph, 0)
    print(f"Shortest distances from 0: {dist}")
    for target in range(graph.vertex_count()):
        path = ig.reconstruct_path(pred, target, start=0)
        print(f"  0 -> {target}: {path} (cost {dist[target]})")
    print()


def example_spanning_tree(graph):
    """Example: Minimum spanning tree with Prim's algorithm."""
    print("=" * 60)
    print("Example 3: Minimum Spanning Tree")
    print("=" * 60)

    tree = ig.prim_mst(graph, 0)
    for edge in tree:
        print(f"  {edge.source} - {edge.dest} (weight {edge.weight})")
    print(f"Total weight: {ig.total_weight(tree)}")
    print()


if __name__ == "__main__":
    for backend in ("list", "matrix"):
        graph = ig.read_graph(ROADS, directed=False, backend=backend)
        print(f"Backend: {backend} -> {graph!r}")
        print()
        example_traversal(graph)
        example_shortest_paths(graph)
        example_spanning_tree(graph)
