"""Tests for graph traversal algorithms."""

import math

import pytest

from indexgraph.exceptions import CycleError, InputError, VertexIndexError
from indexgraph.graphs import (
    ListGraph,
    MatrixGraph,
    bfs,
    create_graph,
    dfs_iterative,
    dfs_recursive,
    dijkstra,
    reconstruct_path,
    topological_sort,
)


def _graph(backend, n, edges, directed=False):
    G = create_graph(n, directed=directed, backend=backend)
    for u, v in edges:
        G.add_edge(u, v)
    return G


class TestBFS:
    """Tests for breadth-first search."""

    def test_bfs_simple(self, backend):
        """Test BFS on simple graph."""
        G = _graph(backend, 4, [(0, 1), (0, 2), (1, 3)])

        order, dist, parent = bfs(G, 0)

        assert order[0] == 0
        assert dist == [0, 1, 1, 2]
        assert parent == [None, 0, 0, 1]

    def test_bfs_native_order_list(self):
        """ListGraph BFS follows insertion order of neighbors."""
        G = ListGraph(4, directed=True)
        G.add_edge(0, 2)
        G.add_edge(0, 1)
        G.add_edge(2, 3)
        G.add_edge(1, 3)

        order, _, parent = bfs(G, 0)
        assert order == [0, 2, 1, 3]
        # 2 is dequeued first, so it discovers 3
        assert parent[3] == 2

    def test_bfs_native_order_matrix(self):
        """MatrixGraph BFS follows ascending neighbor ids."""
        G = MatrixGraph(4, directed=True)
        G.add_edge(0, 2)
        G.add_edge(0, 1)
        G.add_edge(2, 3)
        G.add_edge(1, 3)

        order, _, parent = bfs(G, 0)
        assert order == [0, 1, 2, 3]
        assert parent[3] == 1

    def test_bfs_disconnected(self, backend):
        """Unreachable vertices keep the sentinels."""
        G = _graph(backend, 3, [(0, 1)])

        order, dist, parent = bfs(G, 0)

        assert order == [0, 1]
        assert 2 not in order
        assert dist[2] == math.inf
        assert parent[2] is None

    def test_bfs_directed_respects_direction(self, backend):
        """BFS does not walk arcs backwards."""
        G = _graph(backend, 3, [(1, 0), (1, 2)], directed=True)
        order, _, _ = bfs(G, 0)
        assert order == [0]

    def test_bfs_single_vertex(self, backend):
        """BFS on a single-vertex graph."""
        G = create_graph(1, backend=backend)
        order, dist, parent = bfs(G, 0)
        assert order == [0]
        assert dist == [0]
        assert parent == [None]

    def test_bfs_invalid_start(self, backend):
        """Out-of-range start vertex raises."""
        G = create_graph(2, backend=backend)
        with pytest.raises(VertexIndexError):
            bfs(G, 2)

    def test_bfs_fewest_hops(self, backend, random_edges):
        """BFS tree paths use the fewest edges (checked against unit-weight Dijkstra)."""
        n = 9
        G = create_graph(n, directed=True, backend=backend)
        for s, d, _ in random_edges(n, edge_prob=0.2):
            G.add_edge(s, d, 1.0)

        for start in range(n):
            order, dist, parent = bfs(G, start)
            hops, _ = dijkstra(G, start)
            assert dist == hops
            for v in order:
                path = reconstruct_path(parent, v, start=start)
                assert len(path) - 1 == dist[v]
                assert all(G.has_edge(a, b) for a, b in zip(path, path[1:]))


class TestDFS:
    """Tests for depth-first search."""

    @pytest.mark.parametrize("dfs", [dfs_recursive, dfs_iterative])
    def test_dfs_simple(self, dfs):
        """Test DFS on a small tree-shaped graph."""
        G = ListGraph(5)
        G.add_edge(0, 1)
        G.add_edge(0, 2)
        G.add_edge(1, 3)
        G.add_edge(2, 4)

        pre, post, parent = dfs(G, 0)

        assert pre == [0, 1, 3, 2, 4]
        assert post == [3, 1, 4, 2, 0]
        assert parent == [None, 0, 0, 1, 2]

    @pytest.mark.parametrize("dfs", [dfs_recursive, dfs_iterative])
    def test_dfs_parent_set_at_descent(self, dfs):
        """A vertex's parent is the vertex that first descends into it."""
        G = ListGraph(3)
        G.add_edge(0, 1)
        G.add_edge(0, 2)
        G.add_edge(1, 2)

        pre, _, parent = dfs(G, 0)
        # 0 -> 1 -> 2 is taken before 0 -> 2 is examined
        assert pre == [0, 1, 2]
        assert parent[2] == 1

    @pytest.mark.parametrize("dfs", [dfs_recursive, dfs_iterative])
    def test_dfs_unreached_not_visited(self, backend, dfs):
        """Vertices not reachable from start are not visited."""
        G = _graph(backend, 4, [(0, 1), (2, 3)])

        pre, post, parent = dfs(G, 0)

        assert sorted(pre) == [0, 1]
        assert sorted(post) == [0, 1]
        assert parent[2] is None
        assert parent[3] is None

    def test_recursive_matches_iterative(self, backend, random_edges):
        """Both DFS forms agree exactly on random graphs."""
        n = 10
        for directed in (True, False):
            G = create_graph(n, directed=directed, backend=backend)
            for s, d, w in random_edges(n, edge_prob=0.15):
                G.add_edge(s, d, w)
            for start in range(n):
                assert dfs_recursive(G, start) == dfs_iterative(G, start)

    def test_dfs_iterative_deep_chain(self):
        """The iterative form handles paths longer than the recursion limit."""
        n = 5000
        G = ListGraph(n, directed=True)
        for v in range(n - 1):
            G.add_edge(v, v + 1)

        pre, post, parent = dfs_iterative(G, 0)

        assert pre == list(range(n))
        assert post == list(reversed(range(n)))
        assert parent[n - 1] == n - 2

    def test_dfs_invalid_start(self, backend):
        """Out-of-range start vertex raises."""
        G = create_graph(2, backend=backend)
        with pytest.raises(VertexIndexError):
            dfs_recursive(G, -1)
        with pytest.raises(VertexIndexError):
            dfs_iterative(G, 5)


class TestTopologicalSort:
    """Tests for topological sort."""

    def test_simple_dag(self, backend):
        """Every edge goes forward in the returned order."""
        edges = [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)]
        G = _graph(backend, 6, edges, directed=True)

        order = topological_sort(G)

        assert sorted(order) == list(range(6))
        position = {v: i for i, v in enumerate(order)}
        assert all(position[u] < position[v] for u, v in edges)

    def test_deterministic_order(self):
        """Roots are started in ascending id order."""
        G = ListGraph(3, directed=True)
        G.add_edge(2, 0)
        G.add_edge(0, 1)
        assert topological_sort(G) == [2, 0, 1]

    def test_isolated_vertices_included(self, backend):
        """Vertices without edges still appear."""
        G = create_graph(3, directed=True, backend=backend)
        assert sorted(topological_sort(G)) == [0, 1, 2]

    def test_cycle_raises(self, backend):
        """A directed cycle raises CycleError."""
        G = _graph(backend, 3, [(0, 1), (1, 2), (2, 0)], directed=True)
        with pytest.raises(CycleError):
            topological_sort(G)

    def test_self_loop_is_cycle(self, backend):
        """A self-loop counts as a cycle."""
        G = _graph(backend, 2, [(1, 1)], directed=True)
        with pytest.raises(CycleError):
            topological_sort(G)

    def test_undirected_rejected(self, backend):
        """Undirected graphs have no topological order."""
        G = _graph(backend, 2, [(0, 1)])
        with pytest.raises(InputError):
            topological_sort(G)
