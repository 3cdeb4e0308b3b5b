"""Tests for Prim's minimum spanning tree algorithm."""

import itertools
import logging
from io import StringIO

import pytest

from indexgraph.diagnostics import debug_context
from indexgraph.exceptions import NoSpanningTreeError, VertexIndexError
from indexgraph.graphs import Edge, create_graph, edge_triples, prim_mst, total_weight
from indexgraph.logging import configure_logging


def _weighted(backend, n, triples, directed=False):
    G = create_graph(n, directed=directed, backend=backend)
    for s, d, w in triples:
        G.add_edge(s, d, w)
    return G


def _brute_force_mst_weight(graph):
    """Minimum total weight over every spanning tree of an undirected graph."""
    n = graph.vertex_count()
    candidates = [t for t in edge_triples(graph) if t[0] != t[1]]
    best = None
    for subset in itertools.combinations(candidates, n - 1):
        root = list(range(n))

        def find(x):
            while root[x] != x:
                x = root[x]
            return x

        joined = 0
        for u, v, _ in subset:
            ru, rv = find(u), find(v)
            if ru != rv:
                root[ru] = rv
                joined += 1
        if joined == n - 1:
            weight = sum(w for _, _, w in subset)
            best = weight if best is None else min(best, weight)
    return best


class TestPrim:
    """Tests for Prim's algorithm."""

    def test_prim_simple(self, backend):
        """Triangle: the heaviest edge is left out."""
        G = _weighted(backend, 3, [(0, 1, 1.0), (1, 2, 2.0), (0, 2, 3.0)])

        mst = prim_mst(G, 0)

        assert [e.as_tuple() for e in mst] == [(0, 1, 1.0), (1, 2, 2.0)]
        assert total_weight(mst) == 3.0

    def test_stale_entries_discarded(self, backend):
        """An edge to a vertex already in the tree is skipped on pop."""
        G = _weighted(
            backend,
            4,
            [(0, 1, 1.0), (0, 2, 5.0), (1, 2, 2.0), (2, 3, 7.0), (0, 3, 10.0)],
        )

        mst = prim_mst(G, 0)

        # (0, 2, 5.0) is still queued when 2 joins via (1, 2); it must be dropped
        assert [e.as_tuple() for e in mst] == [(0, 1, 1.0), (1, 2, 2.0), (2, 3, 7.0)]

    def test_edges_point_away_from_tree(self, backend):
        """Each result edge starts in the tree and ends at a new vertex."""
        G = _weighted(backend, 4, [(1, 0, 1.0), (2, 1, 1.0), (3, 2, 1.0)])

        mst = prim_mst(G, 3)

        assert [(e.source, e.dest) for e in mst] == [(3, 2), (2, 1), (1, 0)]

    def test_equal_weights_taken_in_queue_order(self):
        """Ties go to the candidate queued first (ListGraph insertion order)."""
        G = _weighted("list", 3, [(0, 2, 1.0), (0, 1, 1.0), (1, 2, 1.0)])
        mst = prim_mst(G, 0)
        assert mst[0] == Edge(0, 2)

    def test_single_vertex(self, backend):
        """A single vertex has an empty spanning tree."""
        G = create_graph(1, backend=backend)
        assert prim_mst(G, 0) == []

    def test_disconnected_raises(self, backend):
        """A graph with an unreachable vertex has no spanning tree."""
        G = _weighted(backend, 4, [(0, 1, 1.0), (1, 2, 1.0)])
        with pytest.raises(NoSpanningTreeError, match="1 of 4"):
            prim_mst(G, 0)

    def test_disconnected_is_runtime_error(self, backend):
        """NoSpanningTreeError can be caught as RuntimeError."""
        G = create_graph(2, backend=backend)
        with pytest.raises(RuntimeError):
            prim_mst(G, 0)

    def test_invalid_start(self, backend):
        """Out-of-range start vertex raises."""
        G = create_graph(2, backend=backend)
        with pytest.raises(VertexIndexError):
            prim_mst(G, 3)

    def test_default_start_is_zero(self, backend):
        """start defaults to vertex 0."""
        G = _weighted(backend, 2, [(1, 0, 4.0)])
        assert prim_mst(G) == [Edge(0, 1)]

    def test_matches_brute_force(self, backend, random_edges):
        """Tree shape and total weight match exhaustive search."""
        n = 6
        for _ in range(5):
            G = _weighted(backend, n, random_edges(n, edge_prob=0.3, connected=True))
            for start in range(n):
                mst = prim_mst(G, start)

                assert len(mst) == n - 1
                dests = sorted(e.dest for e in mst)
                assert dests == sorted(set(range(n)) - {start})
                assert all(G.has_edge(e.source, e.dest) for e in mst)
                assert total_weight(mst) == _brute_force_mst_weight(G)

    def test_backends_agree(self, random_edges):
        """List and matrix backends give trees of equal weight."""
        n = 8
        triples = random_edges(n, edge_prob=0.3, connected=True)
        lg = _weighted("list", n, triples)
        mg = _weighted("matrix", n, triples)
        for start in range(n):
            assert total_weight(prim_mst(lg, start)) == total_weight(prim_mst(mg, start))

    def test_directed_graph_warns_in_debug_mode(self, backend):
        """Debug mode logs a warning for asymmetric input."""
        G = _weighted(backend, 2, [(0, 1, 1.0)], directed=True)
        stream = StringIO()
        configure_logging(level=logging.WARNING, stream=stream)
        try:
            with debug_context(True):
                mst = prim_mst(G, 0)
        finally:
            configure_logging(level=logging.WARNING)

        assert mst == [Edge(0, 1)]
        assert "not symmetric" in stream.getvalue()
