"""Benchmark Dijkstra variants and Prim's MST across storage backends."""

import time
from typing import Callable, Dict

import numpy as np

import indexgraph as ig


def _random_graph(
    num_v: int, edge_prob: float, backend: str, seed: int = 0
) -> ig.Graph:
    """Build a random undirected graph with a spanning path so it is connected."""
    rng = np.random.default_rng(seed)
    G = ig.create_graph(num_v, directed=False, backend=backend)

    for v in range(1, num_v):
        G.add_edge(v - 1, v, float(rng.integers(1, 100)))

    mask = np.triu(rng.random((num_v, num_v)) < edge_prob, k=1)
    for u, v in zip(*np.nonzero(mask)):
        G.add_edge(int(u), int(v), float(rng.integers(1, 100)))
    return G


def _time_call(fn: Callable[[], object], repeats: int) -> float:
    # Warmup
    fn()

    start = time.perf_counter()
    for _ in range(repeats):
        fn()
    end = time.perf_counter()
    return (end - start) / repeats


def benchmark_shortest_paths(
    num_v: int,
    edge_prob: float = 0.05,
    backend: str = "list",
    repeats: int = 10,
) -> Dict[str, float]:
    """Benchmark single-source shortest paths and MST on one random graph.

    Args:
        num_v: Number of vertices.
        edge_prob: Probability of each extra undirected edge.
        backend: Storage backend ('list' or 'matrix').
        repeats: Number of timed calls per algorithm.

    Returns:
        Dictionary with timing results.
    """
    G = _random_graph(num_v, edge_prob, backend)

    linear = _time_call(lambda: ig.dijkstra(G, 0), repeats)
    heap = _time_call(lambda: ig.dijkstra_heap(G, 0), repeats)
    mst = _time_call(lambda: ig.prim_mst(G, 0), repeats)

    return {
        "num_v": num_v,
        "arcs": len(G.edges()),
        "dijkstra_sec": linear,
        "dijkstra_heap_sec": heap,
        "prim_mst_sec": mst,
    }


if __name__ == "__main__":
    print("Benchmarking shortest paths and MST...")

    for backend in ("list", "matrix"):
        for num_v, edge_prob in ((200, 0.05), (500, 0.01), (500, 0.2)):
            results = benchmark_shortest_paths(num_v, edge_prob, backend=backend)
            print(f"{backend} backend ({num_v} vertices, {results['arcs']} arcs):")
            print(f"  dijkstra:      {results['dijkstra_sec']*1e3:.2f} ms")
            print(f"  dijkstra_heap: {results['dijkstra_heap_sec']*1e3:.2f} ms")
            print(f"  prim_mst:      {results['prim_mst_sec']*1e3:.2f} ms")
