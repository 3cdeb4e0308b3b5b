"""Pytest configuration and shared fixtures for indexgraph tests.

This module provides:
- A deterministic numpy RNG fixture
- Random edge-list generators for property tests over small graphs
"""

import os
from typing import Callable, List, Tuple

import numpy as np
import pytest

EdgeTriple = Tuple[int, int, float]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    This ensures tests are reproducible while allowing override for debugging.

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(params=["list", "matrix"])
def backend(request) -> str:
    """Run a test once per storage backend."""
    return request.param


@pytest.fixture(scope="function")
def random_edges(rng: np.random.Generator) -> Callable[..., List[EdgeTriple]]:
    """Factory for random (source, dest, weight) triples.

    Weights are integer-valued floats so sums compare exactly. With
    connected=True the first num_v - 1 triples form a random spanning tree
    (oriented away from a random root), which makes the undirected graph
    connected.
    """

    def _make(
        num_v: int,
        edge_prob: float = 0.35,
        max_weight: int = 9,
        connected: bool = False,
        min_weight: int = 1,
    ) -> List[EdgeTriple]:
        triples: List[EdgeTriple] = []
        if connected and num_v > 1:
            order = [int(v) for v in rng.permutation(num_v)]
            for i in range(1, num_v):
                parent = order[int(rng.integers(0, i))]
                triples.append((parent, order[i], float(rng.integers(min_weight, max_weight + 1))))
        for u in range(num_v):
            for v in range(num_v):
                if u != v and rng.random() < edge_prob:
                    triples.append((u, v, float(rng.integers(min_weight, max_weight + 1))))
        return triples

    return _make
