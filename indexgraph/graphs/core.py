"""
Core graph data structures.

Provides the abstract Graph contract over vertex ids 0..num_v-1 and two
storage backends:

- ListGraph: one insertion-ordered dict per vertex, mapping neighbor id to
  Edge. Neighbors are yielded in insertion order.
- MatrixGraph: dense numpy weight matrix with +inf meaning "no edge".
  Neighbors are yielded in ascending destination order.

Algorithms depend only on the Graph contract, never on a backend.
Undirected graphs store both arcs of every edge, so algorithms need no
special case for directedness once edges are loaded.
"""

import math
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, List, Optional

import numpy as np

from indexgraph.exceptions import InputError, UnknownBackendError, VertexIndexError

from .edge import Edge


class Graph(ABC):
    """
    Abstract graph over vertex ids 0..num_v-1.

    The vertex count and the directed flag are fixed at construction.
    Subclasses implement storage through insert, has_edge, get_edge and
    neighbors; everything else is built on those four.

    Attributes:
        directed: True if arcs are one-way; read-only.
    """

    def __init__(self, num_v: int, directed: bool = False):
        """
        Initialize an empty graph.

        Args:
            num_v: Number of vertices (non-negative integer).
            directed: If True, graph is directed; otherwise undirected.

        Raises:
            InputError: If num_v is not a non-negative integer.
        """
        if isinstance(num_v, bool) or not isinstance(num_v, (int, np.integer)) or num_v < 0:
            raise InputError(f"num_v must be a non-negative integer, got {num_v!r}")
        self._num_v = int(num_v)
        self._directed = bool(directed)

    @property
    def directed(self) -> bool:
        return self._directed

    def vertex_count(self) -> int:
        """Return the number of vertices."""
        return self._num_v

    def is_directed(self) -> bool:
        """Return True if this is a directed graph."""
        return self._directed

    def validate_vertex(self, v: int) -> None:
        """
        Check that v is a vertex id of this graph.

        Raises:
            VertexIndexError: If v is not an integer in [0, num_v).
        """
        if isinstance(v, bool) or not isinstance(v, (int, np.integer)) or not 0 <= v < self._num_v:
            raise VertexIndexError(f"Vertex {v!r} out of range [0, {self._num_v})")

    @abstractmethod
    def insert(self, edge: Edge) -> None:
        """
        Insert an edge, replacing any existing (source, dest) edge.

        For undirected graphs the mirrored (dest, source) edge is stored too,
        with the same weight.

        Raises:
            VertexIndexError: If either endpoint is out of range.
        """
        raise NotImplementedError

    @abstractmethod
    def has_edge(self, source: int, dest: int) -> bool:
        """Return True if an edge source -> dest exists."""
        raise NotImplementedError

    @abstractmethod
    def get_edge(self, source: int, dest: int) -> Optional[Edge]:
        """Return the edge source -> dest with its stored weight, or None."""
        raise NotImplementedError

    @abstractmethod
    def neighbors(self, source: int) -> Iterator[Edge]:
        """
        Return a fresh iterator over the outgoing edges of source.

        The order is deterministic and backend-defined.
        """
        raise NotImplementedError

    def add_edge(self, source: int, dest: int, weight: float = 1.0) -> None:
        """Insert Edge(source, dest, weight)."""
        self.insert(Edge(source, dest, weight))

    def insert_all(self, edges: Iterable[Edge]) -> int:
        """
        Insert every edge from an iterable.

        Returns:
            Number of edges inserted.
        """
        count = 0
        for edge in edges:
            self.insert(edge)
            count += 1
        return count

    def out_degree(self, source: int) -> int:
        """Return the number of outgoing edges of source."""
        return sum(1 for _ in self.neighbors(source))

    def edges(self) -> List[Edge]:
        """
        Return every stored arc.

        Vertices are visited in ascending order, each vertex's arcs in native
        neighbor order. Undirected edges appear once per direction.
        """
        return [edge for v in range(self._num_v) for edge in self.neighbors(v)]

    def to_weight_matrix(self) -> np.ndarray:
        """
        Return a (num_v, num_v) float array of weights, inf where no edge.

        The array is a fresh copy owned by the caller.
        """
        matrix = np.full((self._num_v, self._num_v), np.inf)
        for edge in self.edges():
            matrix[edge.source, edge.dest] = edge.weight
        return matrix

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(num_v={self._num_v}, directed={self._directed}, "
            f"arcs={len(self.edges())})"
        )


class ListGraph(Graph):
    """
    Graph backed by one insertion-ordered dict per vertex.

    Re-inserting an existing (source, dest) pair replaces its Edge in place,
    keeping that neighbor's original position.

    Complexity:
        - insert, has_edge, get_edge: O(1) amortized
        - neighbors: O(deg(v))
    """

    def __init__(self, num_v: int, directed: bool = False):
        super().__init__(num_v, directed)
        self._out: List[Dict[int, Edge]] = [{} for _ in range(self._num_v)]

    def insert(self, edge: Edge) -> None:
        self.validate_vertex(edge.source)
        self.validate_vertex(edge.dest)
        self._out[edge.source][edge.dest] = edge
        if not self._directed:
            self._out[edge.dest][edge.source] = edge.reversed()

    def has_edge(self, source: int, dest: int) -> bool:
        self.validate_vertex(source)
        self.validate_vertex(dest)
        return dest in self._out[source]

    def get_edge(self, source: int, dest: int) -> Optional[Edge]:
        self.validate_vertex(source)
        self.validate_vertex(dest)
        return self._out[source].get(dest)

    def neighbors(self, source: int) -> Iterator[Edge]:
        self.validate_vertex(source)
        return iter(tuple(self._out[source].values()))

    def out_degree(self, source: int) -> int:
        self.validate_vertex(source)
        return len(self._out[source])


class MatrixGraph(Graph):
    """
    Graph backed by a dense numpy weight matrix.

    weight[i, j] == inf means "no edge"; any finite value, zero included,
    is an edge.

    Complexity:
        - insert, has_edge, get_edge: O(1)
        - neighbors: O(V)
        - memory: O(V^2)
    """

    def __init__(self, num_v: int, directed: bool = False):
        super().__init__(num_v, directed)
        self._weights = np.full((self._num_v, self._num_v), np.inf, dtype=np.float64)

    def insert(self, edge: Edge) -> None:
        self.validate_vertex(edge.source)
        self.validate_vertex(edge.dest)
        self._weights[edge.source, edge.dest] = edge.weight
        if not self._directed:
            self._weights[edge.dest, edge.source] = edge.weight

    def has_edge(self, source: int, dest: int) -> bool:
        self.validate_vertex(source)
        self.validate_vertex(dest)
        return bool(np.isfinite(self._weights[source, dest]))

    def get_edge(self, source: int, dest: int) -> Optional[Edge]:
        self.validate_vertex(source)
        self.validate_vertex(dest)
        weight = float(self._weights[source, dest])
        if math.isinf(weight):
            return None
        return Edge(int(source), int(dest), weight)

    def neighbors(self, source: int) -> Iterator[Edge]:
        self.validate_vertex(source)
        row = self._weights[source]
        dests = np.flatnonzero(np.isfinite(row))
        return (Edge(int(source), int(d), float(row[d])) for d in dests)

    def out_degree(self, source: int) -> int:
        self.validate_vertex(source)
        return int(np.count_nonzero(np.isfinite(self._weights[source])))

    def to_weight_matrix(self) -> np.ndarray:
        return self._weights.copy()


_BACKENDS = {
    "list": ListGraph,
    "matrix": MatrixGraph,
}


def create_graph(num_v: int, directed: bool = False, backend: str = "list") -> Graph:
    """
    Create an empty graph with the requested storage backend.

    Supported backend names (case-insensitive):
        - "list": ListGraph
        - "matrix": MatrixGraph

    Args:
        num_v: Number of vertices.
        directed: If True, graph is directed; otherwise undirected.
        backend: Backend name.

    Returns:
        An empty Graph instance.

    Raises:
        UnknownBackendError: If the backend name is not supported.
    """
    key = backend.lower() if isinstance(backend, str) else None
    if key not in _BACKENDS:
        raise UnknownBackendError(
            f"Unknown graph backend {backend!r}. Supported backends: 'list', 'matrix'."
        )
    return _BACKENDS[key](num_v, directed)
