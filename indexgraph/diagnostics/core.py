"""Precondition checks for graphs, run by algorithms in debug mode."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from indexgraph.exceptions import InputError, NegativeWeightError

if TYPE_CHECKING:
    from indexgraph.graphs.core import Graph
    from indexgraph.graphs.edge import Edge


def find_negative_edge(graph: Graph) -> Optional[Edge]:
    """
    Return the first edge with a negative weight, or None.

    Edges are scanned in vertex order, then in each vertex's native
    neighbor order.
    """
    for edge in graph.edges():
        if edge.weight < 0:
            return edge
    return None


def assert_non_negative_weights(graph: Graph) -> None:
    """
    Assert that every edge weight in the graph is non-negative.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Raises
    ------
    NegativeWeightError
        If some edge has a negative weight. The message names the edge.
    """
    edge = find_negative_edge(graph)
    if edge is not None:
        raise NegativeWeightError(
            f"Expected non-negative edge weights. "
            f"Found weight {edge.weight} on edge ({edge.source}, {edge.dest})"
        )


def is_symmetric(graph: Graph) -> bool:
    """
    Check whether every arc (u, v, w) is matched by an arc (v, u, w).

    Undirected graphs are always symmetric. A directed graph may be too,
    if its edges were inserted in mirrored pairs.
    """
    if not graph.directed:
        return True
    for edge in graph.edges():
        mirror = graph.get_edge(edge.dest, edge.source)
        if mirror is None or mirror.weight != edge.weight:
            return False
    return True


def assert_symmetric(graph: Graph) -> None:
    """
    Assert that the graph is symmetric (see is_symmetric).

    Raises
    ------
    InputError
        If some arc has no mirror with the same weight.
    """
    if not is_symmetric(graph):
        raise InputError("Graph is not symmetric: some arc lacks a mirror with equal weight.")
