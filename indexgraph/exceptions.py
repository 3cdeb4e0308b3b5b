"""Exception types raised across :mod:`indexgraph`."""

from __future__ import annotations

from typing import Optional


class IndexGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(IndexGraphError, ValueError):
    """Raised for invalid caller input such as bad weights or vertex counts."""


class EdgeListFormatError(InputError):
    """Raised when a line of an edge-list file cannot be parsed.

    Attributes:
        line_number: 1-based line number of the offending line, if known.
        line: The offending line with surrounding whitespace stripped.
    """

    def __init__(self, message: str, line_number: Optional[int] = None, line: str = ""):
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number
        self.line = line


class UnknownBackendError(InputError):
    """Raised when a graph backend selector is neither "list" nor "matrix"."""


class NegativeWeightError(InputError):
    """Raised when an algorithm requiring non-negative weights finds one."""


class VertexIndexError(IndexGraphError, IndexError):
    """Raised when a vertex id falls outside ``[0, num_v)``."""


class AlgorithmError(IndexGraphError, RuntimeError):
    """Raised when an algorithm's precondition fails while it runs."""


class NoSpanningTreeError(AlgorithmError):
    """Raised by Prim's algorithm when the graph is not connected."""


class CycleError(AlgorithmError):
    """Raised by topological sort when the graph contains a directed cycle."""


__all__ = [
    "IndexGraphError",
    "InputError",
    "EdgeListFormatError",
    "UnknownBackendError",
    "NegativeWeightError",
    "VertexIndexError",
    "AlgorithmError",
    "NoSpanningTreeError",
    "CycleError",
]
