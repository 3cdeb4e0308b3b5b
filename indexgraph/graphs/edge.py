"""
Edge value type.

An Edge is one directed arc (source, dest, weight) between vertex ids.
Equality and hashing use only (source, dest), so an edge with a new weight
replaces the old one wherever edges are keyed by identity.
"""

import math
from dataclasses import dataclass, field
from numbers import Real

from indexgraph.exceptions import InputError


@dataclass(frozen=True)
class Edge:
    """
    Immutable directed arc between two vertex ids.

    Attributes:
        source: Tail vertex id.
        dest: Head vertex id.
        weight: Finite edge weight (default 1.0). Excluded from equality.

    Example:
        >>> Edge(0, 1, 2.5) == Edge(0, 1, 7.0)
        True
    """

    source: int
    dest: int
    weight: float = field(default=1.0, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.weight, Real) or isinstance(self.weight, bool):
            raise InputError(f"Edge weight must be a real number, got {self.weight!r}")
        if not math.isfinite(self.weight):
            raise InputError(
                f"Edge weight must be finite, got {self.weight} on edge ({self.source}, {self.dest})"
            )
        # Normalise ints and numpy scalars to a plain float
        object.__setattr__(self, "weight", float(self.weight))

    def reversed(self) -> "Edge":
        """Return the mirror edge (dest -> source) with the same weight."""
        return Edge(self.dest, self.source, self.weight)

    def as_tuple(self) -> tuple:
        """Return (source, dest, weight)."""
        return (self.source, self.dest, self.weight)
