"""Diagnostics and debugging utilities for indexgraph."""

from .core import (
    assert_non_negative_weights,
    assert_symmetric,
    find_negative_edge,
    is_symmetric,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    set_debug_enabled,
)

__all__ = [
    "find_negative_edge",
    "assert_non_negative_weights",
    "is_symmetric",
    "assert_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
]
