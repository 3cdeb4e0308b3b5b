"""indexgraph - vertex-indexed graphs with list and matrix backends, plus
classic traversal, shortest-path and spanning-tree algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import (
    assert_non_negative_weights,
    debug_context,
    is_debug_enabled,
    is_symmetric,
    set_debug_enabled,
)

# Errors
from .exceptions import (
    AlgorithmError,
    CycleError,
    EdgeListFormatError,
    IndexGraphError,
    InputError,
    NegativeWeightError,
    NoSpanningTreeError,
    UnknownBackendError,
    VertexIndexError,
)

# Graphs and algorithms
from .graphs import (
    Edge,
    Graph,
    ListGraph,
    MatrixGraph,
    PriorityQueue,
    bfs,
    create_graph,
    dfs_iterative,
    dfs_recursive,
    dijkstra,
    dijkstra_heap,
    edge_triples,
    prim_mst,
    reconstruct_path,
    topological_sort,
    total_weight,
)

# I/O
from .io import (
    format_edge_list,
    iter_edges,
    load_edges,
    load_edges_file,
    parse_edge_line,
    read_graph,
    read_graph_file,
    write_edge_list,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Graphs
    "Edge",
    "Graph",
    "ListGraph",
    "MatrixGraph",
    "create_graph",
    "PriorityQueue",
    # Algorithms
    "bfs",
    "dfs_recursive",
    "dfs_iterative",
    "topological_sort",
    "dijkstra",
    "dijkstra_heap",
    "prim_mst",
    "reconstruct_path",
    "total_weight",
    "edge_triples",
    # I/O
    "parse_edge_line",
    "iter_edges",
    "load_edges",
    "load_edges_file",
    "read_graph",
    "read_graph_file",
    "format_edge_list",
    "write_edge_list",
    # Diagnostics
    "assert_non_negative_weights",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Errors
    "IndexGraphError",
    "InputError",
    "EdgeListFormatError",
    "UnknownBackendError",
    "NegativeWeightError",
    "VertexIndexError",
    "AlgorithmError",
    "NoSpanningTreeError",
    "CycleError",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
