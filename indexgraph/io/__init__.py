"""I/O for the edge-list text format."""

from .edgelist import (
    format_edge_list,
    iter_edges,
    load_edges,
    load_edges_file,
    parse_edge_line,
    read_graph,
    read_graph_file,
    write_edge_list,
)

__all__ = [
    "parse_edge_line",
    "iter_edges",
    "load_edges",
    "load_edges_file",
    "read_graph",
    "read_graph_file",
    "format_edge_list",
    "write_edge_list",
]
