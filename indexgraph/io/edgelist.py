"""Edge-list text format reader and writer.

The format holds one edge per line as whitespace-separated tokens::

    source dest [weight]

``source`` and ``dest`` are integer vertex ids, ``weight`` is a finite real
number defaulting to 1.0. Blank lines are skipped. Any other line is a
format error and stops loading at that line.

The factory form used by :func:`read_graph` prefixes the edges with a line
holding only the vertex count::

    5
    0 1 2
    0 2 4
    1 2

Not supported:
    - Comments
    - Vertex labels other than integer ids
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from indexgraph.exceptions import EdgeListFormatError, VertexIndexError
from indexgraph.graphs.core import Graph, create_graph
from indexgraph.graphs.edge import Edge
from indexgraph.graphs.utils import edge_triples
from indexgraph.logging import get_logger

logger = get_logger(__name__)

EdgeTriple = Tuple[int, int, float]
PathLike = Union[str, Path]


def _as_lines(lines: Union[str, Iterable[str]]) -> Iterable[str]:
    # A bare string is the file contents, not an iterable of characters
    if isinstance(lines, str):
        return lines.splitlines()
    return lines


def parse_edge_line(line: str, line_number: Optional[int] = None) -> Optional[EdgeTriple]:
    """
    Parse one edge-list line.

    Parameters
    ----------
    line : str
        Raw line, with or without trailing newline.
    line_number : int, optional
        1-based line number, used in error messages.

    Returns
    -------
    tuple or None
        ``(source, dest, weight)``, or None for a blank line.

    Raises
    ------
    EdgeListFormatError
        If the line does not hold 2 or 3 tokens, the ids are not integers,
        or the weight is not a finite number.
    """
    stripped = line.strip()
    if not stripped:
        return None

    tokens = stripped.split()
    if len(tokens) not in (2, 3):
        raise EdgeListFormatError(
            f"Invalid edge format: expected 'source dest [weight]', got {len(tokens)} tokens",
            line_number,
            stripped,
        )

    try:
        source = int(tokens[0])
        dest = int(tokens[1])
    except ValueError:
        raise EdgeListFormatError(
            f"Invalid vertex id in {stripped!r}: ids must be integers", line_number, stripped
        ) from None

    weight = 1.0
    if len(tokens) == 3:
        try:
            weight = float(tokens[2])
        except ValueError:
            raise EdgeListFormatError(
                f"Invalid weight {tokens[2]!r}: not a number", line_number, stripped
            ) from None
        if not math.isfinite(weight):
            raise EdgeListFormatError(
                f"Invalid weight {tokens[2]!r}: must be finite", line_number, stripped
            )

    return source, dest, weight


def iter_edges(lines: Union[str, Iterable[str]], first_line: int = 1) -> Iterator[EdgeTriple]:
    """
    Lazily parse edge-list lines into ``(source, dest, weight)`` triples.

    Parameters
    ----------
    lines : str or iterable of str
        File contents, or an iterable of lines such as an open file.
    first_line : int
        Line number of the first line, for error messages.

    Yields
    ------
    tuple
        One triple per non-blank line, in file order.

    Raises
    ------
    EdgeListFormatError
        At the first malformed line.
    """
    for line_number, line in enumerate(_as_lines(lines), start=first_line):
        triple = parse_edge_line(line, line_number)
        if triple is not None:
            yield triple


def load_edges(graph: Graph, lines: Union[str, Iterable[str]], first_line: int = 1) -> int:
    """
    Insert every edge from edge-list lines into a graph.

    Edges read before a malformed line stay inserted; loading does not
    continue past it.

    Parameters
    ----------
    graph : Graph
        Target graph.
    lines : str or iterable of str
        File contents, or an iterable of lines.
    first_line : int
        Line number of the first line, for error messages.

    Returns
    -------
    int
        Number of edges inserted.

    Raises
    ------
    EdgeListFormatError
        At the first malformed line.
    VertexIndexError
        If a line names a vertex outside the graph.
    """
    count = 0
    for line_number, line in enumerate(_as_lines(lines), start=first_line):
        triple = parse_edge_line(line, line_number)
        if triple is None:
            continue
        try:
            graph.insert(Edge(*triple))
        except VertexIndexError as exc:
            raise VertexIndexError(f"line {line_number}: {exc}") from exc
        count += 1

    logger.debug("Loaded %d edges into %r", count, graph)
    return count


def load_edges_file(graph: Graph, path: PathLike) -> int:
    """
    Insert every edge from an edge-list file into a graph.

    See :func:`load_edges`.
    """
    with open(path, "r", encoding="utf-8") as handle:
        return load_edges(graph, handle)


def read_graph(
    lines: Union[str, Iterable[str]], directed: bool = False, backend: str = "list"
) -> Graph:
    """
    Build a graph from edge-list text whose first line is the vertex count.

    Parameters
    ----------
    lines : str or iterable of str
        File contents, or an iterable of lines.
    directed : bool
        Whether the graph is directed.
    backend : str
        "list" or "matrix", case-insensitive.

    Returns
    -------
    Graph
        Populated graph.

    Raises
    ------
    EdgeListFormatError
        If the header is missing or not a single non-negative integer, or
        at the first malformed edge line.
    UnknownBackendError
        If backend is not supported.
    VertexIndexError
        If an edge names a vertex outside the header's range.
    """
    iterator = iter(_as_lines(lines))
    num_v = None
    line_number = 0
    for line in iterator:
        line_number += 1
        stripped = line.strip()
        if not stripped:
            continue
        try:
            num_v = int(stripped)
        except ValueError:
            raise EdgeListFormatError(
                f"Invalid vertex count {stripped!r}: expected a single integer",
                line_number,
                stripped,
            ) from None
        if num_v < 0:
            raise EdgeListFormatError(
                f"Invalid vertex count {num_v}: must be non-negative", line_number, stripped
            )
        break

    if num_v is None:
        raise EdgeListFormatError("Missing vertex count header")

    graph = create_graph(num_v, directed, backend)
    load_edges(graph, iterator, first_line=line_number + 1)
    return graph


def read_graph_file(path: PathLike, directed: bool = False, backend: str = "list") -> Graph:
    """
    Build a graph from an edge-list file whose first line is the vertex count.

    See :func:`read_graph`.
    """
    with open(path, "r", encoding="utf-8") as handle:
        return read_graph(handle, directed, backend)


def format_edge_list(graph: Graph, header: bool = True) -> str:
    """
    Render a graph in edge-list format.

    Undirected edges are written once, as the arc with source <= dest.
    Weights use Python's shortest round-trip float repr.

    Parameters
    ----------
    graph : Graph
        Graph to render.
    header : bool
        If True, start with the vertex-count line read by :func:`read_graph`.

    Returns
    -------
    str
        Edge-list text ending with a newline.
    """
    out: List[str] = []
    if header:
        out.append(str(graph.vertex_count()))
    for source, dest, weight in edge_triples(graph):
        out.append(f"{source} {dest} {weight!r}")
    return "\n".join(out) + "\n"


def write_edge_list(graph: Graph, path: PathLike, header: bool = True) -> None:
    """
    Write a graph to a file in edge-list format.

    See :func:`format_edge_list`.
    """
    Path(path).write_text(format_edge_list(graph, header), encoding="utf-8")
