"""Readers for Pajek and TSV edge-list files.

Both formats describe directed multigraphs with 1-based node identifiers.
The identifiers become the node labels; node indices are identifier - 1.
Parallel edges are kept in file order and self-loops are dropped. The graph
name is the file name without its extension.
"""

import logging
from pathlib import Path

from intermediacy.graph.types import Graph

log = logging.getLogger(__name__)

PAJEK_SUFFIX = ".net"


class GraphFormatError(ValueError):
    """Raised when a graph file cannot be interpreted at all."""


def _parse_pair(fields: list[str]) -> tuple[int, int] | None:
    """Parse the first two fields as 1-based identifiers, None if malformed."""
    if len(fields) < 2:
        return None
    try:
        source, target = int(fields[0]), int(fields[1])
    except ValueError:
        return None
    if source < 1 or target < 1:
        return None
    return source, target


def read_pajek(path: str | Path) -> Graph:
    """Read a directed multigraph from a Pajek file.

    The node count comes from the ``*vertices n`` header. Every line after
    the ``*arcs`` header whose first two whitespace-separated tokens are
    integers is an arc; anything else (blank lines, section headers, stray
    text) is skipped.

    Raises:
        GraphFormatError: If the ``*vertices`` header is missing or an arc
            endpoint lies outside [1, n].
    """
    path = Path(path)
    n: int | None = None
    in_arcs = False
    edges: list[tuple[int, int]] = []
    skipped = 0

    with open(path) as f:
        for lineno, raw in enumerate(f, start=1):
            line = raw.strip()
            lowered = line.lower()
            if not in_arcs:
                if lowered.startswith("*vertices"):
                    parts = line.split()
                    try:
                        n = int(parts[1])
                    except (IndexError, ValueError) as e:
                        raise GraphFormatError(
                            f"{path}:{lineno}: malformed *vertices header"
                        ) from e
                elif lowered.startswith("*arcs"):
                    in_arcs = True
                continue

            if not line or line.startswith("*"):
                continue
            pair = _parse_pair(line.split())
            if pair is None:
                skipped += 1
                continue
            if n is None:
                raise GraphFormatError(f"{path}: *arcs before *vertices")
            source, target = pair
            if source > n or target > n:
                raise GraphFormatError(
                    f"{path}:{lineno}: arc {source} {target} outside [1, {n}]"
                )
            if source != target:
                edges.append((source - 1, target - 1))

    if n is None:
        raise GraphFormatError(f"{path}: missing *vertices header")
    if skipped:
        log.warning("Skipped %d malformed arc lines in %s", skipped, path)

    return Graph.from_edges(
        labels=range(1, n + 1), edges=edges, name=path.stem
    )


def read_tsv(path: str | Path) -> Graph:
    """Read a directed multigraph from a tab-separated edge list.

    Each line ``source<TAB>target`` is an edge. Lines not starting with a
    digit are ignored, as are lines without two positive integer fields. The
    node count is the largest identifier seen.
    """
    path = Path(path)
    n = 0
    edges: list[tuple[int, int]] = []
    skipped = 0

    with open(path) as f:
        for raw in f:
            line = raw.strip()
            if not line or not line[0].isdigit():
                continue
            pair = _parse_pair(line.split("\t"))
            if pair is None:
                skipped += 1
                continue
            source, target = pair
            if source == target:
                continue
            n = max(n, source, target)
            edges.append((source - 1, target - 1))

    if skipped:
        log.warning("Skipped %d malformed edge lines in %s", skipped, path)

    return Graph.from_edges(
        labels=range(1, n + 1), edges=edges, name=path.stem
    )


def read_graph(path: str | Path) -> Graph:
    """Read a graph, choosing the Pajek reader for ``.net`` files."""
    path = Path(path)
    if path.suffix.lower() == PAJEK_SUFFIX:
        graph = read_pajek(path)
    else:
        graph = read_tsv(path)
    log.info(
        "Loaded graph '%s' from %s (n=%d, m=%d)",
        graph.name,
        path,
        graph.n,
        graph.m,
    )
    return graph
