"""Deterministic reachability: in/out-components and intermediate nodes.

All traversals are depth-first with an explicit stack so that large graphs
never hit the interpreter recursion limit.
"""

import logging
from typing import Mapping, Sequence

import numpy as np

from intermediacy.graph.types import Graph

log = logging.getLogger(__name__)


def traverse(
    adjacency: Sequence[Sequence[int]] | Mapping[int, Sequence[int]],
    n: int,
    restrict: Sequence[bool] | None,
    root: int,
) -> list[bool]:
    """Mark every permitted node reachable from root through adjacency.

    The restriction is checked before the root is marked: a root that is not
    permitted yields an all-false membership, root included.

    Args:
        adjacency: Neighbor lists indexed by node. A mapping may omit nodes
            without neighbors.
        n: Number of nodes.
        restrict: Optional per-node permission flags (None permits all).
        root: Index of the start node.

    Returns:
        Per-node membership as a list of bools.
    """
    visited = [False] * n
    if restrict is not None and not restrict[root]:
        return visited

    lookup = adjacency.get if isinstance(adjacency, Mapping) else None
    visited[root] = True
    stack = [root]
    while stack:
        node = stack.pop()
        neighbors = lookup(node, ()) if lookup else adjacency[node]
        for neighbor in neighbors:
            if visited[neighbor]:
                continue
            if restrict is not None and not restrict[neighbor]:
                continue
            visited[neighbor] = True
            stack.append(neighbor)
    return visited


def component(
    graph: Graph,
    restrict: np.ndarray | Sequence[bool] | None,
    root: int,
    reverse: bool = False,
) -> np.ndarray:
    """Find the out-component (or in-component if reverse) of root.

    Follows successor edges, or predecessor edges when ``reverse`` is set,
    visiting only nodes permitted by ``restrict``.

    Returns:
        Boolean array of shape (n,).
    """
    if isinstance(restrict, np.ndarray):
        restrict = restrict.tolist()
    adjacency = graph.predecessor_lists if reverse else graph.successor_lists
    return np.array(traverse(adjacency, graph.n, restrict, root), dtype=bool)


def intermediate_nodes(graph: Graph, source: int, target: int) -> np.ndarray:
    """Nodes lying on at least one directed path from source to target.

    The in-component of target within the out-component of source. Empty
    (not even source or target) when target is unreachable from source.
    """
    forward = component(graph, None, source, reverse=False)
    result = component(graph, forward, target, reverse=True)
    log.debug(
        "Intermediate nodes %d -> %d: %d of %d reachable, %d intermediate",
        source,
        target,
        int(forward.sum()),
        graph.n,
        int(result.sum()),
    )
    return result
