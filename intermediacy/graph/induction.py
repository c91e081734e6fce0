"""Induced subgraphs with dense index remapping."""

import logging
from typing import Sequence

import numpy as np

from intermediacy.graph.types import Graph

log = logging.getLogger(__name__)


def induced(graph: Graph, nodeset: np.ndarray | Sequence[bool]) -> Graph:
    """Construct the subgraph induced by the selected nodes.

    Kept nodes retain their relative order and labels but are renumbered
    densely from 0. Only edges with both endpoints kept survive, in their
    original successor order. The graph name is carried over.

    Args:
        graph: Graph to restrict.
        nodeset: Per-node membership flags of length graph.n.

    Returns:
        A new Graph over the kept nodes.
    """
    keep = np.asarray(nodeset, dtype=bool)
    if keep.shape != (graph.n,):
        raise ValueError(
            f"nodeset must have shape ({graph.n},), got {keep.shape}"
        )

    mapping = np.full(graph.n, -1, dtype=np.int64)
    kept = np.flatnonzero(keep)
    mapping[kept] = np.arange(len(kept))
    index = mapping.tolist()

    labels = tuple(graph.labels[i] for i in kept.tolist())
    successors = tuple(
        tuple(index[j] for j in graph.successors(i) if index[j] >= 0)
        for i in kept.tolist()
    )

    sub = Graph(labels=labels, successor_lists=successors, name=graph.name)
    log.debug(
        "Induced subgraph of '%s': %d/%d nodes, %d/%d edges",
        graph.name,
        sub.n,
        graph.n,
        sub.m,
        graph.m,
    )
    return sub
