"""One Monte Carlo trial: random edge retention followed by reachability.

A trial keeps each edge independently with the given probability and
reports which nodes lie on a surviving directed path from source to target.
Retention is decided lazily, only for the outgoing edges of nodes the
forward traversal actually reaches.
"""

import numpy as np

from intermediacy.graph.reachability import traverse
from intermediacy.graph.types import Graph


def sampled_membership(
    graph: Graph,
    source: int,
    target: int,
    probability: float,
    rng: np.random.Generator,
) -> list[bool]:
    """Run one trial and return per-node membership as a list of bools.

    The forward pass is a depth-first traversal from source. When a node is
    popped, one uniform draw per outgoing edge decides which edges survive;
    surviving edges extend the frontier and are recorded, keyed by their
    head node, in a per-trial sparse structure. The backward pass then walks
    the recorded edges in reverse from target, restricted to the nodes the
    forward pass reached. If target was not reached, nothing is marked.
    """
    n = graph.n
    successor_lists = graph.successor_lists
    forward = [False] * n
    forward[source] = True
    retained: dict[int, list[int]] = {}

    stack = [source]
    while stack:
        node = stack.pop()
        successors = successor_lists[node]
        if not successors:
            continue
        kept = (rng.random(len(successors)) < probability).tolist()
        for successor, keep in zip(successors, kept):
            if not keep:
                continue
            retained.setdefault(successor, []).append(node)
            if not forward[successor]:
                forward[successor] = True
                stack.append(successor)

    return traverse(retained, n, forward, target)


def sampled_intermediate(
    graph: Graph,
    source: int,
    target: int,
    probability: float,
    rng: np.random.Generator,
) -> np.ndarray:
    """Intermediate nodes of one randomly thinned copy of the graph.

    Args:
        graph: Graph to sample (usually already reduced to the
            intermediate nodes of source and target).
        source: Index of the source node.
        target: Index of the target node.
        probability: Retention probability of every edge.
        rng: Generator supplying the uniform draws.

    Returns:
        Boolean array of shape (n,).
    """
    return np.array(
        sampled_membership(graph, source, target, probability, rng),
        dtype=bool,
    )
