"""Immutable directed multigraph used by the reachability and sampling code.

Nodes are dense indices in [0, n). Each node carries an integer label used
only for external identification (file I/O, source/target lookup). Parallel
edges are kept; self-loops are dropped on construction.
"""

from dataclasses import dataclass, field, replace
from typing import Iterable, Sequence

import numpy as np
import scipy.sparse


class LabelNotFoundError(LookupError):
    """Raised when no node of a graph carries the requested label."""


@dataclass(frozen=True)
class Graph:
    """Static directed multigraph with an eagerly derived predecessor index.

    Built from a label per node and a successor list per node. Predecessors
    and the edge count are computed once in __post_init__ and never change.
    Uses frozen=True for immutability; derived fields are assigned with
    object.__setattr__ since the instance is frozen.
    """

    labels: tuple[int, ...]
    successor_lists: tuple[tuple[int, ...], ...]
    name: str = ""
    predecessor_lists: tuple[tuple[int, ...], ...] = field(
        init=False, repr=False, compare=False
    )
    m: int = field(init=False, compare=False)

    def __post_init__(self) -> None:
        labels = tuple(int(label) for label in self.labels)
        if len(labels) != len(self.successor_lists):
            raise ValueError(
                f"labels ({len(labels)}) and successor lists "
                f"({len(self.successor_lists)}) must have equal length"
            )
        n = len(labels)

        successors: list[tuple[int, ...]] = []
        for i, nodes in enumerate(self.successor_lists):
            kept = tuple(int(j) for j in (() if nodes is None else nodes) if int(j) != i)
            for j in kept:
                if not 0 <= j < n:
                    raise ValueError(
                        f"Successor {j} of node {i} outside [0, {n})"
                    )
            successors.append(kept)

        preds: list[list[int]] = [[] for _ in range(n)]
        for i, nodes in enumerate(successors):
            for j in nodes:
                preds[j].append(i)

        object.__setattr__(self, "labels", labels)
        object.__setattr__(self, "successor_lists", tuple(successors))
        object.__setattr__(
            self, "predecessor_lists", tuple(tuple(p) for p in preds)
        )
        object.__setattr__(self, "m", sum(len(s) for s in successors))

    @classmethod
    def from_edges(
        cls,
        labels: Sequence[int],
        edges: Iterable[tuple[int, int]],
        name: str = "",
    ) -> "Graph":
        """Build a graph from (source, target) index pairs in edge order."""
        successors: list[list[int]] = [[] for _ in range(len(labels))]
        for i, j in edges:
            successors[i].append(j)
        return cls(
            labels=tuple(labels),
            successor_lists=tuple(tuple(s) for s in successors),
            name=name,
        )

    @property
    def n(self) -> int:
        return len(self.labels)

    def successors(self, node: int) -> tuple[int, ...]:
        return self.successor_lists[node]

    def predecessors(self, node: int) -> tuple[int, ...]:
        return self.predecessor_lists[node]

    def label(self, node: int) -> int:
        return self.labels[node]

    def out_degree(self, node: int) -> int:
        return len(self.successor_lists[node])

    def in_degree(self, node: int) -> int:
        return len(self.predecessor_lists[node])

    def find_node(self, label: int) -> int:
        """Return the lowest node index carrying ``label``.

        Linear scan over the labels; meant for translating user-supplied
        identifiers at the boundary, not for use inside sampling loops.

        Raises:
            LabelNotFoundError: If no node carries the label.
        """
        for i, node_label in enumerate(self.labels):
            if node_label == label:
                return i
        raise LabelNotFoundError(
            f"No node with label {label} in graph '{self.name}'"
        )

    def renamed(self, name: str) -> "Graph":
        """Return the same graph under a different display name."""
        return replace(self, name=name)

    def out_degrees(self) -> np.ndarray:
        return np.array([len(s) for s in self.successor_lists], dtype=np.int64)

    def in_degrees(self) -> np.ndarray:
        return np.array(
            [len(p) for p in self.predecessor_lists], dtype=np.int64
        )

    @property
    def mean_degree(self) -> float:
        """Mean total degree 2m/n (0.0 for the empty graph)."""
        return 2.0 * self.m / self.n if self.n else 0.0

    def to_csr(self) -> scipy.sparse.csr_matrix:
        """Sparse n x n matrix whose (i, j) entry counts parallel edges i->j."""
        indptr = np.zeros(self.n + 1, dtype=np.int64)
        np.cumsum(self.out_degrees(), out=indptr[1:])
        indices = np.fromiter(
            (j for s in self.successor_lists for j in s),
            dtype=np.int64,
            count=self.m,
        )
        data = np.ones(self.m, dtype=np.int64)
        adj = scipy.sparse.csr_matrix(
            (data, indices, indptr), shape=(self.n, self.n)
        )
        adj.sum_duplicates()
        return adj
