"""Graph module: multigraph storage, reachability, induction, and file readers."""

from intermediacy.graph.induction import induced
from intermediacy.graph.io import (
    GraphFormatError,
    read_graph,
    read_pajek,
    read_tsv,
)
from intermediacy.graph.reachability import (
    component,
    intermediate_nodes,
    traverse,
)
from intermediacy.graph.types import Graph, LabelNotFoundError

__all__ = [
    "Graph",
    "GraphFormatError",
    "LabelNotFoundError",
    "component",
    "induced",
    "intermediate_nodes",
    "read_graph",
    "read_pajek",
    "read_tsv",
    "traverse",
]
