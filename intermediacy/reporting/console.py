"""Console progress and result tables for command-line runs."""

import logging
import time
from contextlib import contextmanager
from typing import Generator

import numpy as np

from intermediacy.graph.types import Graph
from intermediacy.sampling.types import IntermediacyEstimate

log = logging.getLogger(__name__)

# z value of a two-sided 95% normal interval
Z_95 = 1.96
TOP_NODES = 10


def _row(key: str, value: str) -> str:
    return f"{key:>15} | {value}"


def format_elapsed(seconds: float) -> str:
    """Seconds below a minute, minutes above, one decimal past 10 units."""
    if seconds >= 60.0:
        minutes = seconds / 60.0
        return f"{minutes:.1f} min" if minutes >= 10.0 else f"{minutes:.2f} min"
    return f"{seconds:.1f} sec" if seconds >= 10.0 else f"{seconds:.2f} sec"


@contextmanager
def stage_timer(name: str) -> Generator[None, None, None]:
    """Context manager that prints a stage banner and its elapsed time."""
    print(f"\n{_row('...', name)}\n")
    log.info("Starting: %s", name)
    t0 = time.monotonic()
    yield
    elapsed = time.monotonic() - t0
    print(f"\n{_row('Time', format_elapsed(elapsed))}")
    log.info("Completed: %s in %.1fs", name, elapsed)


def print_network_summary(
    graph: Graph, reduced: Graph, source: int, target: int
) -> None:
    """Sizes of the reduced graph next to the full graph in parentheses."""
    print(_row("Network", f"'{graph.name}'"))
    print(_row("Source", f"'{source}'"))
    print(_row("Target", f"'{target}'") + "\n")
    print(_row("Nodes", f"{reduced.n} ({graph.n})"))
    print(_row("Edges", f"{reduced.m} ({graph.m})"))
    print(
        _row("Degree", f"{reduced.mean_degree:.3f} ({graph.mean_degree:.3f})")
    )


def print_sampling_header(probability: float, samples: int) -> None:
    print(_row("Probability", f"{probability:.3f}"))
    print(_row("Samples", f"{samples:,}"))


def rank_nodes(phi: np.ndarray, exclude: set[int]) -> list[int]:
    """Node indices by phi descending, ties by index ascending."""
    order = np.lexsort((np.arange(len(phi)), -phi))
    return [int(i) for i in order if int(i) not in exclude]


def print_intermediacy_table(
    graph: Graph,
    estimate: IntermediacyEstimate,
    source: int,
    target: int,
    top: int = TOP_NODES,
) -> None:
    """Source and target with one standard error, then the top other nodes.

    Args:
        graph: Graph the estimate refers to.
        estimate: Estimate at one probability.
        source: Index of the source node in graph.
        target: Index of the target node in graph.
        top: Number of other nodes to list.
    """
    phi = estimate.phi
    se = estimate.standard_error

    print(f"\n{_row('Intermediacy', '...')}")
    print(_row("Source", f"{phi[source]:.5f} ± {se[source]:.5f}"))
    print(_row("Target", f"{phi[target]:.5f} ± {se[target]:.5f}"))
    for i in rank_nodes(phi, {source, target})[:top]:
        print(
            _row(f"'{graph.label(i)}'", f"{phi[i]:.5f} ± {Z_95 * se[i]:.5f}")
        )
