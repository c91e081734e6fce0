"""Tab-separated output of per-node intermediacy estimates."""

import logging
from pathlib import Path
from typing import Sequence

import numpy as np

from intermediacy.graph.types import Graph

log = logging.getLogger(__name__)

PHI_SUFFIX = "_phi.tsv"


def phi_column(probability: float) -> str:
    """Column name for one probability, e.g. ``phi_0.5``."""
    return f"phi_{float(probability)!r}"


def write_phi_tsv(
    graph: Graph,
    probabilities: Sequence[float],
    phi: np.ndarray,
    output_dir: str | Path,
) -> Path:
    """Write ``<graph name>_phi.tsv`` with one row per node of graph.

    Columns are the node label, in-degree, out-degree and one phi column per
    probability, rows in node index order.

    Args:
        graph: The (reduced) graph the estimates refer to.
        probabilities: Probabilities in the order of the rows of phi.
        phi: Array of shape (len(probabilities), graph.n).
        output_dir: Directory to write into. Created if absent.

    Returns:
        Path of the written file.
    """
    phi = np.asarray(phi, dtype=np.float64)
    if phi.shape != (len(probabilities), graph.n):
        raise ValueError(
            f"phi must have shape ({len(probabilities)}, {graph.n}), "
            f"got {phi.shape}"
        )

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / f"{graph.name}{PHI_SUFFIX}"

    header = ["id", "in_degree", "out_degree"]
    header += [phi_column(p) for p in probabilities]
    with open(path, "w") as f:
        f.write("\t".join(header) + "\n")
        for i in range(graph.n):
            row = [
                str(graph.label(i)),
                str(graph.in_degree(i)),
                str(graph.out_degree(i)),
            ]
            row += [repr(float(v)) for v in phi[:, i]]
            f.write("\t".join(row) + "\n")

    log.info("Intermediacies written to %s", path)
    return path


def read_phi_tsv(path: str | Path) -> tuple[list[float], dict[int, list[float]]]:
    """Read a file written by write_phi_tsv.

    Returns:
        (probabilities, {label: [phi per probability]}).
    """
    with open(path) as f:
        header = f.readline().rstrip("\n").split("\t")
        probabilities = [float(col[len("phi_"):]) for col in header[3:]]
        rows: dict[int, list[float]] = {}
        for line in f:
            fields = line.rstrip("\n").split("\t")
            if len(fields) < 3:
                continue
            rows[int(fields[0])] = [float(v) for v in fields[3:]]
    return probabilities, rows
