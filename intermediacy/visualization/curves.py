"""Intermediacy versus edge probability for the most intermediate nodes."""

import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
from typing import Sequence

from intermediacy.visualization.style import (
    BAND_ALPHA,
    SOURCE_TARGET_COLOR,
    apply_style,
    node_color,
)


def select_curve_nodes(
    phi: np.ndarray, exclude: Sequence[int], top_k: int
) -> list[int]:
    """Indices of the top_k nodes by mean phi over probabilities.

    Ties are broken by index; nodes in ``exclude`` are skipped.
    """
    mean_phi = phi.mean(axis=0)
    order = np.lexsort((np.arange(len(mean_phi)), -mean_phi))
    skip = set(exclude)
    return [int(i) for i in order if int(i) not in skip][:top_k]


def plot_intermediacy_curves(
    probabilities: Sequence[float],
    phi: np.ndarray,
    labels: Sequence[int],
    samples: int,
    source: int,
    target: int,
    top_k: int = 8,
    ax: plt.Axes | None = None,
) -> plt.Figure:
    """Plot phi against probability with one-standard-error bands.

    The source curve (identical to the target curve, the probability that any
    path survives) is drawn as a dashed gray reference line.

    Args:
        probabilities: Edge probabilities, one per row of phi.
        phi: Array of shape (len(probabilities), n).
        labels: Node labels of length n, used in the legend.
        samples: Trials per probability, for the error bands.
        source: Index of the source node.
        target: Index of the target node.
        top_k: Number of other nodes to draw.
        ax: Optional axes to draw on.

    Returns:
        Matplotlib Figure.
    """
    apply_style()

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    p = np.asarray(probabilities, dtype=np.float64)
    order = np.argsort(p, kind="stable")
    p = p[order]
    phi = np.asarray(phi, dtype=np.float64)[order]
    se = np.sqrt(phi * (1.0 - phi) / samples)

    ax.plot(
        p, phi[:, source], color=SOURCE_TARGET_COLOR, linestyle="--",
        linewidth=1.5, label=f"'{labels[source]}' (source/target)", zorder=2,
    )

    for k, i in enumerate(select_curve_nodes(phi, (source, target), top_k)):
        color = node_color(k)
        ax.plot(p, phi[:, i], color=color, linewidth=2.0, marker="o",
                label=f"'{labels[i]}'", zorder=3)
        ax.fill_between(p, phi[:, i] - se[:, i], phi[:, i] + se[:, i],
                        alpha=BAND_ALPHA, color=color, zorder=1)

    ax.set_xlabel("Edge probability p")
    ax.set_ylabel("Intermediacy $\\phi$")
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.02)
    ax.legend(loc="upper left", frameon=True)
    ax.set_title(f"Intermediacy ({samples:,} samples per probability)")

    fig.tight_layout()
    return fig
