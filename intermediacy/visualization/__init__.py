"""Figures of intermediacy curves, saved as PNG and SVG."""

from intermediacy.visualization.curves import (
    plot_intermediacy_curves,
    select_curve_nodes,
)
from intermediacy.visualization.style import (
    PALETTE,
    apply_style,
    node_color,
    save_figure,
)

__all__ = [
    "PALETTE",
    "apply_style",
    "node_color",
    "plot_intermediacy_curves",
    "save_figure",
    "select_curve_nodes",
]
