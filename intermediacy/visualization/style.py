"""Figure style for intermediacy plots.

Seaborn whitegrid with the colorblind palette; one color per ranked node,
the source/target reference curve in gray.
"""

import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for headless rendering

import matplotlib.pyplot as plt
import seaborn as sns
from pathlib import Path

PALETTE = sns.color_palette("colorblind", n_colors=8)
SOURCE_TARGET_COLOR = (0.5, 0.5, 0.5)  # gray
BAND_ALPHA = 0.15
FIGURE_FORMATS = ("png", "svg")


def apply_style() -> None:
    """Whitegrid theme plus print-sized fonts and 300 dpi output. Idempotent."""
    sns.set_theme(style="whitegrid")
    plt.rcParams.update({
        "figure.dpi": 150,
        "savefig.dpi": 300,
        "savefig.bbox": "tight",
        "font.size": 10,
        "axes.titlesize": 12,
        "axes.labelsize": 11,
        "legend.fontsize": 9,
        "lines.markersize": 4,
        "figure.figsize": (8, 5),
        "svg.fonttype": "none",  # keep node labels as SVG text
    })


def node_color(rank: int) -> tuple[float, float, float]:
    """Palette color of the rank-th plotted node, cycling after eight."""
    return PALETTE[rank % len(PALETTE)]


def save_figure(fig: plt.Figure, output_dir: Path, name: str) -> tuple[Path, Path]:
    """Write ``<name>.png`` and ``<name>.svg`` into output_dir and close fig.

    Returns:
        Tuple of (png_path, svg_path).
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    paths = []
    for fmt in FIGURE_FORMATS:
        path = output_dir / f"{name}.{fmt}"
        fig.savefig(path, bbox_inches="tight")
        paths.append(path)
    plt.close(fig)
    png_path, svg_path = paths
    return png_path, svg_path
