"""Console reporting for command-line runs."""

from intermediacy.reporting.console import (
    format_elapsed,
    print_intermediacy_table,
    print_network_summary,
    print_sampling_header,
    rank_nodes,
    stage_timer,
)

__all__ = [
    "format_elapsed",
    "print_intermediacy_table",
    "print_network_summary",
    "print_sampling_header",
    "rank_nodes",
    "stage_timer",
]
