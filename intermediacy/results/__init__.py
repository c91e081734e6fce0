"""Result writing: per-node TSV tables and validated JSON run summaries."""

from intermediacy.results.summary import (
    RESULT_SUFFIX,
    build_summary,
    generate_run_id,
    load_summary,
    validate_summary,
    write_summary,
)
from intermediacy.results.tsv import (
    PHI_SUFFIX,
    phi_column,
    read_phi_tsv,
    write_phi_tsv,
)

__all__ = [
    "PHI_SUFFIX",
    "RESULT_SUFFIX",
    "build_summary",
    "generate_run_id",
    "load_summary",
    "phi_column",
    "read_phi_tsv",
    "validate_summary",
    "write_phi_tsv",
    "write_summary",
]
