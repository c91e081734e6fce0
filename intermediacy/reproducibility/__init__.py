"""Reproducibility infrastructure: seeded random streams and code provenance."""

from intermediacy.reproducibility.seed import (
    make_seed_sequence,
    spawn_generators,
    spawn_seed_sequences,
)
from intermediacy.reproducibility.version import get_code_version

__all__ = [
    "get_code_version",
    "make_seed_sequence",
    "spawn_generators",
    "spawn_seed_sequences",
]
