"""Monte Carlo sampling: single trials and the intermediacy estimator."""

from intermediacy.sampling.estimator import (
    DEFAULT_CHUNK_SIZE,
    chunk_sizes,
    estimate_intermediacy,
    intermediacy,
    run_chunk,
)
from intermediacy.sampling.sampler import sampled_intermediate, sampled_membership
from intermediacy.sampling.types import IntermediacyEstimate, standard_error

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "IntermediacyEstimate",
    "chunk_sizes",
    "estimate_intermediacy",
    "intermediacy",
    "run_chunk",
    "sampled_intermediate",
    "sampled_membership",
    "standard_error",
]
