"""Seed management for reproducible, parallel-safe Monte Carlo streams.

Every run derives its random streams from one numpy SeedSequence. Chunks of
trials receive spawned child sequences, so each chunk owns an independent
Generator and no stream is ever shared between processes.
"""

import logging

import numpy as np

log = logging.getLogger(__name__)


def make_seed_sequence(seed: int | None) -> np.random.SeedSequence:
    """Create the root SeedSequence of a run.

    With ``seed=None`` fresh OS entropy is drawn; the entropy is logged so
    an unseeded run can still be repeated by passing it back as the seed.
    """
    seed_seq = np.random.SeedSequence(seed)
    if seed is None:
        log.info("No seed given, using entropy %d", seed_seq.entropy)
    return seed_seq


def spawn_seed_sequences(
    seed_seq: np.random.SeedSequence, n: int
) -> list[np.random.SeedSequence]:
    """Derive n independent child sequences.

    Children are derived from the root's entropy rather than via
    ``SeedSequence.spawn`` so that repeated calls on the same root return the
    same children.
    """
    return [
        np.random.SeedSequence(
            seed_seq.entropy, spawn_key=seed_seq.spawn_key + (k,)
        )
        for k in range(n)
    ]


def spawn_generators(
    seed_seq: np.random.SeedSequence, n: int
) -> list[np.random.Generator]:
    """One independent Generator per child sequence."""
    return [np.random.default_rng(s) for s in spawn_seed_sequences(seed_seq, n)]
