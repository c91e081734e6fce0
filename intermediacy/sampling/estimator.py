"""Monte Carlo estimation of node intermediacy.

The intermediacy phi of a node is the probability that it lies on a directed
source -> target path when every edge survives independently with
probability p. It is estimated as the fraction of trials in which the node
was marked, with standard error sqrt(phi * (1 - phi) / samples).

Trials are grouped into fixed-size chunks. Chunk k always draws from the
k-th child of the run's SeedSequence, so for a given seed the hit counts are
identical whether chunks run in this process or on a process pool.
"""

import logging
from concurrent.futures import ProcessPoolExecutor

import numpy as np

from intermediacy.config.experiment import (
    ConfigurationError,
    validate_sampling_parameters,
)
from intermediacy.graph.types import Graph
from intermediacy.reproducibility.seed import (
    make_seed_sequence,
    spawn_seed_sequences,
)
from intermediacy.sampling.sampler import sampled_membership
from intermediacy.sampling.types import IntermediacyEstimate

log = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 10_000

# Set in each pool process by _init_worker so the graph is pickled once per
# process rather than once per chunk.
_WORKER_GRAPH: Graph | None = None


def run_chunk(
    graph: Graph,
    source: int,
    target: int,
    probability: float,
    trials: int,
    seed_seq: np.random.SeedSequence,
) -> np.ndarray:
    """Run ``trials`` trials on one private Generator and count hits.

    Returns:
        int64 array of shape (n,) with the number of trials marking each node.
    """
    rng = np.random.default_rng(seed_seq)
    hits = np.zeros(graph.n, dtype=np.int64)
    for _ in range(trials):
        hits += sampled_membership(graph, source, target, probability, rng)
    return hits


def _init_worker(graph: Graph) -> None:
    global _WORKER_GRAPH
    _WORKER_GRAPH = graph


def _run_worker_chunk(
    source: int,
    target: int,
    probability: float,
    trials: int,
    seed_seq: np.random.SeedSequence,
) -> np.ndarray:
    assert _WORKER_GRAPH is not None, "worker graph not initialized"
    return run_chunk(_WORKER_GRAPH, source, target, probability, trials, seed_seq)


def chunk_sizes(samples: int, chunk_size: int) -> list[int]:
    """Split samples into chunks of chunk_size with a smaller final chunk."""
    if chunk_size < 1:
        raise ConfigurationError(
            f"chunk_size must be positive, got {chunk_size}"
        )
    full, rest = divmod(samples, chunk_size)
    return [chunk_size] * full + ([rest] if rest else [])


def estimate_intermediacy(
    graph: Graph,
    source: int,
    target: int,
    probability: float,
    samples: int,
    seed: int | np.random.SeedSequence | None = None,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> IntermediacyEstimate:
    """Estimate the intermediacy of every node by Monte Carlo sampling.

    Args:
        graph: Graph to sample.
        source: Index of the source node.
        target: Index of the target node.
        probability: Edge retention probability in [0, 1].
        samples: Number of trials (positive).
        seed: Integer seed, a SeedSequence, or None for fresh entropy.
        workers: Number of processes; 1 runs every chunk in this process.
        chunk_size: Trials per independently seeded chunk.

    Returns:
        IntermediacyEstimate with per-node hit counts.

    Raises:
        ConfigurationError: If probability, samples, workers or chunk_size
            is out of range.
    """
    validate_sampling_parameters(probability, samples)
    if workers < 1:
        raise ConfigurationError(f"workers must be positive, got {workers}")

    seed_seq = (
        seed
        if isinstance(seed, np.random.SeedSequence)
        else make_seed_sequence(seed)
    )
    sizes = chunk_sizes(samples, chunk_size)
    chunk_seeds = spawn_seed_sequences(seed_seq, len(sizes))

    log.debug(
        "Sampling p=%.3f: %d trials in %d chunks on %d worker(s)",
        probability,
        samples,
        len(sizes),
        workers,
    )

    hits = np.zeros(graph.n, dtype=np.int64)
    if workers == 1 or len(sizes) == 1:
        for trials, chunk_seed in zip(sizes, chunk_seeds):
            hits += run_chunk(
                graph, source, target, probability, trials, chunk_seed
            )
    else:
        with ProcessPoolExecutor(
            max_workers=min(workers, len(sizes)),
            initializer=_init_worker,
            initargs=(graph,),
        ) as ex:
            futures = [
                ex.submit(
                    _run_worker_chunk,
                    source,
                    target,
                    probability,
                    trials,
                    chunk_seed,
                )
                for trials, chunk_seed in zip(sizes, chunk_seeds)
            ]
            for future in futures:
                hits += future.result()

    return IntermediacyEstimate(
        probability=float(probability),
        samples=int(samples),
        hits=hits,
    )


def intermediacy(
    graph: Graph,
    source: int,
    target: int,
    probability: float,
    samples: int,
    seed: int | np.random.SeedSequence | None = None,
    workers: int = 1,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> np.ndarray:
    """Estimated intermediacy phi[i] = hits[i] / samples for every node."""
    return estimate_intermediacy(
        graph,
        source,
        target,
        probability,
        samples,
        seed=seed,
        workers=workers,
        chunk_size=chunk_size,
    ).phi

