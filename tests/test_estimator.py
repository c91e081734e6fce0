"""Tests for Monte Carlo intermediacy estimation.

The toy network has closed-form intermediacies at p = 0.5:
phi = (51/128, 15/64, 21/64, 5/32, 51/128) for source 1 and target 5.
"""

import numpy as np
import pytest

from intermediacy.config.experiment import ConfigurationError
from intermediacy.graph.types import Graph
from intermediacy.sampling import (
    IntermediacyEstimate,
    chunk_sizes,
    estimate_intermediacy,
    intermediacy,
    run_chunk,
    standard_error,
)

TOY_PHI_HALF = np.array([51 / 128, 15 / 64, 21 / 64, 5 / 32, 51 / 128])


def _make_toy_graph() -> Graph:
    arcs = [(1, 2), (1, 3), (2, 3), (2, 4), (3, 5), (4, 3), (4, 5)]
    return Graph.from_edges(
        labels=range(1, 6), edges=[(s - 1, t - 1) for s, t in arcs]
    )


class TestEstimateIntermediacy:
    """Estimates against exact values and limiting cases."""

    def test_toy_matches_exact_values(self) -> None:
        graph = _make_toy_graph()
        est = estimate_intermediacy(graph, 0, 4, 0.5, 20_000, seed=2024)
        tolerance = 5 * standard_error(TOY_PHI_HALF, 20_000)
        assert np.all(np.abs(est.phi - TOY_PHI_HALF) < tolerance)

    def test_probability_one_gives_indicator(self) -> None:
        graph = Graph.from_edges(
            labels=range(5), edges=[(0, 1), (1, 3), (0, 2), (4, 1)]
        )
        phi = intermediacy(graph, 0, 3, 1.0, 50, seed=0)
        np.testing.assert_array_equal(phi, [1.0, 1.0, 0.0, 1.0, 0.0])

    def test_probability_zero_gives_zeros(self) -> None:
        phi = intermediacy(_make_toy_graph(), 0, 4, 0.0, 50, seed=0)
        np.testing.assert_array_equal(phi, np.zeros(5))

    def test_source_equals_target(self) -> None:
        phi = intermediacy(_make_toy_graph(), 1, 1, 0.3, 50, seed=0)
        np.testing.assert_array_equal(phi, [0.0, 1.0, 0.0, 0.0, 0.0])

    def test_source_and_target_equal_phi(self) -> None:
        est = estimate_intermediacy(_make_toy_graph(), 0, 4, 0.4, 2_000, seed=1)
        assert est.hits[0] == est.hits[4]
        assert est.phi.max() == est.phi[0]

    def test_monotone_in_probability(self) -> None:
        graph = _make_toy_graph()
        phis = [
            intermediacy(graph, 0, 4, p, 20_000, seed=7)
            for p in (0.3, 0.5, 0.7)
        ]
        assert np.all(phis[0] < phis[1])
        assert np.all(phis[1] < phis[2])

    def test_values_in_unit_interval(self) -> None:
        est = estimate_intermediacy(_make_toy_graph(), 0, 4, 0.5, 500, seed=3)
        assert est.hits.dtype == np.int64
        assert np.all((est.phi >= 0.0) & (est.phi <= 1.0))
        assert est.samples == 500
        assert est.probability == 0.5


class TestReproducibility:
    """Seeded runs are repeatable regardless of how chunks are executed."""

    def test_same_seed_same_hits(self) -> None:
        graph = _make_toy_graph()
        a = estimate_intermediacy(graph, 0, 4, 0.5, 3_000, seed=99)
        b = estimate_intermediacy(graph, 0, 4, 0.5, 3_000, seed=99)
        np.testing.assert_array_equal(a.hits, b.hits)

    def test_different_seed_different_hits(self) -> None:
        graph = _make_toy_graph()
        a = estimate_intermediacy(graph, 0, 4, 0.5, 3_000, seed=1)
        b = estimate_intermediacy(graph, 0, 4, 0.5, 3_000, seed=2)
        assert not np.array_equal(a.hits, b.hits)

    def test_seed_sequence_accepted(self) -> None:
        graph = _make_toy_graph()
        a = estimate_intermediacy(
            graph, 0, 4, 0.5, 1_000, seed=np.random.SeedSequence(5)
        )
        b = estimate_intermediacy(graph, 0, 4, 0.5, 1_000, seed=5)
        np.testing.assert_array_equal(a.hits, b.hits)

    def test_worker_count_does_not_change_result(self) -> None:
        graph = _make_toy_graph()
        serial = estimate_intermediacy(
            graph, 0, 4, 0.5, 2_000, seed=123, workers=1, chunk_size=300
        )
        parallel = estimate_intermediacy(
            graph, 0, 4, 0.5, 2_000, seed=123, workers=2, chunk_size=300
        )
        np.testing.assert_array_equal(serial.hits, parallel.hits)

    def test_chunks_sum_to_total(self) -> None:
        graph = _make_toy_graph()
        root = np.random.SeedSequence(8)
        children = [
            np.random.SeedSequence(root.entropy, spawn_key=(k,)) for k in range(3)
        ]
        total = sum(
            run_chunk(graph, 0, 4, 0.5, trials, seq)
            for trials, seq in zip((100, 100, 50), children)
        )
        est = estimate_intermediacy(
            graph, 0, 4, 0.5, 250, seed=8, chunk_size=100
        )
        np.testing.assert_array_equal(est.hits, total)


class TestValidation:
    """Out-of-range parameters fail before any sampling."""

    @pytest.mark.parametrize("p", [-0.1, 1.5, float("nan")])
    def test_bad_probability(self, p: float) -> None:
        with pytest.raises(ConfigurationError, match="probability"):
            estimate_intermediacy(_make_toy_graph(), 0, 4, p, 10)

    @pytest.mark.parametrize("samples", [0, -5])
    def test_bad_samples(self, samples: int) -> None:
        with pytest.raises(ConfigurationError, match="samples"):
            estimate_intermediacy(_make_toy_graph(), 0, 4, 0.5, samples)

    def test_bad_workers(self) -> None:
        with pytest.raises(ConfigurationError, match="workers"):
            estimate_intermediacy(_make_toy_graph(), 0, 4, 0.5, 10, workers=0)

    def test_bad_chunk_size(self) -> None:
        with pytest.raises(ConfigurationError, match="chunk_size"):
            estimate_intermediacy(
                _make_toy_graph(), 0, 4, 0.5, 10, chunk_size=0
            )


class TestHelpers:
    """Chunking and standard errors."""

    def test_chunk_sizes(self) -> None:
        assert chunk_sizes(25, 10) == [10, 10, 5]
        assert chunk_sizes(20, 10) == [10, 10]
        assert chunk_sizes(3, 10) == [3]

    def test_standard_error(self) -> None:
        se = standard_error(np.array([0.0, 0.5, 1.0]), 100)
        np.testing.assert_allclose(se, [0.0, 0.05, 0.0])

    def test_estimate_properties(self) -> None:
        est = IntermediacyEstimate(
            probability=0.5, samples=4, hits=np.array([4, 2, 0], dtype=np.int64)
        )
        np.testing.assert_allclose(est.phi, [1.0, 0.5, 0.0])
        np.testing.assert_allclose(est.standard_error, [0.0, 0.25, 0.0])
