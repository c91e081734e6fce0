"""Tests for a single Monte Carlo trial."""

import numpy as np
import pytest

from intermediacy.graph.reachability import intermediate_nodes
from intermediacy.graph.types import Graph
from intermediacy.sampling.sampler import sampled_intermediate, sampled_membership


def _make_toy_graph() -> Graph:
    arcs = [(1, 2), (1, 3), (2, 3), (2, 4), (3, 5), (4, 3), (4, 5)]
    return Graph.from_edges(
        labels=range(1, 6), edges=[(s - 1, t - 1) for s, t in arcs]
    )


def _make_random_graph(n: int, m: int, seed: int) -> Graph:
    rng = np.random.default_rng(seed)
    edges = [
        (int(i), int(j))
        for i, j in zip(rng.integers(0, n, size=m), rng.integers(0, n, size=m))
    ]
    return Graph.from_edges(labels=range(n), edges=edges)


class TestSampledIntermediate:
    """Behaviour at the extremes and consistency with exact reachability."""

    def test_probability_one_equals_intermediate_nodes(self) -> None:
        graph = _make_random_graph(40, 100, seed=11)
        rng = np.random.default_rng(0)
        expected = intermediate_nodes(graph, 0, 39)
        np.testing.assert_array_equal(
            sampled_intermediate(graph, 0, 39, 1.0, rng), expected
        )

    def test_probability_zero_marks_nothing(self) -> None:
        graph = _make_toy_graph()
        rng = np.random.default_rng(0)
        assert not sampled_intermediate(graph, 0, 4, 0.0, rng).any()

    def test_source_equals_target(self) -> None:
        graph = _make_toy_graph()
        rng = np.random.default_rng(0)
        result = sampled_intermediate(graph, 2, 2, 0.0, rng)
        assert result.tolist() == [False, False, True, False, False]

    def test_unreachable_target(self) -> None:
        graph = _make_toy_graph()
        rng = np.random.default_rng(0)
        assert not sampled_intermediate(graph, 4, 0, 1.0, rng).any()

    @pytest.mark.parametrize("p", [0.2, 0.5, 0.8])
    def test_subset_of_intermediate_nodes(self, p: float) -> None:
        graph = _make_random_graph(50, 150, seed=3)
        allowed = intermediate_nodes(graph, 0, 49)
        rng = np.random.default_rng(5)
        for _ in range(50):
            marked = sampled_intermediate(graph, 0, 49, p, rng)
            assert not (marked & ~allowed).any()

    def test_source_and_target_marked_together(self) -> None:
        graph = _make_toy_graph()
        rng = np.random.default_rng(9)
        for _ in range(200):
            marked = sampled_membership(graph, 0, 4, 0.5, rng)
            assert marked[0] == marked[4]
            if any(marked):
                assert marked[0]

    def test_same_generator_state_same_result(self) -> None:
        graph = _make_random_graph(30, 80, seed=1)
        a = sampled_intermediate(graph, 0, 29, 0.5, np.random.default_rng(42))
        b = sampled_intermediate(graph, 0, 29, 0.5, np.random.default_rng(42))
        np.testing.assert_array_equal(a, b)

    def test_membership_is_list_of_bools(self) -> None:
        marked = sampled_membership(
            _make_toy_graph(), 0, 4, 1.0, np.random.default_rng(0)
        )
        assert marked == [True] * 5
