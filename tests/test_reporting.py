"""Tests for console reporting of network sizes and intermediacy tables."""

import numpy as np

from intermediacy.graph import Graph
from intermediacy.reporting import (
    format_elapsed,
    print_intermediacy_table,
    print_network_summary,
    print_sampling_header,
    rank_nodes,
    stage_timer,
)
from intermediacy.sampling import IntermediacyEstimate


def _make_toy_graph():
    arcs = [(1, 2), (1, 3), (2, 3), (2, 4), (3, 5), (4, 3), (4, 5)]
    return Graph.from_edges(
        labels=range(1, 6), edges=[(s - 1, t - 1) for s, t in arcs], name="toy"
    )


class TestFormatElapsed:
    """Seconds below a minute, minutes above."""

    def test_short(self):
        assert format_elapsed(1.234) == "1.23 sec"

    def test_seconds_one_decimal(self):
        assert format_elapsed(12.34) == "12.3 sec"

    def test_minutes(self):
        assert format_elapsed(90.0) == "1.50 min"

    def test_long_minutes(self):
        assert format_elapsed(900.0) == "15.0 min"


class TestRankNodes:
    """Descending phi with index tie-break."""

    def test_order(self):
        phi = np.array([0.9, 0.2, 0.5, 0.5, 0.9])
        assert rank_nodes(phi, {0, 4}) == [2, 3, 1]

    def test_exclude_nothing(self):
        phi = np.array([0.1, 0.3, 0.2])
        assert rank_nodes(phi, set()) == [1, 2, 0]


class TestConsoleOutput:
    """Printed banners and tables."""

    def test_network_summary(self, capsys):
        graph = _make_toy_graph()
        print_network_summary(graph, graph, 1, 5)
        out = capsys.readouterr().out
        assert "'toy'" in out
        assert "Nodes | 5 (5)" in out
        assert "Edges | 7 (7)" in out
        assert "2.800 (2.800)" in out

    def test_sampling_header(self, capsys):
        print_sampling_header(0.5, 100_000)
        out = capsys.readouterr().out
        assert "0.500" in out
        assert "100,000" in out

    def test_intermediacy_table(self, capsys):
        graph = _make_toy_graph()
        estimate = IntermediacyEstimate(
            0.5, 100, np.array([40, 23, 33, 16, 40], dtype=np.int64)
        )
        print_intermediacy_table(graph, estimate, 0, 4)
        lines = capsys.readouterr().out.splitlines()
        body = [line for line in lines if "±" in line]
        assert body[0].split("|")[0].strip() == "Source"
        assert body[1].split("|")[0].strip() == "Target"
        # remaining rows ranked by phi: labels 3, 2, 4
        assert [line.split("|")[0].strip() for line in body[2:]] == [
            "'3'", "'2'", "'4'"
        ]
        assert "0.40000 ± 0.04899" in body[0]
        # 1.96 * sqrt(0.33 * 0.67 / 100)
        assert "0.33000 ± 0.09216" in body[2]

    def test_table_top_limit(self, capsys):
        graph = _make_toy_graph()
        estimate = IntermediacyEstimate(
            0.5, 10, np.array([5, 3, 4, 2, 5], dtype=np.int64)
        )
        print_intermediacy_table(graph, estimate, 0, 4, top=1)
        body = [l for l in capsys.readouterr().out.splitlines() if "±" in l]
        assert len(body) == 3

    def test_stage_timer(self, capsys):
        with stage_timer("NETWORK"):
            pass
        out = capsys.readouterr().out
        assert "NETWORK" in out
        assert "Time" in out
