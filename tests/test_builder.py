"""
Project: LeagueEcho
File Created: 2026-10-19 10:52:37
Author: Xingnan Zhu
File Name: test_builder.py
Description:
    Tests for standings graph construction — node order, complete digraph
    edges, weights, and repeated team names.
"""

import itertools

import numpy as np
import pytest

from league_echo.core.models import StatRecord
from league_echo.network.builder import build_standings_graph
from league_echo.network.models import StandingsEdge, StandingsGraph


def _record(team: str, wins: float, losses: float = 0, gf: float = 0, season: str = "2022") -> StatRecord:
    return StatRecord(team=team, wins=wins, losses=losses, goals_for=gf, season=season)


def _reference_rows() -> list[StatRecord]:
    """The 4-team reference league."""
    return [
        _record("TeamA", 10, 5, 30),
        _record("TeamB", 8, 7, 25),
        _record("TeamC", 12, 3, 35),
        _record("TeamD", 7, 8, 20),
    ]


class TestNodes:
    def test_one_node_per_team(self):
        graph = build_standings_graph(_reference_rows())
        assert graph.node_count == 4

    def test_first_seen_order(self):
        rows = [_record("Zeta", 1), _record("Alpha", 2), _record("Mid", 3)]
        graph = build_standings_graph(rows)
        assert graph.names == ["Zeta", "Alpha", "Mid"]
        assert [n.index for n in graph.nodes] == [0, 1, 2]

    def test_index_of(self):
        graph = build_standings_graph(_reference_rows())
        assert graph.index_of("TeamC") == 2
        assert graph.index_of("Nobody") is None

    def test_out_of_range_node_raises(self):
        graph = build_standings_graph(_reference_rows())
        with pytest.raises(IndexError):
            graph.node(4)
        with pytest.raises(IndexError):
            graph.node(-1)

    def test_empty_input(self):
        graph = build_standings_graph([])
        assert graph.node_count == 0
        assert graph.edge_count == 0


class TestEdges:
    def test_complete_digraph_edge_count(self):
        graph = build_standings_graph(_reference_rows())
        assert graph.edge_count == 4 * 3

    def test_every_ordered_pair_once_no_self_loops(self):
        graph = build_standings_graph(_reference_rows())
        pairs = [(e.source, e.target) for e in graph.edges]
        assert sorted(pairs) == sorted(itertools.permutations(range(4), 2))

    def test_reference_weights(self):
        graph = build_standings_graph(_reference_rows())
        a, b, c, d = (graph.index_of(t) for t in ("TeamA", "TeamB", "TeamC", "TeamD"))
        assert graph.edge_weights(a, b) == [2]
        assert graph.edge_weights(a, c) == [2]
        assert graph.edge_weights(a, d) == [3]
        assert graph.edge_weights(b, c) == [4]
        assert graph.edge_weights(d, c) == [5]

    def test_weights_match_wins_difference(self):
        rows = _reference_rows()
        graph = build_standings_graph(rows)
        wins = {r.team: r.wins for r in rows}
        for edge in graph.edges:
            src = graph.node(edge.source).name
            dst = graph.node(edge.target).name
            assert isinstance(edge.weight, int)
            assert edge.weight >= 0
            assert edge.weight == int(abs(wins[src] - wins[dst]))

    def test_fractional_difference_truncates(self):
        graph = build_standings_graph([_record("A", 10.9), _record("B", 8.0)])
        assert graph.edge_weights(0, 1) == [2]
        assert graph.edge_weights(1, 0) == [2]

    def test_other_attribute(self):
        graph = build_standings_graph(_reference_rows(), attribute="goals_for")
        assert graph.edge_weights(0, 1) == [5]

    def test_unknown_attribute_raises(self):
        with pytest.raises(ValueError):
            build_standings_graph(_reference_rows(), attribute="draws")

    def test_input_rows_not_mutated(self):
        rows = _reference_rows()
        snapshot = list(rows)
        build_standings_graph(rows)
        assert rows == snapshot


class TestRepeatedTeamNames:
    """Edges come from row pairs, so repeated names add parallel edges."""

    def test_node_count_uses_distinct_names(self):
        rows = _reference_rows() + [_record("TeamA", 7, season="2023")]
        graph = build_standings_graph(rows)
        assert graph.node_count == 4

    def test_edge_count_exceeds_complete_digraph(self):
        rows = _reference_rows() + [_record("TeamA", 7, season="2023")]
        graph = build_standings_graph(rows)
        n = graph.node_count
        # 5 rows → 5 × 4 ordered row pairs, minus the two TeamA/TeamA pairs
        assert graph.edge_count == 18
        assert graph.edge_count > n * (n - 1)

    def test_parallel_edges_keep_each_row_weight(self):
        rows = [
            _record("TeamA", 10, season="2022"),
            _record("TeamB", 8),
            _record("TeamA", 12, season="2023"),
        ]
        graph = build_standings_graph(rows)
        assert graph.node_count == 2
        assert graph.edge_count == 4
        assert graph.edge_weights(0, 1) == [2, 4]
        assert graph.edge_weights(1, 0) == [2, 4]

    def test_first_row_defines_node(self):
        rows = [_record("TeamB", 1), _record("TeamA", 2), _record("TeamB", 3)]
        graph = build_standings_graph(rows)
        assert graph.names == ["TeamB", "TeamA"]


class TestGraphModel:
    def test_weight_matrix_takes_lightest_parallel_edge(self):
        rows = [_record("A", 10), _record("B", 8), _record("A", 12)]
        matrix = build_standings_graph(rows).weight_matrix()
        assert matrix.shape == (2, 2)
        assert matrix[0, 1] == 2
        assert matrix[0, 0] == 0

    def test_weight_matrix_inf_without_edge(self):
        graph = StandingsGraph()
        graph.add_node("A")
        graph.add_node("B")
        graph.add_edge(0, 1, 3)
        matrix = graph.weight_matrix()
        assert matrix[0, 1] == 3
        assert np.isinf(matrix[1, 0])

    def test_validate_rejects_dangling_edge(self):
        graph = StandingsGraph()
        graph.add_node("A")
        graph.edges.append(StandingsEdge(source=0, target=5, weight=1))
        with pytest.raises(ValueError, match="dangling"):
            graph.validate()

    def test_validate_accepts_built_graph(self):
        build_standings_graph(_reference_rows()).validate()
