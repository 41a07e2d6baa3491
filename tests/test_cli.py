"""
Project: LeagueEcho
File Created: 2026-10-19 11:21:45
Author: Xingnan Zhu
File Name: test_cli.py
Description:
    Tests for the command-line entry point and the network figure.
"""

import logging

import pytest

from league_echo.cli import format_nodes, format_ranking, main
from league_echo.core.models import StatRecord
from league_echo.network.builder import build_standings_graph
from league_echo.network.metrics import compute_centrality
from league_echo.network.models import StandingsGraph
from league_echo.viz.plotly_network import build_network_figure, circular_layout

SAMPLE = (
    "Team,W,L,GF,Season\n"
    "TeamA,10,5,30,2022\n"
    "TeamB,8,7,25,2022\n"
    "TeamC,12,3,35,2022\n"
    "TeamD,7,8,20,2022\n"
)


def _write(tmp_path, text: str = SAMPLE):
    path = tmp_path / "standings.csv"
    path.write_text(text, encoding="utf-8")
    return path


def _graph() -> StandingsGraph:
    rows = [
        StatRecord(team=t, wins=w, losses=0.0, goals_for=0.0, season="2022")
        for t, w in (("TeamA", 10), ("TeamB", 8), ("TeamC", 12), ("TeamD", 7))
    ]
    return build_standings_graph(rows)


class TestMain:
    def test_prints_ranking_and_nodes(self, tmp_path, capsys):
        assert main([str(_write(tmp_path))]) == 0
        out = capsys.readouterr().out
        assert "BETWEENNESS CENTRALITY" in out
        assert "GRAPH NODES" in out
        ranking_part = out.split("GRAPH NODES")[0]
        assert ranking_part.index("TeamA") < ranking_part.index("TeamC")
        assert "2.0000" in ranking_part

    def test_top_limits_rows(self, tmp_path, capsys):
        main([str(_write(tmp_path)), "--top", "1"])
        ranking_part = capsys.readouterr().out.split("GRAPH NODES")[0]
        assert "TeamA" in ranking_part
        assert "TeamB" not in ranking_part

    def test_source_mode(self, tmp_path, capsys):
        main([str(_write(tmp_path)), "--mode", "source"])
        assert "3.0000" in capsys.readouterr().out

    def test_missing_file_exits_with_error(self, tmp_path, caplog):
        with caplog.at_level(logging.ERROR):
            assert main([str(tmp_path / "missing.csv")]) == 1
        assert "Cannot load standings" in caplog.text

    def test_non_utf8_file_exits_with_error(self, tmp_path, caplog):
        path = tmp_path / "latin1.csv"
        path.write_bytes(SAMPLE.replace("TeamD", "M\u00fcnchen").encode("latin-1"))
        with caplog.at_level(logging.ERROR):
            assert main([str(path)]) == 1
        assert "UTF-8" in caplog.text

    @pytest.mark.parametrize("top", ["0", "-1"])
    def test_top_below_one_is_rejected(self, tmp_path, top):
        with pytest.raises(SystemExit) as excinfo:
            main([str(_write(tmp_path)), "--top", top])
        assert excinfo.value.code == 2

    def test_bad_header_exits_with_error(self, tmp_path):
        path = _write(tmp_path, "Team,Wins\nTeamA,10\n")
        assert main([str(path)]) == 1

    def test_writes_html(self, tmp_path):
        out = tmp_path / "network.html"
        assert main([str(_write(tmp_path)), "--html", str(out)]) == 0
        assert out.exists()
        assert "plotly" in out.read_text(encoding="utf-8").lower()


class TestFormatting:
    def test_format_ranking_order(self):
        text = format_ranking(compute_centrality(_graph()))
        lines = [line for line in text.splitlines() if line.strip()]
        # header + rule + 4 rows
        assert len(lines) == 6
        assert "TeamA" in lines[2]

    def test_format_nodes(self):
        text = format_nodes(_graph())
        assert "TeamD" in text.splitlines()[-1]


class TestNetworkFigure:
    def test_circular_layout_unit_circle(self):
        pos = circular_layout(5)
        assert pos.shape == (5, 2)
        radii = (pos ** 2).sum(axis=1)
        assert all(abs(r - 1.0) < 1e-9 for r in radii)

    def test_plain_figure(self):
        fig = build_network_figure(_graph())
        # edge trace + node trace
        assert len(fig.data) == 2
        assert list(fig.data[-1].text) == ["TeamA", "TeamB", "TeamC", "TeamD"]

    def test_no_close_pairs_hides_edges(self):
        fig = build_network_figure(_graph(), max_edge_weight=0)
        assert len(fig.data) == 1

    def test_ranking_colours_nodes(self):
        graph = _graph()
        fig = build_network_figure(graph, compute_centrality(graph), title="League")
        marker = fig.data[-1].marker
        assert list(marker.color) == [1.0, 1.0, 0.0, 0.0]
        assert fig.layout.title.text == "League"

    def test_empty_graph(self):
        assert len(build_network_figure(StandingsGraph()).data) == 0
