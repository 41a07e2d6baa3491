"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: cli.py
Description:
    Command-line entry point.

    Loads a standings CSV, builds the standings graph, computes
    betweenness centrality and prints:
      1. the teams ranked by centrality (highest first)
      2. the node list (index, team) in graph order

Usage:
    league-echo data/EPL_standings_2000-2022.csv
    league-echo standings.csv --mode source --top 10
    league-echo standings.csv --normalized --html network.html
"""

from __future__ import annotations

import argparse
import logging
import sys

from tabulate import tabulate

from league_echo.core.models import NUMERIC_ATTRIBUTES
from league_echo.data.standings import StandingsFormatError, load_standings
from league_echo.network.builder import build_standings_graph
from league_echo.network.metrics import compute_centrality
from league_echo.network.models import (
    CENTRALITY_MODES,
    DEFAULT_OPTIONS,
    CentralityRanking,
    StandingsGraph,
)

logger = logging.getLogger(__name__)


# ── Pretty-printing helpers ──────────────────────────────────────────────────


def _header(title: str) -> str:
    width = 60
    return f"\n{'═' * width}\n  {title}\n{'═' * width}"


def format_ranking(ranking: CentralityRanking, top_n: int | None = None) -> str:
    teams = ranking.ranked if top_n is None else ranking.top(top_n)
    rows = [[i, t.name, t.score] for i, t in enumerate(teams, 1)]
    return tabulate(rows, headers=["Rank", "Team", "Centrality"],
                    tablefmt="simple", floatfmt=".4f", stralign="left")


def format_nodes(graph: StandingsGraph) -> str:
    rows = [[node.index, node.name] for node in graph.nodes]
    return tabulate(rows, headers=["Node", "Team"], tablefmt="simple")


# ── Main ─────────────────────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="league-echo",
        description="Rank teams by betweenness centrality in a standings graph",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("standings", help="Standings CSV (columns Team, W, L, GF, Season)")
    parser.add_argument(
        "--mode", choices=CENTRALITY_MODES, default=DEFAULT_OPTIONS.mode,
        help="total = summed over all sources (default); "
             "source = dependency at each team while it is the source",
    )
    parser.add_argument(
        "--normalized", action="store_true",
        help="Divide scores by (n-1)(n-2)",
    )
    parser.add_argument(
        "--attribute", choices=NUMERIC_ATTRIBUTES, default=DEFAULT_OPTIONS.attribute,
        help="Record attribute used for edge weights (default: wins)",
    )
    parser.add_argument(
        "--top", type=_positive_int, default=None,
        help="Only print the top N teams (default: all)",
    )
    parser.add_argument(
        "--html", type=str, default=None,
        help="Also write an interactive network figure to this HTML file",
    )
    parser.add_argument(
        "--log-level", default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        records = load_standings(args.standings)
    except (OSError, StandingsFormatError) as exc:
        logger.error("Cannot load standings: %s", exc)
        return 1

    graph = build_standings_graph(records, attribute=args.attribute)
    ranking = compute_centrality(graph, mode=args.mode, normalized=args.normalized)

    print(_header("BETWEENNESS CENTRALITY"))
    print(format_ranking(ranking, args.top))
    print(_header("GRAPH NODES"))
    print(format_nodes(graph))

    if args.html:
        from league_echo.viz.plotly_network import build_network_figure

        fig = build_network_figure(graph, ranking, title="Standings network")
        fig.write_html(args.html)
        print(f"\n  Network figure saved to {args.html}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
