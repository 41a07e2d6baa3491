"""Standings network analysis — graph construction and betweenness centrality."""

from league_echo.network.builder import build_standings_graph
from league_echo.network.metrics import (
    betweenness_centrality,
    compute_centrality,
    dependencies,
    shortest_paths,
    single_source_betweenness,
)
from league_echo.network.models import (
    DEFAULT_OPTIONS,
    CentralityOptions,
    CentralityRanking,
    ShortestPaths,
    StandingsEdge,
    StandingsGraph,
    TeamCentrality,
    TeamNode,
)

__all__ = [
    "DEFAULT_OPTIONS",
    "CentralityOptions",
    "CentralityRanking",
    "ShortestPaths",
    "StandingsEdge",
    "StandingsGraph",
    "TeamCentrality",
    "TeamNode",
    "betweenness_centrality",
    "build_standings_graph",
    "compute_centrality",
    "dependencies",
    "shortest_paths",
    "single_source_betweenness",
]
