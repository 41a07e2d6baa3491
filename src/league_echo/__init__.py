"""
LeagueEcho — betweenness centrality for league standings.

Usage::

    from league_echo import (
        StatRecord, load_standings,
        StandingsGraph, build_standings_graph,
        CentralityRanking, compute_centrality,
    )
"""

from importlib.metadata import version
__version__ = version("league-echo")

# Core models
from league_echo.core.models import StatRecord

# Data loading
from league_echo.data.standings import (
    DEFAULT_COLUMNS,
    MalformedRowError,
    StandingsColumns,
    StandingsFormatError,
    load_standings,
)

# Network
from league_echo.network.builder import build_standings_graph
from league_echo.network.metrics import (
    betweenness_centrality,
    compute_centrality,
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
    # Core
    "StatRecord",
    # Data
    "DEFAULT_COLUMNS",
    "MalformedRowError",
    "StandingsColumns",
    "StandingsFormatError",
    "load_standings",
    # Network
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
    "shortest_paths",
    "single_source_betweenness",
]
