"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: network/builder.py
Description:
    Builds a StandingsGraph from a list of StatRecord rows.

    Algorithm:
    1. Walk rows in input order; the first row carrying a team name
       creates that team's node.  Node indices therefore follow first-seen
       order, not sorted order.
    2. For every ordered pair of rows (r1, r2) with different team names,
       add an edge node(r1) → node(r2) weighted by
       int(|r1.attribute − r2.attribute|).

    Step 2 loops over rows, not nodes.  When a team appears in several
    rows (e.g. several seasons), each row pair adds its own parallel edge,
    so the edge count can exceed n × (n − 1).
"""

from __future__ import annotations

import logging

from league_echo.core.models import NUMERIC_ATTRIBUTES, StatRecord
from league_echo.network.models import StandingsGraph

logger = logging.getLogger(__name__)


def build_standings_graph(
    records: list[StatRecord],
    *,
    attribute: str = "wins",
) -> StandingsGraph:
    """Build a complete directed standings graph.

    Args:
        records: Parsed standings rows (from load_standings()).  Not mutated.
        attribute: StatRecord attribute the edge weight is computed from.

    Returns:
        StandingsGraph with one node per distinct team name.
    """
    if attribute not in NUMERIC_ATTRIBUTES:
        raise ValueError(
            f"Unknown attribute {attribute!r}; expected one of {NUMERIC_ATTRIBUTES}"
        )

    graph = StandingsGraph()

    # ------------------------------------------------------------------ #
    # Step 1 — Nodes in first-seen order                                  #
    # ------------------------------------------------------------------ #
    row_nodes: list[int] = []
    for record in records:
        index = graph.index_of(record.team)
        if index is None:
            index = graph.add_node(record.team)
        row_nodes.append(index)

    # ------------------------------------------------------------------ #
    # Step 2 — One edge per ordered pair of rows with distinct names      #
    # ------------------------------------------------------------------ #
    for i, r1 in enumerate(records):
        for j, r2 in enumerate(records):
            if r1.team == r2.team:
                continue
            graph.add_edge(row_nodes[i], row_nodes[j], r1.edge_weight(r2, attribute))

    n = graph.node_count
    if graph.edge_count != n * (n - 1):
        logger.debug(
            "Standings graph has %d edges for %d teams (%d rows); "
            "repeated team names produced parallel edges",
            graph.edge_count, n, len(records),
        )
    logger.info("Built standings graph: %d nodes, %d edges", n, graph.edge_count)
    return graph
