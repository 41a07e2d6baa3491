"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: network/metrics.py
Description:
    Betweenness centrality computed from a StandingsGraph.

    Brandes (2001) on a weighted directed graph, pure Python:

    1. shortest_paths()   — Dijkstra from one source; edge weight = path
                            cost.  Tracks distance, path counts (sigma) and
                            predecessors.  Teams tied on the weight
                            attribute (weight-0 edges) get symmetric credit.
    2. dependencies()     — back-propagates dependency scores (delta)
                            from the farthest distance level inward.
    3. betweenness_centrality() — drives step 1–2 once per source node.

    Scores are not halved (directed graph).  Normalization by (n−1)(n−2)
    is optional.
"""

from __future__ import annotations

import heapq
import logging

import numpy as np

from league_echo.network.models import (
    CENTRALITY_MODES,
    DEFAULT_OPTIONS,
    CentralityRanking,
    ShortestPaths,
    StandingsGraph,
    TeamCentrality,
)

logger = logging.getLogger(__name__)

_EPS = 1e-12


def compute_centrality(
    graph: StandingsGraph,
    *,
    mode: str = DEFAULT_OPTIONS.mode,
    normalized: bool = DEFAULT_OPTIONS.normalized,
) -> CentralityRanking:
    """Compute betweenness centrality for every team in a StandingsGraph.

    Args:
        graph: A StandingsGraph built by build_standings_graph().
        mode: "total" (textbook, summed over all sources) or "source"
            (dependency at each node while it is the source).
        normalized: Divide by (n−1)(n−2).

    Returns:
        CentralityRanking with one entry per node.
    """
    scores = betweenness_centrality(graph, mode=mode, normalized=normalized)
    teams = [
        TeamCentrality(index=node.index, name=node.name, score=float(scores[node.index]))
        for node in graph.nodes
    ]
    return CentralityRanking(scores=scores, teams=teams, mode=mode, normalized=normalized)


def betweenness_centrality(
    graph: StandingsGraph,
    *,
    mode: str = "total",
    normalized: bool = False,
) -> np.ndarray:
    """Dense betweenness vector indexed by node.

    mode="total":  score[t] = Σ_s delta_s(t) over every source s ≠ t.
    mode="source": score[v] = delta_v(v), read from v's own pass only.

    "source" reads the raw dependencies() vector because
    single_source_betweenness() zeroes the source's own slot, which would
    make every score 0.
    """
    if mode not in CENTRALITY_MODES:
        raise ValueError(f"Unknown mode {mode!r}; expected one of {CENTRALITY_MODES}")
    graph.validate()

    n = graph.node_count
    scores = np.zeros(n)

    for s in range(n):
        if mode == "total":
            scores += single_source_betweenness(graph, s)
        else:
            scores[s] = dependencies(graph, s)[s]

    if normalized and n > 2:
        scores /= (n - 1) * (n - 2)

    logger.debug("Betweenness (%s) computed for %d nodes", mode, n)
    return scores


def single_source_betweenness(graph: StandingsGraph, source: int) -> np.ndarray:
    """Contribution of one source to every node's betweenness.

    delta_s(t) for every t ≠ s; the source's own entry is 0.
    """
    delta = dependencies(graph, source)
    delta[source] = 0.0
    return delta


def dependencies(graph: StandingsGraph, source: int) -> np.ndarray:
    """Brandes dependency vector for one source.

    Each node has two arrival states (direct, tie).  With
    g(x) = Σ over successor states y of (1 / sigma[node(y)] + g(y)),
    the dependency is
        delta[v] = sigma_direct[v] × g_direct[v] + sigma_tie[v] × g_tie[v]
    which reduces to sigma[v] / sigma[w] × (1 + delta[w]) when there are
    no zero-weight edges.  The source's entry is included.
    """
    paths = shortest_paths(graph, source)
    sigma = paths.sigma
    n = graph.node_count
    g_direct = np.zeros(n)
    g_tie = np.zeros(n)

    for level in reversed(paths.levels()):
        # A tie arrival only leads on over positive edges to farther levels,
        # so it is final before the direct arrivals that feed it.
        for w in level:
            if sigma[w] <= 0:
                continue
            share = 1.0 / sigma[w] + g_tie[w]
            for u in paths.tie_predecessors[w]:
                g_direct[u] += share
        for w in level:
            if sigma[w] <= 0:
                continue
            share = 1.0 / sigma[w] + g_direct[w]
            for u in paths.predecessors[w]:
                g_direct[u] += share
                g_tie[u] += share

    return paths.sigma_direct * g_direct + paths.sigma_tie * g_tie


def shortest_paths(graph: StandingsGraph, source: int) -> ShortestPaths:
    """Dijkstra from source, counting shortest paths.

    Each parallel edge is a distinct path.  A zero-weight edge between two
    nodes at the same distance may extend a direct arrival by one hop;
    longer zero-weight chains are not counted.  The counts depend only on
    the graph, not on node numbering.

    Raises:
        IndexError: source is not a node of the graph.
    """
    graph.node(source)
    n = graph.node_count

    # --- Dijkstra distances ---
    dist = np.full(n, np.inf)
    dist[source] = 0.0
    order: list[int] = []
    settled = np.zeros(n, dtype=bool)

    # min-heap: (distance, node)
    heap: list[tuple[float, int]] = [(0.0, source)]

    while heap:
        d, u = heapq.heappop(heap)
        if settled[u]:
            continue
        settled[u] = True
        order.append(u)

        for edge in graph.out_edges(u):
            v = edge.target
            if settled[v]:
                continue
            alt = d + edge.weight
            if alt < dist[v] - _EPS:
                dist[v] = alt
                heapq.heappush(heap, (alt, v))

    # --- Shortest-path predecessors ---
    pred: list[list[int]] = [[] for _ in range(n)]
    tie_pred: list[list[int]] = [[] for _ in range(n)]

    for u in order:
        for edge in graph.out_edges(u):
            v = edge.target
            if v == source or v == u:
                continue
            if abs(dist[u] + edge.weight - dist[v]) >= _EPS:
                continue
            if edge.weight > 0:
                pred[v].append(u)
            else:
                tie_pred[v].append(u)

    paths = ShortestPaths(
        source=source,
        distance=dist,
        sigma_direct=np.zeros(n),
        sigma_tie=np.zeros(n),
        predecessors=pred,
        tie_predecessors=tie_pred,
        order=order,
    )

    # --- Path counts, one distance level at a time ---
    sigma_direct = paths.sigma_direct
    sigma_tie = paths.sigma_tie
    sigma_direct[source] = 1.0

    for level in paths.levels():
        for w in level:
            for u in pred[w]:
                sigma_direct[w] += sigma_direct[u] + sigma_tie[u]
        for w in level:
            for u in tie_pred[w]:
                sigma_tie[w] += sigma_direct[u]

    return paths
