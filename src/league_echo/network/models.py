"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: network/models.py
Description:
    Data models for standings network analysis.
    A StandingsGraph is a directed weighted graph: nodes are teams,
    edges carry the integer distance between two teams' records.

    ShortestPaths, TeamCentrality and CentralityRanking hold the results
    derived from a StandingsGraph by the functions in metrics.py.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import pandas as pd


CENTRALITY_MODES = ("total", "source")


@dataclass(frozen=True)
class TeamNode:
    """A team in the standings graph.

    index is assigned in first-seen order of the team's name in the input
    rows and never changes for the lifetime of the graph.
    """

    index: int
    name: str


@dataclass(frozen=True)
class StandingsEdge:
    """A directed edge between two teams, weighted by record distance."""

    source: int
    target: int
    weight: int  # always >= 0


@dataclass
class StandingsGraph:
    """A directed weighted standings graph.

    nodes: TeamNode list, position == TeamNode.index
    edges: every materialized edge; parallel edges between the same pair
           are kept (one per contributing pair of input rows).
    """

    nodes: list[TeamNode] = field(default_factory=list)
    edges: list[StandingsEdge] = field(default_factory=list)
    _by_name: dict[str, int] = field(
        default_factory=dict, init=False, repr=False, compare=False
    )
    _adjacency: list[list[StandingsEdge]] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        self._by_name = {node.name: node.index for node in self.nodes}

    # -- construction ------------------------------------------------------

    def add_node(self, name: str) -> int:
        """Append a node labeled name and return its index."""
        index = len(self.nodes)
        self.nodes.append(TeamNode(index=index, name=name))
        self._by_name[name] = index
        self._adjacency = None
        return index

    def add_edge(self, source: int, target: int, weight: int) -> StandingsEdge:
        edge = StandingsEdge(source=source, target=target, weight=weight)
        self.edges.append(edge)
        self._adjacency = None
        return edge

    # -- queries -----------------------------------------------------------

    @property
    def node_count(self) -> int:
        return len(self.nodes)

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    @property
    def names(self) -> list[str]:
        return [node.name for node in self.nodes]

    def index_of(self, name: str) -> int | None:
        """Node index for a team name, or None if the team is not in the graph."""
        return self._by_name.get(name)

    def node(self, index: int) -> TeamNode:
        """Node at index.  Negative or out-of-range indices raise IndexError."""
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"node index {index} out of range for {len(self.nodes)} nodes")
        return self.nodes[index]

    def out_edges(self, index: int) -> list[StandingsEdge]:
        """Edges leaving node index, in insertion order."""
        self.node(index)
        if self._adjacency is None:
            adjacency: list[list[StandingsEdge]] = [[] for _ in self.nodes]
            for edge in self.edges:
                adjacency[edge.source].append(edge)
            self._adjacency = adjacency
        return self._adjacency[index]

    def edge_weights(self, source: int, target: int) -> list[int]:
        """Weights of every edge source → target (several if parallel)."""
        return [e.weight for e in self.out_edges(source) if e.target == target]

    def weight_matrix(self) -> np.ndarray:
        """Dense n × n matrix of the lightest edge weight per ordered pair.

        inf where no edge exists, 0 on the diagonal.
        """
        n = len(self.nodes)
        matrix = np.full((n, n), np.inf)
        np.fill_diagonal(matrix, 0.0)
        for edge in self.edges:
            if edge.source != edge.target:
                matrix[edge.source, edge.target] = min(
                    matrix[edge.source, edge.target], edge.weight
                )
        return matrix

    def validate(self) -> None:
        """Check structural invariants.

        Raises:
            ValueError: an edge references a nonexistent node, or a weight
                is negative.
        """
        n = len(self.nodes)
        for i, node in enumerate(self.nodes):
            if node.index != i:
                raise ValueError(f"node {node.name!r} has index {node.index}, expected {i}")
        for edge in self.edges:
            if not (0 <= edge.source < n and 0 <= edge.target < n):
                raise ValueError(f"dangling edge {edge.source} -> {edge.target} ({n} nodes)")
            if edge.weight < 0:
                raise ValueError(f"negative weight on edge {edge.source} -> {edge.target}")


# ---------------------------------------------------------------------------
# Centrality output types
# ---------------------------------------------------------------------------


@dataclass
class ShortestPaths:
    """Single-source shortest-path state used for dependency accumulation.

    Teams with equal records are joined by weight-0 edges, so several nodes
    can share one distance.  A shortest path may take at most one such
    zero-weight hop per distance level; arrivals are split accordingly.

    distance[v]         — shortest distance from source (inf if unreachable)
    sigma_direct[v]     — shortest paths reaching v over a positive edge
                          (1 for the source itself)
    sigma_tie[v]        — shortest paths reaching v by a zero-weight hop from
                          a direct arrival at the same distance
    predecessors[v]     — tail of each positive edge on a shortest path to v
    tie_predecessors[v] — tail of each zero-weight edge into v
    order               — settled nodes in non-decreasing distance

    A node appears in a predecessor list once per parallel edge.
    """

    source: int
    distance: np.ndarray
    sigma_direct: np.ndarray
    sigma_tie: np.ndarray
    predecessors: list[list[int]]
    tie_predecessors: list[list[int]]
    order: list[int]

    @property
    def sigma(self) -> np.ndarray:
        """Number of shortest paths from source to each node."""
        return self.sigma_direct + self.sigma_tie

    def levels(self) -> list[list[int]]:
        """Settled nodes grouped by equal distance, nearest group first."""
        groups: list[list[int]] = []
        last = None
        for v in self.order:
            d = self.distance[v]
            if last is None or abs(d - last) > 1e-12:
                groups.append([])
                last = d
            groups[-1].append(v)
        return groups

    @property
    def reachable(self) -> list[int]:
        """Nodes other than the source with a finite distance."""
        return [v for v in self.order if v != self.source]


@dataclass(frozen=True)
class TeamCentrality:
    """Betweenness centrality of a single team."""

    index: int
    name: str
    score: float


@dataclass
class CentralityRanking:
    """Betweenness scores for every team in a StandingsGraph.

    scores is the dense vector (position == node index); teams holds the
    same values paired with team names, in node order.
    """

    scores: np.ndarray
    teams: list[TeamCentrality]
    mode: str = "total"
    normalized: bool = False

    @property
    def ranked(self) -> list[TeamCentrality]:
        """Teams sorted by score, highest first.

        The sort is stable: teams with equal scores keep node order.
        """
        return sorted(self.teams, key=lambda t: t.score, reverse=True)

    def top(self, top_n: int = 5) -> list[TeamCentrality]:
        return self.ranked[:top_n]

    def to_df(self) -> pd.DataFrame:
        """Convert the ranking to a DataFrame.

        Columns: rank, index, team, score
        """
        import pandas as _pd

        rows = [
            {"rank": i, "index": t.index, "team": t.name, "score": t.score}
            for i, t in enumerate(self.ranked, 1)
        ]
        return _pd.DataFrame(rows, columns=["rank", "index", "team", "score"])


@dataclass(frozen=True)
class CentralityOptions:
    """Settings for a centrality run.

    mode:
        "total"  — textbook betweenness, dependencies summed over every source.
        "source" — entry v is the dependency accumulated at v while v itself
                   is the source.
    normalized: divide by (n−1)(n−2) so the directed maximum is 1.0.
    attribute:  StatRecord attribute used for edge weights.
    """

    mode: str = "total"
    normalized: bool = False
    attribute: str = "wins"


# Default options — used when no overrides are supplied.
DEFAULT_OPTIONS = CentralityOptions()
