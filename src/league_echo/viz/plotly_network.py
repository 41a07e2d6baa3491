"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: viz/plotly_network.py
Description:
    Plotly-based standings network visualization.

    Renders the standings graph on a circle (node order = index order):
      - Undirected edges: one line per team pair, drawn only when the
        lightest edge weight is <= max_edge_weight (close records)
      - Nodes: size and colour ∝ betweenness centrality, when a ranking
        is provided

    Usage:
        fig = build_network_figure(graph)                    # plain
        fig = build_network_figure(graph, ranking)           # coloured
        fig.write_html("network.html")
"""

from __future__ import annotations

import numpy as np
import plotly.graph_objects as go

from league_echo.network.models import CentralityRanking, StandingsGraph

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

_BG_COLOR = "#10192b"
_EDGE_COLOR = "rgba(255, 255, 255, 0.25)"
_NODE_DEFAULT_COLOR = "#3498db"
_NODE_BORDER_COLOR = "rgba(255, 255, 255, 0.9)"
_NODE_BORDER_WIDTH = 2

# Dark blue → medium blue → gold
_METRIC_COLORSCALE = [
    [0.0, "#1a3a6b"],
    [0.5, "#4a90d9"],
    [1.0, "#e8b838"],
]

# Node size range (pixels)
_NODE_MIN_SIZE = 14.0
_NODE_MAX_SIZE = 40.0


def circular_layout(n: int) -> np.ndarray:
    """n × 2 array of positions on the unit circle, first node at the top."""
    angles = np.pi / 2 - 2 * np.pi * np.arange(n) / max(n, 1)
    return np.column_stack([np.cos(angles), np.sin(angles)])


def build_network_figure(
    graph: StandingsGraph,
    ranking: CentralityRanking | None = None,
    *,
    max_edge_weight: int | None = 2,
    title: str | None = None,
) -> go.Figure:
    """Build an interactive Plotly figure of the standings graph.

    Args:
        graph: StandingsGraph built by build_standings_graph().
        ranking: Optional CentralityRanking.  If None, all nodes share one
            size and colour.
        max_edge_weight: Only pairs whose lightest edge weight is at most
            this value are drawn.  None draws every pair.
        title: Optional figure title.

    Returns:
        A Plotly Figure ready for fig.show() or fig.write_html().
    """
    fig = go.Figure()
    fig.update_layout(
        plot_bgcolor=_BG_COLOR,
        paper_bgcolor=_BG_COLOR,
        xaxis=dict(visible=False, range=[-1.3, 1.3]),
        yaxis=dict(visible=False, range=[-1.3, 1.3], scaleanchor="x"),
        autosize=True,
        margin=dict(l=10, r=60, t=55, b=10),
    )
    _apply_title(fig, title)

    n = graph.node_count
    if n == 0:
        return fig

    pos = circular_layout(n)

    # ------------------------------------------------------------------ #
    # Step 1 — Collapse directed edges to one weight per team pair        #
    # ------------------------------------------------------------------ #
    weights = graph.weight_matrix()
    pair_weight = np.minimum(weights, weights.T)

    # ------------------------------------------------------------------ #
    # Step 2 — Draw edges (single trace, None-separated segments)         #
    # ------------------------------------------------------------------ #
    edge_x: list[float | None] = []
    edge_y: list[float | None] = []
    for a in range(n):
        for b in range(a + 1, n):
            w = pair_weight[a, b]
            if not np.isfinite(w):
                continue
            if max_edge_weight is not None and w > max_edge_weight:
                continue
            edge_x += [pos[a, 0], pos[b, 0], None]
            edge_y += [pos[a, 1], pos[b, 1], None]

    if edge_x:
        fig.add_trace(
            go.Scatter(
                x=edge_x,
                y=edge_y,
                mode="lines",
                line=dict(color=_EDGE_COLOR, width=1.5),
                hoverinfo="skip",
                showlegend=False,
            )
        )

    # ------------------------------------------------------------------ #
    # Step 3 — Nodes                                                      #
    # ------------------------------------------------------------------ #
    names = graph.names
    if ranking is None:
        marker = dict(
            size=_NODE_MIN_SIZE,
            color=_NODE_DEFAULT_COLOR,
            line=dict(color=_NODE_BORDER_COLOR, width=_NODE_BORDER_WIDTH),
        )
        hover = names
    else:
        scores = np.asarray(ranking.scores, dtype=float)
        top = scores.max() if scores.size and scores.max() > 0 else 1.0
        rel = scores / top
        marker = dict(
            size=_NODE_MIN_SIZE + rel * (_NODE_MAX_SIZE - _NODE_MIN_SIZE),
            color=rel,
            colorscale=_METRIC_COLORSCALE,
            cmin=0.0,
            cmax=1.0,
            colorbar=dict(
                title=dict(
                    text="Betweenness",
                    side="right",
                    font=dict(color="rgba(255,255,255,0.8)", size=11),
                ),
                tickfont=dict(color="rgba(255,255,255,0.7)", size=9),
                thickness=12,
                len=0.6,
            ),
            line=dict(color=_NODE_BORDER_COLOR, width=_NODE_BORDER_WIDTH),
            showscale=True,
        )
        hover = [
            f"<b>{name}</b><br>Betweenness: {score:.4f}"
            for name, score in zip(names, scores)
        ]

    fig.add_trace(
        go.Scatter(
            x=pos[:, 0],
            y=pos[:, 1],
            mode="markers+text",
            marker=marker,
            text=names,
            textfont=dict(color="white", size=10),
            textposition="top center",
            hovertext=hover,
            hoverinfo="text",
            showlegend=False,
        )
    )
    return fig


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _apply_title(fig: go.Figure, title: str | None) -> None:
    if title:
        fig.update_layout(
            title=dict(
                text=title,
                font=dict(color="rgba(255,255,255,0.9)", size=14),
                x=0.5,
                xanchor="center",
            )
        )
