"""Visualization — Plotly standings network figure."""

from league_echo.viz.plotly_network import build_network_figure, circular_layout

__all__ = ["build_network_figure", "circular_layout"]
