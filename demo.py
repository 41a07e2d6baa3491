"""LeagueEcho Demo — rank a small league by betweenness centrality.

Usage:
    uv run python demo.py
"""

import io

from league_echo.data.standings import read_standings
from league_echo.network.builder import build_standings_graph
from league_echo.network.metrics import compute_centrality

SAMPLE = """Team,W,L,GF,Season
TeamA,10,5,30,2022
TeamB,8,7,25,2022
TeamC,12,3,35,2022
TeamD,7,8,20,2022
"""


def main():
    records = read_standings(io.StringIO(SAMPLE), source="sample")
    print(f"Rows loaded: {len(records)}")

    graph = build_standings_graph(records)
    print(f"Graph: {graph.node_count} teams, {graph.edge_count} edges\n")

    for edge in graph.out_edges(0):
        print(f"  {graph.node(edge.source).name} -> {graph.node(edge.target).name}: {edge.weight}")

    for mode in ("total", "source"):
        ranking = compute_centrality(graph, mode=mode)
        print("\n" + "=" * 40)
        print(f"BETWEENNESS ({mode})")
        print("=" * 40)
        for i, team in enumerate(ranking.ranked, 1):
            print(f"  {i}. {team.name:<10} {team.score:.4f}")


if __name__ == "__main__":
    main()
