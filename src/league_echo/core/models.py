"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: core/models.py
Description:
    Core data models shared across all LeagueEcho modules.
    A StatRecord is one row of a standings table: a team's results for a
    single season.  Records only live long enough to build a graph.
"""

from __future__ import annotations

from dataclasses import dataclass

# Attributes a StatRecord can be compared on when weighting edges.
NUMERIC_ATTRIBUTES = ("wins", "losses", "goals_for")


@dataclass(frozen=True)
class StatRecord:
    """One team-season row from a standings table."""

    team: str
    wins: float
    losses: float
    goals_for: float
    season: str

    def edge_weight(self, other: StatRecord, attribute: str = "wins") -> int:
        """Distance between two records on a single attribute.

        |self.attribute − other.attribute|, truncated toward zero.
        """
        if attribute not in NUMERIC_ATTRIBUTES:
            raise ValueError(
                f"Unknown attribute {attribute!r}; expected one of {NUMERIC_ATTRIBUTES}"
            )
        return int(abs(getattr(self, attribute) - getattr(other, attribute)))
