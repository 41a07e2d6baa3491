"""Core data models shared across LeagueEcho modules."""

from league_echo.core.models import NUMERIC_ATTRIBUTES, StatRecord

__all__ = ["NUMERIC_ATTRIBUTES", "StatRecord"]
