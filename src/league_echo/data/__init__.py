"""Standings data loading."""

from league_echo.data.standings import (
    DEFAULT_COLUMNS,
    MalformedRowError,
    StandingsColumns,
    StandingsFormatError,
    load_standings,
    parse_record,
    read_standings,
)

__all__ = [
    "DEFAULT_COLUMNS",
    "MalformedRowError",
    "StandingsColumns",
    "StandingsFormatError",
    "load_standings",
    "parse_record",
    "read_standings",
]
