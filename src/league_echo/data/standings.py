"""
Project: LeagueEcho
Author: Xingnan Zhu
File Name: data/standings.py
Description:
    Standings table loading.
    Parses a delimited standings file (one row per team-season) into
    StatRecord objects.  Columns are matched by header name, so their
    order in the file does not matter.

    A missing file or a header without the required columns aborts the
    load.  Individual malformed rows are logged and skipped.
"""

from __future__ import annotations

import csv
import logging
import math
from dataclasses import dataclass, fields
from pathlib import Path

from league_echo.core.models import StatRecord

logger = logging.getLogger(__name__)


class StandingsFormatError(ValueError):
    """The standings file cannot be used at all (e.g. a required column is missing)."""


class MalformedRowError(ValueError):
    """A single standings row could not be parsed."""


@dataclass(frozen=True)
class StandingsColumns:
    """Header names for each StatRecord field.

    Defaults match the reference EPL standings export.
    """

    team: str = "Team"
    wins: str = "W"
    losses: str = "L"
    goals_for: str = "GF"
    season: str = "Season"

    def required(self) -> list[str]:
        return [getattr(self, f.name) for f in fields(self)]


DEFAULT_COLUMNS = StandingsColumns()


def parse_record(
    row: dict[str | None, str | None],
    columns: StandingsColumns = DEFAULT_COLUMNS,
) -> StatRecord:
    """Convert one csv.DictReader row into a StatRecord.

    Raises:
        MalformedRowError: wrong field count, empty team name, or a
            non-numeric value in a numeric column.
    """
    # DictReader stores surplus fields under None and pads short rows with None.
    if None in row:
        raise MalformedRowError(f"unexpected extra fields {row[None]!r}")
    if any(value is None for value in row.values()):
        raise MalformedRowError("too few fields")

    team = (row[columns.team] or "").strip()
    if not team:
        raise MalformedRowError("empty team name")

    numeric: dict[str, float] = {}
    for attr in ("wins", "losses", "goals_for"):
        raw = row[getattr(columns, attr)]
        try:
            numeric[attr] = float(raw)
        except (TypeError, ValueError):
            raise MalformedRowError(
                f"non-numeric {getattr(columns, attr)!r} value: {raw!r}"
            ) from None
        if not math.isfinite(numeric[attr]):
            raise MalformedRowError(
                f"non-finite {getattr(columns, attr)!r} value: {raw!r}"
            )

    return StatRecord(
        team=team,
        season=(row[columns.season] or "").strip(),
        **numeric,
    )


def read_standings(
    lines,
    columns: StandingsColumns = DEFAULT_COLUMNS,
    *,
    source: str = "<stream>",
) -> list[StatRecord]:
    """Parse standings rows from an iterable of text lines (e.g. an open file)."""
    reader = csv.DictReader(lines)
    header = reader.fieldnames or []
    missing = [name for name in columns.required() if name not in header]
    if missing:
        raise StandingsFormatError(
            f"{source}: missing required column(s) {missing}; header is {header}"
        )

    records: list[StatRecord] = []
    skipped = 0
    try:
        for row in reader:
            try:
                records.append(parse_record(row, columns))
            except MalformedRowError as exc:
                skipped += 1
                logger.warning("Skipping %s line %d: %s", source, reader.line_num, exc)
    except csv.Error as exc:
        raise StandingsFormatError(f"{source} line {reader.line_num}: {exc}") from exc

    logger.info(
        "Loaded %d standings rows from %s (%d skipped)", len(records), source, skipped
    )
    return records


def load_standings(
    csv_path: str | Path,
    columns: StandingsColumns = DEFAULT_COLUMNS,
) -> list[StatRecord]:
    """Load a standings CSV file into StatRecord rows.

    Args:
        csv_path: Path to a delimited file with a header row.
        columns: Header names for each field.

    Returns:
        Parsed rows in file order.  Malformed rows are skipped.

    Raises:
        OSError: the file is missing or unreadable.
        StandingsFormatError: the header lacks a required column, the file
            is not valid UTF-8, or the CSV structure itself is broken.
    """
    path = Path(csv_path)
    try:
        with path.open("r", encoding="utf-8", newline="") as f:
            return read_standings(f, columns, source=str(path))
    except UnicodeDecodeError as exc:
        raise StandingsFormatError(
            f"{path}: not valid UTF-8 (byte {exc.object[exc.start]:#04x} at offset {exc.start})"
        ) from exc
