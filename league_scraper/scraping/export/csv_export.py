"""
Flat CSV projection of normalized season and fixture records.

Column order is fixed per record type. Missing values are empty strings;
values holding a delimiter, quote or line break are quoted with internal
quotes doubled, so a standard CSV reader gets the original text back.
"""

from __future__ import annotations

import io
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from league_scraper.scraping.types import PerItemResult

SEASON_COLUMNS: tuple[str, ...] = (
    "season",
    "competition",
    "squads",
    "champion",
    "champion_points",
    "top_scorer",
    "season_url",
    "champion_url",
    "top_scorer_url",
    "country",
    "gender",
)

FIXTURE_COLUMNS: tuple[str, ...] = (
    "season",
    "gameweek",
    "date",
    "day_of_week",
    "start_time",
    "home_team",
    "away_team",
    "home_score",
    "away_score",
    "score",
    "home_xg",
    "away_xg",
    "venue",
    "attendance",
    "referee",
    "status",
    "result",
    "home_team_url",
    "away_team_url",
    "match_report_url",
)

SUMMARY_COLUMNS: tuple[str, ...] = ("key", "record_count", "status", "source_url")

# Cup competitions label rounds instead of gameweeks.
COLUMN_FALLBACKS: dict[str, tuple[str, ...]] = {"gameweek": ("round",)}

_QUOTE_TRIGGERS = (",", '"', "\r", "\n")


def _cell(record: Mapping[str, Any], column: str) -> Any:
    value = record.get(column)
    if value is None:
        for fallback in COLUMN_FALLBACKS.get(column, ()):
            value = record.get(fallback)
            if value is not None:
                break
    return "" if value is None else value


def _format_cell(value: Any) -> str:
    # A bare "\r" is quoted too, on every interpreter.
    text = str(value)
    if any(char in text for char in _QUOTE_TRIGGERS):
        return '"' + text.replace('"', '""') + '"'
    return text


def _format_row(values: Sequence[Any]) -> str:
    if len(values) == 1 and values[0] == "":
        return '""\n'
    return ",".join(_format_cell(value) for value in values) + "\n"


def records_to_csv(records: Iterable[Mapping[str, Any]], columns: Sequence[str]) -> str:
    buf = io.StringIO()
    buf.write(_format_row(list(columns)))
    for record in records:
        buf.write(_format_row([_cell(record, column) for column in columns]))
    return buf.getvalue()


def seasons_to_csv(seasons: Iterable[Mapping[str, Any]]) -> str:
    return records_to_csv(seasons, SEASON_COLUMNS)


def fixtures_to_csv(results: Iterable[PerItemResult]) -> str:
    """
    All fixtures of all items; the item key fills `season` when absent.
    """

    rows: list[dict[str, Any]] = []
    for result in results:
        for record in result.records:
            row = dict(record)
            row.setdefault("season", result.key)
            rows.append(row)
    return records_to_csv(rows, FIXTURE_COLUMNS)


def summary_to_csv(results: Iterable[PerItemResult]) -> str:
    return records_to_csv(
        (
            {
                "key": result.key,
                "record_count": result.record_count,
                "status": result.status,
                "source_url": result.source_url,
            }
            for result in results
        ),
        SUMMARY_COLUMNS,
    )
