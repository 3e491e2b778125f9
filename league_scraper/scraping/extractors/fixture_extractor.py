"""
Extractor for scores-and-fixtures tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from league_scraper.scraping.extractors.base import TableExtractor
from league_scraper.scraping.parsing.table_locator import FIXTURES_PROFILE

IDENTITY_FIELDS = ("date", "home_team", "away_team")


def derive_outcome(record: dict[str, Any]) -> dict[str, Any]:
    """
    Set `status` and `result` from the integer scores on a fixture record.
    """

    for side in ("home_score", "away_score"):
        value = record.get(side)
        if value is not None and not isinstance(value, int):
            record[f"{side}_raw"] = record.pop(side)

    home = record.get("home_score")
    away = record.get("away_score")
    record.pop("result", None)
    if isinstance(home, int) and isinstance(away, int):
        record["status"] = "completed"
        if home > away:
            record["result"] = "home_win"
        elif away > home:
            record["result"] = "away_win"
        else:
            record["result"] = "draw"
    else:
        record["status"] = "scheduled"
    return record


class FixtureExtractor(TableExtractor):
    profile = FIXTURES_PROFILE

    def is_identity_row(self, record: Mapping[str, Any]) -> bool:
        return any(record.get(field) for field in IDENTITY_FIELDS)

    def post_process(self, record: dict[str, Any]) -> dict[str, Any]:
        return derive_outcome(super().post_process(record))
