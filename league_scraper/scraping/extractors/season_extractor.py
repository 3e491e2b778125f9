"""
Extractor for competition history (seasons) tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from league_scraper.scraping.extractors.base import TableExtractor
from league_scraper.scraping.parsing.table_locator import SEASONS_PROFILE


class SeasonExtractor(TableExtractor):
    """
    One record per season row; season ids are unique within a result set.
    """

    profile = SEASONS_PROFILE

    def is_identity_row(self, record: Mapping[str, Any]) -> bool:
        season = record.get("season")
        return isinstance(season, str) and bool(season.strip()) and season != "Season"

    def finalize(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        seen: set[str] = set()
        unique: list[dict[str, Any]] = []
        for record in records:
            if record["season"] in seen:
                continue
            seen.add(record["season"])
            unique.append(record)
        return unique
