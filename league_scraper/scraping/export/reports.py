"""
JSON report builders for seasons and fixtures runs.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from league_scraper.domain.league_scraping import BatchSummary
from league_scraper.schemas.league_scraping import (
    BatchSummaryResponse,
    FixturesReportResponse,
    PerItemResultResponse,
    SeasonsReportResponse,
)
from league_scraper.scraping.config.models import CompetitionConfig


def utc_timestamp(moment: datetime | None = None) -> str:
    value = moment or datetime.now(timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()


def data_fields(records: Sequence[dict[str, Any]]) -> list[str]:
    """
    Union of record keys in first-seen order.
    """

    fields: dict[str, None] = {}
    for record in records:
        for key in record:
            fields.setdefault(key, None)
    return list(fields)


def build_seasons_report(
    *,
    competition: CompetitionConfig,
    seasons: Sequence[dict[str, Any]],
    source_url: str,
    timestamp: datetime | None = None,
) -> SeasonsReportResponse:
    return SeasonsReportResponse(
        timestamp=utc_timestamp(timestamp),
        source=competition.source,
        competition=competition.name,
        competition_id=competition.competition_id,
        country=competition.country,
        gender=competition.gender,
        source_url=source_url,
        seasons_count=len(seasons),
        data_fields=data_fields(seasons),
        seasons=[dict(record) for record in seasons],
    )


def build_fixtures_report(
    *,
    competition: CompetitionConfig,
    summary: BatchSummary,
    timestamp: datetime | None = None,
) -> FixturesReportResponse:
    return FixturesReportResponse(
        timestamp=utc_timestamp(timestamp),
        source=competition.source,
        competition=competition.name,
        competition_id=competition.competition_id,
        scraping_summary=BatchSummaryResponse(**summary.summary_dict()),
        seasons_fixtures=[
            PerItemResultResponse(**result.as_dict()) for result in summary.results
        ],
    )
