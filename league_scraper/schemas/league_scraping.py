"""
league_scraper/schemas/league_scraping.py

Request, response and input-file schemas for league scraping.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SeasonEntry(BaseModel):
    """
    One season row of a seasons catalogue; extra scraped fields are kept.
    """

    model_config = ConfigDict(extra="allow")

    season: str = Field(..., min_length=1)
    season_url: str | None = None

    @field_validator("season")
    @classmethod
    def season_nonempty(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("season must be non-empty")
        return value.strip()


class SeasonsCatalogue(BaseModel):
    """
    Input catalogue: the `seasons` list of a seasons report.
    """

    model_config = ConfigDict(extra="allow")

    seasons: list[SeasonEntry]


class ScrapeSeasonsRequest(BaseModel):
    competition: str | None = Field(
        default=None,
        description="Configured competition key/id or an FBref history URL.",
    )
    save_to_file: bool = True


class ScrapeFixturesRequest(BaseModel):
    competition: str | None = None
    max_concurrent: int = Field(default=2, ge=1)
    only_seasons: list[str] | None = None
    start_from_season: str | None = None
    save_to_file: bool = True
    catalogue_path: str | None = None


class CompetitionResponse(BaseModel):
    key: str
    competition_id: str
    name: str
    slug: str
    country: str | None = None
    gender: str | None = None
    history_url: str


class PerItemResultResponse(BaseModel):
    key: str
    source_url: str
    record_count: int = Field(..., ge=0)
    records: list[dict[str, Any]] = Field(default_factory=list)
    status: Literal["success", "no_data", "error"]
    error: str | None = None
    attempts: int = Field(default=0, ge=0)


class BatchSummaryResponse(BaseModel):
    total_processed: int = Field(..., ge=0)
    successful: int = Field(..., ge=0)
    failed: int = Field(..., ge=0)
    total_records: int = Field(..., ge=0)
    status_counts: dict[str, int] = Field(default_factory=dict)
    processing_options: dict[str, Any] = Field(default_factory=dict)


class SeasonsReportResponse(BaseModel):
    timestamp: str
    source: str
    competition: str
    competition_id: str
    country: str | None = None
    gender: str | None = None
    source_url: str
    seasons_count: int = Field(..., ge=0)
    data_fields: list[str] = Field(default_factory=list)
    seasons: list[dict[str, Any]] = Field(default_factory=list)


class FixturesReportResponse(BaseModel):
    timestamp: str
    source: str
    competition: str
    competition_id: str
    scraping_summary: BatchSummaryResponse
    seasons_fixtures: list[PerItemResultResponse] = Field(default_factory=list)
