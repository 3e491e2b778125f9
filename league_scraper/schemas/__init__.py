"""
league_scraper/schemas package marker.
"""

from league_scraper.schemas.league_scraping import (
    BatchSummaryResponse,
    CompetitionResponse,
    FixturesReportResponse,
    PerItemResultResponse,
    ScrapeFixturesRequest,
    ScrapeSeasonsRequest,
    SeasonEntry,
    SeasonsCatalogue,
    SeasonsReportResponse,
)

__all__ = [
    "BatchSummaryResponse",
    "CompetitionResponse",
    "FixturesReportResponse",
    "PerItemResultResponse",
    "ScrapeFixturesRequest",
    "ScrapeSeasonsRequest",
    "SeasonEntry",
    "SeasonsCatalogue",
    "SeasonsReportResponse",
]
