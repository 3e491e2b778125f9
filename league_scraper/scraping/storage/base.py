"""
Storage layer interfaces for scrape reports.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from league_scraper.domain.league_scraping import BatchSummary
from league_scraper.schemas.league_scraping import FixturesReportResponse, SeasonsReportResponse
from league_scraper.scraping.config.models import CompetitionConfig


class ReportStorage(ABC):
    """
    Storage abstraction for finished seasons and fixtures reports.
    """

    @abstractmethod
    def save_seasons(
        self,
        *,
        competition: CompetitionConfig,
        report: SeasonsReportResponse,
    ) -> list[str]:
        """
        Persist a seasons report and return the written locations.
        """

    @abstractmethod
    def save_fixtures(
        self,
        *,
        competition: CompetitionConfig,
        report: FixturesReportResponse,
        summary: BatchSummary,
    ) -> list[str]:
        """
        Persist a fixtures report and return the written locations.
        """
