"""
league_scraper/services/league_scraping_service.py

Service orchestration for league seasons and fixtures scraping.
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from functools import lru_cache

from league_scraper.config import ScrapingSettings, get_scraping_settings
from league_scraper.domain.league_scraping import RunOptions, ScrapeRun
from league_scraper.scraping.catalogue import find_latest_catalogue, load_seasons_catalogue
from league_scraper.scraping.config import load_competition_configs, resolve_competition
from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.engine import LeagueScrapingEngine
from league_scraper.scraping.rendering import PageRenderer, StaticPageRenderer
from league_scraper.scraping.storage import FileReportStorage
from league_scraper.scraping.types import BatchOptions


def build_renderer(settings: ScrapingSettings) -> PageRenderer:
    """
    Build the page renderer named by settings.
    """

    if settings.renderer == "static":
        return StaticPageRenderer(user_agent=settings.user_agent)

    # Imported lazily so the static renderer works without browser binaries.
    from league_scraper.scraping.rendering.playwright_renderer import PlaywrightPageRenderer

    return PlaywrightPageRenderer(
        user_agent=settings.user_agent,
        headless=settings.headless,
        channel=settings.browser_channel,
        load_state_timeout_ms=settings.load_state_timeout_ms,
        settle_wait_ms=settings.settle_wait_ms,
    )


def build_batch_options(settings: ScrapingSettings) -> BatchOptions:
    return BatchOptions(
        max_concurrent=settings.max_concurrent,
        inter_batch_delay_ms=settings.inter_batch_delay_ms,
        retry_count=settings.retry_count,
        retry_delay_ms=settings.retry_delay_ms,
        per_request_timeout_ms=settings.per_request_timeout_ms,
    )


class LeagueScrapingService:
    """
    Runs seasons and fixtures scrapes for configured competitions.
    """

    def __init__(
        self,
        *,
        settings: ScrapingSettings | None = None,
        renderer: PageRenderer | None = None,
    ) -> None:
        self._settings = settings or get_scraping_settings()
        self._renderer = renderer

    def list_competitions(self) -> list[CompetitionConfig]:
        configs = load_competition_configs(config_path=self._settings.competitions_path)
        return [config for config in configs if config.enabled]

    def resolve_competition(self, reference: str | None = None) -> CompetitionConfig:
        configs = load_competition_configs(config_path=self._settings.competitions_path)
        return resolve_competition(
            reference or self._settings.default_competition,
            configs=configs,
        )

    def scrape_seasons(
        self,
        *,
        competition: str | None = None,
        save_to_file: bool = True,
    ) -> ScrapeRun:
        target = self.resolve_competition(competition)
        engine = self._build_engine()
        return asyncio.run(engine.scrape_seasons(target, save_to_file=save_to_file))

    def scrape_fixtures(
        self,
        *,
        competition: str | None = None,
        max_concurrent: int | None = None,
        only_seasons: Sequence[str] | None = None,
        start_from_season: str | None = None,
        save_to_file: bool = True,
        catalogue_path: str | None = None,
    ) -> ScrapeRun:
        target = self.resolve_competition(competition)
        path = catalogue_path or find_latest_catalogue(self._settings.data_dir, target)
        catalogue = load_seasons_catalogue(path)
        options = RunOptions(
            max_concurrent=max_concurrent or self._settings.max_concurrent,
            only_seasons=tuple(only_seasons) if only_seasons is not None else None,
            start_from_season=start_from_season,
            save_to_file=save_to_file,
        )
        engine = self._build_engine()
        return asyncio.run(engine.scrape_fixtures(target, catalogue.seasons, options))

    def _build_engine(self) -> LeagueScrapingEngine:
        return LeagueScrapingEngine(
            renderer=self._renderer or build_renderer(self._settings),
            batch_options=build_batch_options(self._settings),
            storage=FileReportStorage(output_dir=self._settings.output_dir),
        )


@lru_cache(maxsize=1)
def get_league_scraping_service() -> LeagueScrapingService:
    """
    Build and cache league scraping service.
    """

    return LeagueScrapingService()
