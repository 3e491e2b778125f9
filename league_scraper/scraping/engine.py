"""
League scraping engine.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import replace
from datetime import datetime

from league_scraper.domain.league_scraping import RunOptions, ScrapeRun
from league_scraper.schemas.league_scraping import SeasonEntry
from league_scraper.scraping.aggregator import aggregate_results
from league_scraper.scraping.catalogue import select_seasons
from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.errors import ScrapingError
from league_scraper.scraping.export.reports import build_fixtures_report, build_seasons_report
from league_scraper.scraping.extractors import FixtureExtractor, SeasonExtractor
from league_scraper.scraping.logging_utils import log_event
from league_scraper.scraping.orchestrator import BatchOrchestrator, Sleep
from league_scraper.scraping.rendering.base import PageRenderer
from league_scraper.scraping.storage import ReportStorage
from league_scraper.scraping.types import STATUS_SUCCESS, BatchOptions, WorkItem
from league_scraper.scraping.url_resolver import resolve_fixtures_url

logger = logging.getLogger(__name__)

SEASONS_ITEM_KEY = "seasons"


class LeagueScrapingEngine:
    """
    Wires URL resolution, batch orchestration, extraction and reporting.

    The renderer is started on entry to each run and closed when the run
    ends, whatever the outcome.
    """

    def __init__(
        self,
        *,
        renderer: PageRenderer,
        batch_options: BatchOptions,
        storage: ReportStorage | None = None,
        sleep: Sleep = asyncio.sleep,
        clock: datetime | None = None,
    ) -> None:
        self._renderer = renderer
        self._batch_options = batch_options
        self._storage = storage
        self._sleep = sleep
        self._clock = clock

    async def scrape_seasons(
        self,
        competition: CompetitionConfig,
        *,
        save_to_file: bool = True,
    ) -> ScrapeRun:
        extractor = SeasonExtractor(context=competition.record_context())
        item = WorkItem(key=SEASONS_ITEM_KEY, url=competition.history_url)
        orchestrator = BatchOrchestrator(
            renderer=self._renderer,
            options=replace(self._batch_options, max_concurrent=1),
            sleep=self._sleep,
        )

        async with self._renderer:
            results = await orchestrator.run(
                [item],
                lambda _item, document: extractor.extract_document(document),
            )

        summary = aggregate_results(results, options=self._batch_options.as_dict())
        result = results[0]
        if result.status != STATUS_SUCCESS:
            raise ScrapingError(
                f"Seasons page for {competition.name} returned {result.status}: "
                f"{result.error or 'no records'}"
            )

        report = build_seasons_report(
            competition=competition,
            seasons=list(result.records),
            source_url=item.url,
            timestamp=self._clock,
        )
        files: list[str] = []
        if save_to_file and self._storage is not None:
            files = self._storage.save_seasons(competition=competition, report=report)

        log_event(
            logger,
            logging.INFO,
            "seasons_scrape_completed",
            competition=competition.name,
            seasons=report.seasons_count,
        )
        return ScrapeRun(report=report, summary=summary, files=tuple(files))

    async def scrape_fixtures(
        self,
        competition: CompetitionConfig,
        seasons: Sequence[SeasonEntry],
        options: RunOptions,
    ) -> ScrapeRun:
        selected = select_seasons(
            seasons,
            only_seasons=options.only_seasons,
            start_from_season=options.start_from_season,
        )
        # Resolve every URL first so a bad catalogue aborts before any page loads.
        items = [
            WorkItem(
                key=entry.season,
                url=resolve_fixtures_url(entry.season, entry.season_url, competition),
            )
            for entry in selected
        ]
        extractors = {
            item.key: FixtureExtractor(context={**competition.record_context(), "season": item.key})
            for item in items
        }

        batch_options = replace(self._batch_options, max_concurrent=options.max_concurrent)
        orchestrator = BatchOrchestrator(
            renderer=self._renderer,
            options=batch_options,
            sleep=self._sleep,
        )
        log_event(
            logger,
            logging.INFO,
            "fixtures_scrape_started",
            competition=competition.name,
            seasons=[item.key for item in items],
            max_concurrent=batch_options.max_concurrent,
        )

        if items:
            async with self._renderer:
                results = await orchestrator.run(
                    items,
                    lambda item, document: extractors[item.key].extract_document(document),
                )
        else:
            log_event(logger, logging.WARNING, "no_seasons_selected", competition=competition.name)
            results = []

        summary = aggregate_results(
            results,
            options={**batch_options.as_dict(), **options.as_dict()},
        )
        report = build_fixtures_report(
            competition=competition,
            summary=summary,
            timestamp=self._clock,
        )
        files: list[str] = []
        if options.save_to_file and self._storage is not None:
            files = self._storage.save_fixtures(
                competition=competition,
                report=report,
                summary=summary,
            )

        log_event(
            logger,
            logging.INFO,
            "fixtures_scrape_completed",
            competition=competition.name,
            total_processed=summary.total_processed,
            successful=summary.successful,
            failed=summary.failed,
            total_records=summary.total_records,
        )
        return ScrapeRun(report=report, summary=summary, files=tuple(files))
