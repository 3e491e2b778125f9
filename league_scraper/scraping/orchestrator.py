"""
Chunked, retrying batch runner for page extraction.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from league_scraper.scraping.errors import NavigationError, NoTableFoundError
from league_scraper.scraping.logging_utils import log_event
from league_scraper.scraping.parsing.document import HtmlDocument
from league_scraper.scraping.rendering.base import PageRenderer, RenderSession
from league_scraper.scraping.types import (
    STATUS_ERROR,
    STATUS_NO_DATA,
    STATUS_SUCCESS,
    BatchOptions,
    PerItemResult,
    WorkItem,
)

logger = logging.getLogger(__name__)

Extractor = Callable[[WorkItem, HtmlDocument], list[dict[str, Any]]]
Sleep = Callable[[float], Awaitable[Any]]


def plan_chunks(items: Sequence[WorkItem], size: int) -> list[list[WorkItem]]:
    """
    Split items into consecutive chunks of at most `size`.
    """

    if size < 1:
        raise ValueError("chunk size must be >= 1")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


class BatchOrchestrator:
    """
    Runs extraction over work items in sequential chunks of concurrent tasks.

    Every input item yields exactly one result, in input order. Item-level
    failures are recorded on that item's result and never abort the batch.
    """

    def __init__(
        self,
        *,
        renderer: PageRenderer,
        options: BatchOptions,
        sleep: Sleep = asyncio.sleep,
    ) -> None:
        self._renderer = renderer
        self._options = options
        self._sleep = sleep

    @property
    def options(self) -> BatchOptions:
        return self._options

    async def run(self, items: Sequence[WorkItem], extractor: Extractor) -> list[PerItemResult]:
        chunks = plan_chunks(items, self._options.max_concurrent)
        results: list[PerItemResult] = []

        for index, chunk in enumerate(chunks, start=1):
            log_event(
                logger,
                logging.INFO,
                "batch_started",
                batch=index,
                batches=len(chunks),
                keys=[item.key for item in chunk],
            )
            chunk_results = await asyncio.gather(
                *(self._process_item(item, extractor) for item in chunk)
            )
            results.extend(chunk_results)

            if index < len(chunks) and self._options.inter_batch_delay_ms > 0:
                log_event(
                    logger,
                    logging.INFO,
                    "batch_throttle",
                    batch=index,
                    delay_ms=self._options.inter_batch_delay_ms,
                )
                await self._sleep(self._options.inter_batch_delay_ms / 1000)

        return results

    async def _process_item(self, item: WorkItem, extractor: Extractor) -> PerItemResult:
        attempts = 0
        try:
            async with self._renderer.session() as session:
                document, attempts, last_error = await self._render_with_retry(session, item)
                if document is None:
                    log_event(
                        logger,
                        logging.ERROR,
                        "item_failed",
                        key=item.key,
                        source_url=item.url,
                        attempts=attempts,
                        error=last_error,
                    )
                    return PerItemResult(
                        key=item.key,
                        source_url=item.url,
                        status=STATUS_ERROR,
                        error=last_error,
                        attempts=attempts,
                    )
                return self._extract(item, document, extractor, attempts)
        except Exception as exc:
            # Session acquisition/release or extraction bugs still yield a result.
            log_event(
                logger,
                logging.ERROR,
                "item_failed",
                key=item.key,
                source_url=item.url,
                attempts=attempts,
                error=str(exc),
            )
            return PerItemResult(
                key=item.key,
                source_url=item.url,
                status=STATUS_ERROR,
                error=f"{type(exc).__name__}: {exc}",
                attempts=attempts,
            )

    async def _render_with_retry(
        self,
        session: RenderSession,
        item: WorkItem,
    ) -> tuple[HtmlDocument | None, int, str | None]:
        timeout_ms = self._options.per_request_timeout_ms
        # Outer bound; navigation itself is limited to timeout_ms by the renderer.
        outer_timeout_s = (timeout_ms * 2 + session.extra_wait_ms) / 1000
        last_error: str | None = None

        for attempt in range(1, self._options.retry_count + 1):
            try:
                document = await asyncio.wait_for(
                    session.render(item.url, timeout_ms=timeout_ms),
                    timeout=outer_timeout_s,
                )
                return document, attempt, None
            except (NavigationError, asyncio.TimeoutError) as exc:
                last_error = str(exc) or f"Timed out rendering {item.url}"

            log_event(
                logger,
                logging.WARNING,
                "render_attempt_failed",
                key=item.key,
                attempt=attempt,
                attempts_allowed=self._options.retry_count,
                error=last_error,
            )
            if attempt < self._options.retry_count and self._options.retry_delay_ms > 0:
                await self._sleep(self._options.retry_delay_ms / 1000)

        return None, self._options.retry_count, last_error

    @staticmethod
    def _extract(
        item: WorkItem,
        document: HtmlDocument,
        extractor: Extractor,
        attempts: int,
    ) -> PerItemResult:
        if document.is_not_found:
            log_event(logger, logging.WARNING, "item_no_data", key=item.key, reason="page_not_found")
            return PerItemResult(
                key=item.key,
                source_url=item.url,
                status=STATUS_NO_DATA,
                error="Page not found or no data available",
                attempts=attempts,
            )

        try:
            records = extractor(item, document)
        except NoTableFoundError as exc:
            log_event(logger, logging.WARNING, "item_no_data", key=item.key, reason=str(exc))
            return PerItemResult(
                key=item.key,
                source_url=item.url,
                status=STATUS_NO_DATA,
                error=str(exc),
                attempts=attempts,
            )

        log_event(
            logger,
            logging.INFO,
            "item_completed",
            key=item.key,
            records=len(records),
            attempts=attempts,
        )
        return PerItemResult(
            key=item.key,
            source_url=item.url,
            status=STATUS_SUCCESS,
            records=tuple(records),
            attempts=attempts,
        )
