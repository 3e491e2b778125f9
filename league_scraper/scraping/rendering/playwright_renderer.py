"""
Headless-browser renderer backed by Playwright.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from playwright.async_api import Browser, Page, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from league_scraper.scraping.errors import NavigationError
from league_scraper.scraping.logging_utils import log_event
from league_scraper.scraping.parsing.document import HtmlDocument
from league_scraper.scraping.rendering.base import PageRenderer, RenderSession

logger = logging.getLogger(__name__)


class PlaywrightRenderSession(RenderSession):
    def __init__(self, *, page: Page, load_state_timeout_ms: int, settle_wait_ms: int) -> None:
        self._page = page
        self._load_state_timeout_ms = load_state_timeout_ms
        self._settle_wait_ms = settle_wait_ms

    @property
    def extra_wait_ms(self) -> int:
        return self._load_state_timeout_ms + self._settle_wait_ms

    async def render(self, url: str, *, timeout_ms: int) -> HtmlDocument:
        try:
            response = await self._page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
        except PlaywrightTimeoutError as exc:
            raise NavigationError(f"Timed out after {timeout_ms}ms navigating to {url}") from exc
        except PlaywrightError as exc:
            raise NavigationError(f"Navigation to {url} failed: {exc}") from exc

        if self._load_state_timeout_ms:
            try:
                await self._page.wait_for_load_state(
                    "networkidle",
                    timeout=self._load_state_timeout_ms,
                )
            except PlaywrightTimeoutError:
                log_event(
                    logger,
                    logging.WARNING,
                    "load_state_timeout",
                    page_url=url,
                    timeout_ms=self._load_state_timeout_ms,
                )
            except PlaywrightError as exc:
                raise NavigationError(f"Waiting for {url} to load failed: {exc}") from exc

        if self._settle_wait_ms:
            await asyncio.sleep(self._settle_wait_ms / 1000)

        try:
            html = await self._page.content()
        except PlaywrightError as exc:
            raise NavigationError(f"Reading content of {url} failed: {exc}") from exc
        return HtmlDocument.from_html(
            html,
            url=self._page.url,
            status_code=response.status if response is not None else None,
        )


class PlaywrightPageRenderer(PageRenderer):
    """
    One browser shared read-only; one browser context per session.
    """

    def __init__(
        self,
        *,
        user_agent: str,
        headless: bool = True,
        channel: str | None = None,
        load_state_timeout_ms: int = 30_000,
        settle_wait_ms: int = 10_000,
        viewport: tuple[int, int] = (1920, 1080),
    ) -> None:
        self._user_agent = user_agent
        self._headless = headless
        self._channel = channel
        self._load_state_timeout_ms = load_state_timeout_ms
        self._settle_wait_ms = settle_wait_ms
        self._viewport = {"width": viewport[0], "height": viewport[1]}
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    async def start(self) -> None:
        if self._browser is not None:
            return
        self._playwright = await async_playwright().start()
        launch_kwargs: dict[str, object] = {"headless": self._headless}
        if self._channel:
            launch_kwargs["channel"] = self._channel
        self._browser = await self._playwright.chromium.launch(**launch_kwargs)
        log_event(
            logger,
            logging.INFO,
            "browser_started",
            headless=self._headless,
            channel=self._channel,
        )

    async def close(self) -> None:
        try:
            if self._browser is not None:
                await self._browser.close()
        finally:
            if self._playwright is not None:
                await self._playwright.stop()
            self._browser = None
            self._playwright = None
            log_event(logger, logging.INFO, "browser_closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RenderSession]:
        if self._browser is None:
            raise RuntimeError("PlaywrightPageRenderer must be started before opening sessions.")

        context = await self._browser.new_context(
            user_agent=self._user_agent,
            viewport=self._viewport,
            device_scale_factor=1,
        )
        try:
            page = await context.new_page()
            yield PlaywrightRenderSession(
                page=page,
                load_state_timeout_ms=self._load_state_timeout_ms,
                settle_wait_ms=self._settle_wait_ms,
            )
        finally:
            await context.close()
