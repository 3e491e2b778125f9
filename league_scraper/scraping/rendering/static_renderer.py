"""
Plain HTTP renderer for pages whose tables are server-rendered.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager

import requests

from league_scraper.scraping.errors import NavigationError
from league_scraper.scraping.parsing.document import NOT_FOUND_STATUS_CODES, HtmlDocument
from league_scraper.scraping.rendering.base import PageRenderer, RenderSession


class StaticRenderSession(RenderSession):
    def __init__(self, *, http: requests.Session) -> None:
        self._http = http

    async def render(self, url: str, *, timeout_ms: int) -> HtmlDocument:
        try:
            # The body is read inside get(), so transport errors surface here.
            response = await asyncio.to_thread(
                self._http.get,
                url,
                timeout=timeout_ms / 1000,
                allow_redirects=True,
            )
        except requests.RequestException as exc:
            raise NavigationError(f"Request to {url} failed: {exc}") from exc

        if response.status_code in NOT_FOUND_STATUS_CODES:
            return HtmlDocument.from_html(response.text, url=response.url, status_code=response.status_code)
        if response.status_code >= 400:
            raise NavigationError(f"Request to {url} returned status={response.status_code}")
        return HtmlDocument.from_html(response.text, url=response.url, status_code=response.status_code)


class StaticPageRenderer(PageRenderer):
    """
    One `requests.Session` per render session, closed when the session ends.
    """

    def __init__(
        self,
        *,
        user_agent: str,
        headers: dict[str, str] | None = None,
        session_factory: Callable[[], requests.Session] = requests.Session,
    ) -> None:
        self._headers = {"User-Agent": user_agent, **(headers or {})}
        self._session_factory = session_factory

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RenderSession]:
        http = self._session_factory()
        http.headers.update(self._headers)
        try:
            yield StaticRenderSession(http=http)
        finally:
            http.close()
