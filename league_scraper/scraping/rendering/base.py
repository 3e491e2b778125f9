"""
Rendering capability: URL in, queryable document out.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager

from league_scraper.scraping.parsing.document import HtmlDocument


class RenderSession(ABC):
    """
    An isolated rendering session owned by a single task.
    """

    @property
    def extra_wait_ms(self) -> int:
        """
        Time a render may spend after navigation, on top of `timeout_ms`.
        """
        return 0

    @abstractmethod
    async def render(self, url: str, *, timeout_ms: int) -> HtmlDocument:
        """
        Render one page. Raises NavigationError when the page cannot be loaded.
        """


class PageRenderer(ABC):
    """
    Shared rendering resource handing out per-task sessions.

    Use as an async context manager so the underlying resource is started
    and released deterministically.
    """

    async def start(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def __aenter__(self) -> "PageRenderer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @abstractmethod
    def session(self) -> AbstractAsyncContextManager[RenderSession]:
        """
        Acquire a session released on every exit path.
        """
