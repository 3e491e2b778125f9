"""
Page rendering capability.
"""

from league_scraper.scraping.rendering.base import PageRenderer, RenderSession
from league_scraper.scraping.rendering.static_renderer import StaticPageRenderer

__all__ = ["PageRenderer", "RenderSession", "StaticPageRenderer"]
