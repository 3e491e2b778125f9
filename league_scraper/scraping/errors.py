"""
Exception taxonomy for league scraping runs.
"""

from __future__ import annotations


class ScrapingError(Exception):
    """Base exception for league scraping failures."""


class NavigationError(ScrapingError):
    """Raised when a page cannot be rendered; retryable within the item budget."""


class NoTableFoundError(ScrapingError):
    """Raised when a rendered page holds no qualifying data table."""


class FatalConfigError(ScrapingError):
    """Raised for configuration problems that abort the whole run."""
