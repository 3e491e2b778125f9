"""
league_scraper/domain package marker.
"""

from league_scraper.domain.league_scraping import BatchSummary, RunOptions, ScrapeRun

__all__ = ["BatchSummary", "RunOptions", "ScrapeRun"]
