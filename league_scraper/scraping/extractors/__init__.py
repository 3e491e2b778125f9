"""
Table extractor exports.
"""

from league_scraper.scraping.extractors.base import TableExtractor
from league_scraper.scraping.extractors.fixture_extractor import FixtureExtractor, derive_outcome
from league_scraper.scraping.extractors.season_extractor import SeasonExtractor

__all__ = ["FixtureExtractor", "SeasonExtractor", "TableExtractor", "derive_outcome"]
