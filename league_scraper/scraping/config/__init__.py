"""
Config helpers for league scraping.
"""

from league_scraper.scraping.config.loader import (
    competition_from_history_url,
    load_competition_configs,
    resolve_competition,
)
from league_scraper.scraping.config.models import FBREF_BASE_URL, CompetitionConfig

__all__ = [
    "CompetitionConfig",
    "FBREF_BASE_URL",
    "competition_from_history_url",
    "load_competition_configs",
    "resolve_competition",
]
