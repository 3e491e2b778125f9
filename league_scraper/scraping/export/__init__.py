"""
Report and CSV export helpers.
"""

from league_scraper.scraping.export.csv_export import (
    FIXTURE_COLUMNS,
    SEASON_COLUMNS,
    fixtures_to_csv,
    records_to_csv,
    seasons_to_csv,
    summary_to_csv,
)
from league_scraper.scraping.export.reports import build_fixtures_report, build_seasons_report

__all__ = [
    "FIXTURE_COLUMNS",
    "SEASON_COLUMNS",
    "build_fixtures_report",
    "build_seasons_report",
    "fixtures_to_csv",
    "records_to_csv",
    "seasons_to_csv",
    "summary_to_csv",
]
