"""
Document model, field mapping and table location.
"""

from league_scraper.scraping.parsing.document import (
    CellHandle,
    HeaderDescriptor,
    HtmlDocument,
    RowHandle,
    TableDescriptor,
    TableHandle,
)
from league_scraper.scraping.parsing.field_mapper import map_cell, resolve_field_name
from league_scraper.scraping.parsing.table_locator import (
    FIXTURES_PROFILE,
    SEASONS_PROFILE,
    LocatorProfile,
    ScoringRule,
    TableLocator,
)

__all__ = [
    "CellHandle",
    "FIXTURES_PROFILE",
    "HeaderDescriptor",
    "HtmlDocument",
    "LocatorProfile",
    "RowHandle",
    "SEASONS_PROFILE",
    "ScoringRule",
    "TableDescriptor",
    "TableHandle",
    "TableLocator",
    "map_cell",
    "resolve_field_name",
]
