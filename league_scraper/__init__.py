"""
league_scraper package marker.

Scrapes competition season summaries and match fixtures from FBref-style
paginated reports into normalized records.
"""

__version__ = "1.0.0"
