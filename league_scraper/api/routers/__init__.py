"""
league_scraper/api/routers package marker.
"""

from league_scraper.api.routers.league_scraping import router as league_scraping_router

__all__ = ["league_scraping_router"]
