"""
league_scraper/scraping package marker.
"""
