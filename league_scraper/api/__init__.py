"""
league_scraper/api package marker.
"""
