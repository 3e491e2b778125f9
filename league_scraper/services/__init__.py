"""
league_scraper/services package marker.
"""
