"""
Storage layer exports.
"""

from league_scraper.scraping.storage.base import ReportStorage
from league_scraper.scraping.storage.file_storage import FileReportStorage

__all__ = ["FileReportStorage", "ReportStorage"]
