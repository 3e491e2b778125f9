"""
Run a competition seasons (history) scrape from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging

from league_scraper.config import load_env_files
from league_scraper.scraping.errors import FatalConfigError, ScrapingError
from league_scraper.scraping.logging_utils import configure_logging
from league_scraper.services.league_scraping_service import LeagueScrapingService

logger = logging.getLogger(__name__)


def main() -> int:
    parser = argparse.ArgumentParser(description="Scrape the season history of a competition.")
    parser.add_argument(
        "competition",
        nargs="?",
        default=None,
        help="Configured competition key/id or an FBref history URL (default from settings).",
    )
    parser.add_argument(
        "--no-save",
        dest="save_to_file",
        action="store_false",
        help="Do not write JSON/CSV report files.",
    )
    args = parser.parse_args()

    load_env_files()
    configure_logging()

    service = LeagueScrapingService()
    try:
        run = service.scrape_seasons(competition=args.competition, save_to_file=args.save_to_file)
    except (FatalConfigError, ScrapingError) as exc:
        logger.error("Seasons scrape failed: %s", exc)
        return 1

    payload = {
        "competition": run.report.competition,
        "seasons_count": run.report.seasons_count,
        "seasons": [record.get("season") for record in run.report.seasons],
        "files": list(run.files),
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
