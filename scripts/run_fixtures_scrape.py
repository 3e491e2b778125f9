"""
Run a fixtures scrape over a seasons catalogue from CLI.
"""

from __future__ import annotations

import argparse
import json
import logging

from league_scraper.config import load_env_files
from league_scraper.scraping.errors import FatalConfigError
from league_scraper.scraping.logging_utils import configure_logging
from league_scraper.services.league_scraping_service import LeagueScrapingService

logger = logging.getLogger(__name__)

TEST_SEASONS = ("2024-2025", "2023-2024")
CURRENT_SEASONS = ("2025-2026",)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Scrape scores and fixtures for catalogued seasons.")
    parser.add_argument(
        "--competition",
        default=None,
        help="Configured competition key/id or an FBref history URL (default from settings).",
    )
    selection = parser.add_mutually_exclusive_group()
    selection.add_argument(
        "--test",
        action="store_true",
        help=f"Only scrape {', '.join(TEST_SEASONS)}.",
    )
    selection.add_argument(
        "--current-only",
        action="store_true",
        help=f"Only scrape {', '.join(CURRENT_SEASONS)}.",
    )
    selection.add_argument(
        "--only",
        nargs="+",
        metavar="SEASON",
        default=None,
        help="Only scrape the listed season ids.",
    )
    parser.add_argument(
        "--start-from",
        dest="start_from_season",
        default=None,
        help="Skip catalogue seasons before this season id.",
    )
    parser.add_argument(
        "--concurrent",
        type=int,
        default=None,
        help="Pages rendered concurrently per batch.",
    )
    parser.add_argument(
        "--catalogue",
        dest="catalogue_path",
        default=None,
        help="Seasons JSON file (default: newest seasons file in the data directory).",
    )
    parser.add_argument(
        "--no-save",
        dest="save_to_file",
        action="store_false",
        help="Do not write JSON/CSV report files.",
    )
    return parser


def selected_seasons(args: argparse.Namespace) -> list[str] | None:
    if args.test:
        return list(TEST_SEASONS)
    if args.current_only:
        return list(CURRENT_SEASONS)
    return args.only


def main() -> int:
    args = build_parser().parse_args()
    if args.concurrent is not None and args.concurrent < 1:
        print("--concurrent must be >= 1")
        return 2

    load_env_files()
    configure_logging()

    service = LeagueScrapingService()
    try:
        run = service.scrape_fixtures(
            competition=args.competition,
            max_concurrent=args.concurrent,
            only_seasons=selected_seasons(args),
            start_from_season=args.start_from_season,
            save_to_file=args.save_to_file,
            catalogue_path=args.catalogue_path,
        )
    except (FatalConfigError, ValueError) as exc:
        logger.error("Fixtures scrape failed: %s", exc)
        return 1

    payload = {
        **run.summary.summary_dict(),
        "seasons": [
            {
                "season": result.key,
                "status": result.status,
                "record_count": result.record_count,
                "error": result.error,
            }
            for result in run.summary.results
        ],
        "files": list(run.files),
    }
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0 if run.summary.successful or not run.summary.total_processed else 1


if __name__ == "__main__":
    raise SystemExit(main())
