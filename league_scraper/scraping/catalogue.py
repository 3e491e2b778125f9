"""
Seasons catalogue loading and selection for fixtures runs.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.errors import FatalConfigError
from league_scraper.scraping.logging_utils import log_event
from league_scraper.schemas.league_scraping import SeasonEntry, SeasonsCatalogue

logger = logging.getLogger(__name__)


def seasons_file_pattern(competition: CompetitionConfig) -> str:
    return f"{competition.file_prefix}_seasons_*.json"


def find_latest_catalogue(data_dir: str, competition: CompetitionConfig) -> Path:
    """
    Newest seasons report in `data_dir` for the competition.

    File names embed an ISO date, so lexical order is chronological.
    """

    directory = Path(data_dir)
    candidates = sorted(directory.glob(seasons_file_pattern(competition))) if directory.is_dir() else []
    if not candidates:
        raise FatalConfigError(
            f"No seasons data file found in {directory} for {competition.name}. "
            "Run the seasons scrape first."
        )
    return candidates[-1]


def load_seasons_catalogue(path: str | Path) -> SeasonsCatalogue:
    catalogue_path = Path(path)
    if not catalogue_path.exists():
        raise FatalConfigError(f"Seasons catalogue not found: {catalogue_path}")

    try:
        raw = json.loads(catalogue_path.read_text(encoding="utf-8"))
        catalogue = SeasonsCatalogue.model_validate(raw)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise FatalConfigError(f"Invalid seasons catalogue {catalogue_path}: {exc}") from exc

    log_event(
        logger,
        logging.INFO,
        "catalogue_loaded",
        path=str(catalogue_path),
        seasons=len(catalogue.seasons),
    )
    return catalogue


def select_seasons(
    seasons: Sequence[SeasonEntry],
    *,
    only_seasons: Sequence[str] | None = None,
    start_from_season: str | None = None,
) -> list[SeasonEntry]:
    """
    Apply the `only_seasons` filter, then start from `start_from_season`.

    An unknown start season leaves the selection unchanged.
    """

    selected = list(seasons)
    if only_seasons is not None:
        wanted = {season.strip() for season in only_seasons}
        selected = [entry for entry in selected if entry.season in wanted]

    if start_from_season:
        keys = [entry.season for entry in selected]
        if start_from_season in keys:
            selected = selected[keys.index(start_from_season) :]
        else:
            log_event(
                logger,
                logging.WARNING,
                "start_season_not_found",
                start_from_season=start_from_season,
            )
    return selected
