"""
Season stats-page URL -> scores-and-fixtures page URL.
"""

from __future__ import annotations

import re
from urllib.parse import urljoin, urlparse

from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.errors import FatalConfigError

YEAR_SEGMENT_REGEX = re.compile(r"/(?:19|20)\d{2}(?:-(?:19|20)\d{2})?(?:/|-)")


def is_current_season_url(season_url: str, competition: CompetitionConfig) -> bool:
    """
    The ongoing season's stats page has no year segment in its path.
    """

    path = urlparse(season_url).path.rstrip("/")
    if not path.endswith(f"/{competition.slug}-Stats"):
        return False
    return YEAR_SEGMENT_REGEX.search(path) is None


def resolve_fixtures_url(
    season_id: str,
    season_url: str | None,
    competition: CompetitionConfig,
) -> str:
    """
    Derive the fixtures page for one season.

    Tries, in order: the live schedule URL for the current season, path
    substitution on the season stats URL, then direct construction from the
    competition id and season id.
    """

    season = season_id.strip()
    absolute_url = urljoin(f"{competition.base_url}/", season_url.strip()) if season_url else ""

    if absolute_url and is_current_season_url(absolute_url, competition):
        return _validated(competition.live_fixtures_url)

    if absolute_url and season and f"/{season}/" in absolute_url:
        stats_suffix = f"/{season}-{competition.slug}-Stats"
        if stats_suffix in absolute_url:
            return _validated(
                absolute_url.replace(
                    stats_suffix,
                    f"/schedule/{season}-{competition.slug}-Scores-and-Fixtures",
                    1,
                )
            )

    if not season:
        raise FatalConfigError("Cannot build a fixtures URL without a season identifier.")

    return _validated(
        f"{competition.base_url}/en/comps/{competition.competition_id}/{season}/schedule/"
        f"{season}-{competition.slug}-Scores-and-Fixtures"
    )


def _validated(url: str) -> str:
    parsed = urlparse(url)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc or " " in url:
        raise FatalConfigError(f"Resolved fixtures URL is not a valid absolute URL: '{url}'")
    return url
