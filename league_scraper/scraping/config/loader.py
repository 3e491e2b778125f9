"""
JSON config loader for scrape target competitions.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from urllib.parse import urlparse

from league_scraper.scraping.config.models import FBREF_BASE_URL, CompetitionConfig
from league_scraper.scraping.errors import FatalConfigError

HISTORY_PATH_REGEX = re.compile(
    r"^/(?:[a-z]{2}/)?comps/(?P<competition_id>[^/]+)/history/(?P<slug>[^/]+)-Seasons/?$"
)


def load_competition_configs(*, config_path: str) -> list[CompetitionConfig]:
    """
    Load competition configurations from a JSON file.
    """

    path = Path(config_path)
    if not path.exists():
        raise FatalConfigError(f"Competition config file not found: {path}")

    try:
        raw_data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise FatalConfigError(f"Invalid competition config {path}: {exc}") from exc
    if not isinstance(raw_data, dict):
        raise FatalConfigError(f"Invalid competition config {path}: expected a JSON object.")

    competitions = raw_data.get("competitions", [])
    if not isinstance(competitions, list):
        raise FatalConfigError("Invalid competition config: 'competitions' must be a list.")

    parsed: list[CompetitionConfig] = []
    for entry in competitions:
        if not isinstance(entry, dict):
            continue

        key = str(entry.get("key", "")).strip().lower()
        competition_id = str(entry.get("competition_id", "")).strip()
        slug = str(entry.get("slug", "")).strip()
        if not key or not competition_id or not slug:
            continue

        parsed.append(
            CompetitionConfig(
                key=key,
                competition_id=competition_id,
                name=str(entry.get("name", "")).strip() or slug.replace("-", " "),
                slug=slug,
                country=_optional_str(entry.get("country")),
                gender=_optional_str(entry.get("gender")),
                base_url=(_optional_str(entry.get("base_url")) or FBREF_BASE_URL).rstrip("/"),
                enabled=_optional_bool(entry.get("enabled"), True),
            )
        )

    return parsed


def competition_from_history_url(url: str) -> CompetitionConfig:
    """
    Build a competition config from a history URL such as
    ``https://fbref.com/en/comps/9/history/Premier-League-Seasons``.
    """

    parsed = urlparse(url.strip())
    match = HISTORY_PATH_REGEX.match(parsed.path)
    if parsed.scheme not in {"http", "https"} or not parsed.netloc or match is None:
        raise FatalConfigError(
            f"Invalid competition history URL '{url}'. "
            "Expected https://fbref.com/en/comps/<id>/history/<Name>-Seasons"
        )

    slug = match.group("slug")
    return CompetitionConfig(
        key=slug.lower(),
        competition_id=match.group("competition_id"),
        name=slug.replace("-", " "),
        slug=slug,
        base_url=f"{parsed.scheme}://{parsed.netloc}",
    )


def resolve_competition(
    reference: str,
    *,
    configs: list[CompetitionConfig],
) -> CompetitionConfig:
    """
    Resolve a configured competition key, id, or a raw history URL.
    """

    normalized = reference.strip()
    if normalized.startswith(("http://", "https://")):
        from_url = competition_from_history_url(normalized)
        for config in configs:
            if config.competition_id == from_url.competition_id and config.enabled:
                return config
        return from_url

    lowered = normalized.lower()
    for config in configs:
        if not config.enabled:
            continue
        if lowered in {config.key, config.competition_id}:
            return config

    allowed = ", ".join(sorted(config.key for config in configs if config.enabled))
    raise FatalConfigError(f"Unknown competition '{reference}'. Configured: {allowed}.")


def _optional_str(value: object) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _optional_bool(value: object, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    return default
