"""
league_scraper/config.py

Environment-driven runtime settings for league scraping.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

_ALLOWED_RENDERERS = {"playwright", "static"}


def project_root() -> Path:
    return Path(__file__).resolve().parents[1]


def load_env_files() -> None:
    """
    Load simple KEY=VALUE pairs from `.env` and `.env.local` (if present).
    Existing process environment variables are not overwritten.
    """

    for filename in (".env", ".env.local"):
        env_path = project_root() / filename
        if not env_path.exists():
            continue

        for raw_line in env_path.read_text(encoding="utf-8").splitlines():
            line = raw_line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue

            key, value = line.split("=", 1)
            key = key.strip()
            value = value.strip().strip('"').strip("'")
            if key and key not in os.environ:
                os.environ[key] = value


@lru_cache(maxsize=1)
def _load_env_once() -> None:
    """
    Ensure project `.env` files are loaded once before reading settings.
    """

    load_env_files()


def _get_bool_env(name: str, default: bool) -> bool:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def _get_int_env(name: str, default: int) -> int:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return int(raw_value)
    except ValueError:
        return default


def _get_float_env(name: str, default: float) -> float:
    _load_env_once()
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    try:
        return float(raw_value)
    except ValueError:
        return default


def _get_str_env(name: str, default: str) -> str:
    _load_env_once()
    value = os.getenv(name)
    if value is None:
        return default
    stripped = value.strip()
    return stripped if stripped else default


def _resolve_path(raw_path: str) -> str:
    candidate = Path(raw_path)
    if candidate.is_absolute():
        return str(candidate)
    return str((project_root() / candidate).resolve())


@dataclass(frozen=True)
class ScrapingSettings:
    """
    Runtime settings for league scraping runs.

    Durations are kept in milliseconds to match the batch options they feed.
    """

    renderer: str = "playwright"
    headless: bool = True
    browser_channel: str | None = None
    user_agent: str = (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/119.0.0.0 Safari/537.36"
    )
    max_concurrent: int = 2
    inter_batch_delay_ms: int = 10_000
    retry_count: int = 3
    retry_delay_ms: int = 5_000
    per_request_timeout_ms: int = 180_000
    load_state_timeout_ms: int = 30_000
    settle_wait_ms: int = 10_000
    data_dir: str = "data"
    output_dir: str = "data"
    competitions_path: str = "league_scraper/scraping/config/competitions.json"
    default_competition: str = "wsl"


@lru_cache(maxsize=1)
def get_scraping_settings() -> ScrapingSettings:
    """
    Return cached scraping settings from environment variables.
    """

    renderer = _get_str_env("LEAGUE_SCRAPER_RENDERER", "playwright").lower()
    if renderer not in _ALLOWED_RENDERERS:
        raise RuntimeError(
            f"LEAGUE_SCRAPER_RENDERER '{renderer}' is not valid. "
            f"Allowed values: {sorted(_ALLOWED_RENDERERS)}."
        )

    channel = _get_str_env("LEAGUE_SCRAPER_BROWSER_CHANNEL", "")
    return ScrapingSettings(
        renderer=renderer,
        headless=_get_bool_env("LEAGUE_SCRAPER_HEADLESS", True),
        browser_channel=channel or None,
        user_agent=_get_str_env("LEAGUE_SCRAPER_USER_AGENT", ScrapingSettings.user_agent),
        max_concurrent=max(1, _get_int_env("LEAGUE_SCRAPER_MAX_CONCURRENT", 2)),
        inter_batch_delay_ms=max(0, _get_int_env("LEAGUE_SCRAPER_INTER_BATCH_DELAY_MS", 10_000)),
        retry_count=max(1, _get_int_env("LEAGUE_SCRAPER_RETRY_COUNT", 3)),
        retry_delay_ms=max(0, _get_int_env("LEAGUE_SCRAPER_RETRY_DELAY_MS", 5_000)),
        per_request_timeout_ms=max(
            1_000,
            _get_int_env("LEAGUE_SCRAPER_REQUEST_TIMEOUT_MS", 180_000),
        ),
        load_state_timeout_ms=max(0, _get_int_env("LEAGUE_SCRAPER_LOAD_STATE_TIMEOUT_MS", 30_000)),
        settle_wait_ms=max(0, _get_int_env("LEAGUE_SCRAPER_SETTLE_WAIT_MS", 10_000)),
        data_dir=_resolve_path(_get_str_env("LEAGUE_SCRAPER_DATA_DIR", "data")),
        output_dir=_resolve_path(_get_str_env("LEAGUE_SCRAPER_OUTPUT_DIR", "data")),
        competitions_path=_resolve_path(
            _get_str_env(
                "LEAGUE_SCRAPER_COMPETITIONS_PATH",
                "league_scraper/scraping/config/competitions.json",
            )
        ),
        default_competition=_get_str_env("LEAGUE_SCRAPER_DEFAULT_COMPETITION", "wsl").lower(),
    )
