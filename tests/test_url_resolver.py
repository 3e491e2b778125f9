from __future__ import annotations

import pytest

from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.errors import FatalConfigError
from league_scraper.scraping.url_resolver import is_current_season_url, resolve_fixtures_url

from conftest import FIXTURES_2024_URL, SEASON_2024_URL

LIVE_URL = "https://fbref.com/en/comps/189/schedule/Womens-Super-League-Scores-and-Fixtures"


class TestResolveFixturesUrl:
    def test_current_season_uses_live_schedule(self, wsl) -> None:
        url = resolve_fixtures_url(
            "2025-2026",
            "https://fbref.com/en/comps/189/Womens-Super-League-Stats",
            wsl,
        )
        assert url == LIVE_URL

    def test_stats_path_is_swapped_for_schedule_path(self, wsl) -> None:
        assert resolve_fixtures_url("2024-2025", SEASON_2024_URL, wsl) == FIXTURES_2024_URL

    def test_relative_season_url_is_joined_to_site(self, wsl) -> None:
        url = resolve_fixtures_url(
            "2024-2025",
            "/en/comps/189/2024-2025/2024-2025-Womens-Super-League-Stats",
            wsl,
        )
        assert url == FIXTURES_2024_URL

    def test_unexpected_path_falls_back_to_constructed_url(self, wsl) -> None:
        url = resolve_fixtures_url(
            "2019-2020",
            "https://fbref.com/en/comps/189/2019-2020/stats/2019-2020-Other-Page",
            wsl,
        )
        assert url == (
            "https://fbref.com/en/comps/189/2019-2020/schedule/"
            "2019-2020-Womens-Super-League-Scores-and-Fixtures"
        )

    def test_missing_season_url_falls_back(self, wsl) -> None:
        url = resolve_fixtures_url("2011", None, wsl)
        assert url == (
            "https://fbref.com/en/comps/189/2011/schedule/2011-Womens-Super-League-Scores-and-Fixtures"
        )

    def test_is_deterministic(self, wsl) -> None:
        first = resolve_fixtures_url("2024-2025", SEASON_2024_URL, wsl)
        assert all(
            resolve_fixtures_url("2024-2025", SEASON_2024_URL, wsl) == first for _ in range(3)
        )

    def test_invalid_result_is_fatal(self) -> None:
        broken = CompetitionConfig(
            key="broken",
            competition_id="1",
            name="Broken",
            slug="Broken",
            base_url="not-a-site",
        )
        with pytest.raises(FatalConfigError):
            resolve_fixtures_url("2024-2025", None, broken)

    def test_blank_season_without_url_is_fatal(self, wsl) -> None:
        with pytest.raises(FatalConfigError):
            resolve_fixtures_url("  ", None, wsl)


class TestIsCurrentSeasonUrl:
    def test_detects_current_and_past_seasons(self, wsl) -> None:
        assert is_current_season_url("https://fbref.com/en/comps/189/Womens-Super-League-Stats", wsl)
        assert not is_current_season_url(SEASON_2024_URL, wsl)
        assert not is_current_season_url("https://fbref.com/en/comps/189/history/x", wsl)
