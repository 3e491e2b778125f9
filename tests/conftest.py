"""
Shared HTML pages, competitions and a scripted in-memory renderer.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import pytest

from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.parsing.document import HtmlDocument
from league_scraper.scraping.rendering.base import PageRenderer, RenderSession

HISTORY_URL = "https://fbref.com/en/comps/189/history/Womens-Super-League-Seasons"
SEASON_2024_URL = "https://fbref.com/en/comps/189/2024-2025/2024-2025-Womens-Super-League-Stats"
SEASON_2023_URL = "https://fbref.com/en/comps/189/2023-2024/2023-2024-Womens-Super-League-Stats"
FIXTURES_2024_URL = (
    "https://fbref.com/en/comps/189/2024-2025/schedule/"
    "2024-2025-Womens-Super-League-Scores-and-Fixtures"
)
FIXTURES_2023_URL = (
    "https://fbref.com/en/comps/189/2023-2024/schedule/"
    "2023-2024-Womens-Super-League-Scores-and-Fixtures"
)

SEASONS_HTML = """
<html>
<head><title>Women's Super League Seasons | FBref.com</title></head>
<body>
<table id="meta"><tr><td>Governing Country: England</td></tr></table>
<table class="stats_table" id="seasons">
  <caption>Competition History Table</caption>
  <thead>
    <tr class="over_header"><th colspan="5">History</th></tr>
    <tr>
      <th data-stat="year_id">Season</th>
      <th data-stat="league_name">Competition Name</th>
      <th data-stat="num_teams"># Squads</th>
      <th data-stat="champ">Champion</th>
      <th data-stat="top_scorers">Top Scorer</th>
    </tr>
  </thead>
  <tbody>
    <tr>
      <th data-stat="year_id"><a href="/en/comps/189/Womens-Super-League-Stats">2025-2026</a></th>
      <td data-stat="league_name">Women's Super League</td>
      <td data-stat="num_teams">12</td>
      <td data-stat="champ"></td>
      <td data-stat="top_scorers"></td>
    </tr>
    <tr>
      <th data-stat="year_id"><a href="/en/comps/189/2024-2025/2024-2025-Womens-Super-League-Stats">2024-2025</a></th>
      <td data-stat="league_name">WSL</td>
      <td data-stat="num_teams">12</td>
      <td data-stat="champ"><a href="/en/squads/cd1acf9d/Chelsea-Women-Stats">Chelsea</a> - 60</td>
      <td data-stat="top_scorers"><a href="/en/players/5fe9f3c0/Khadija-Shaw">Khadija Shaw</a></td>
    </tr>
    <tr class="thead">
      <th>Season</th><th>Competition Name</th><th># Squads</th><th>Champion</th><th>Top Scorer</th>
    </tr>
    <tr>
      <th data-stat="year_id"><a href="/en/comps/189/2023-2024/2023-2024-Womens-Super-League-Stats">2023-2024</a></th>
      <td data-stat="league_name">WSL</td>
      <td data-stat="num_teams">12</td>
      <td data-stat="champ"><a href="/en/squads/cd1acf9d/Chelsea-Women-Stats">Chelsea</a> - 55</td>
      <td data-stat="top_scorers"></td>
    </tr>
  </tbody>
</table>
</body>
</html>
"""

FIXTURES_HEADER = """
  <thead>
    <tr>
      <th data-stat="gameweek">Wk</th>
      <th data-stat="dayofweek">Day</th>
      <th data-stat="date">Date</th>
      <th data-stat="start_time">Time</th>
      <th data-stat="home_team">Home</th>
      <th data-stat="home_xg">xG</th>
      <th data-stat="score">Score</th>
      <th data-stat="away_xg">xG</th>
      <th data-stat="away_team">Away</th>
      <th data-stat="attendance">Attendance</th>
      <th data-stat="venue">Venue</th>
      <th data-stat="referee">Referee</th>
      <th data-stat="match_report">Match Report</th>
    </tr>
  </thead>
"""

FIXTURES_BODY = """
  <tbody>
    <tr>
      <th data-stat="gameweek">1</th>
      <td data-stat="dayofweek">Fri</td>
      <td data-stat="date">2024-09-20</td>
      <td data-stat="start_time">19:15</td>
      <td data-stat="home_team"><a href="/en/squads/cd1acf9d/Chelsea-Women-Stats">Chelsea</a></td>
      <td data-stat="home_xg">1.8</td>
      <td data-stat="score"><a href="/en/matches/a1b2c3d4/">1–0</a></td>
      <td data-stat="away_xg">0.6</td>
      <td data-stat="away_team"><a href="/en/squads/0f7f2a4c/Aston-Villa-Women-Stats">Aston Villa</a></td>
      <td data-stat="attendance">3,456</td>
      <td data-stat="venue">Kingsmeadow</td>
      <td data-stat="referee">Jane Doe</td>
      <td data-stat="match_report"><a href="/en/matches/a1b2c3d4/Match-Report">Match Report</a></td>
    </tr>
    <tr class="spacer"><td colspan="13"></td></tr>
    <tr class="thead">
      <th>Wk</th><th>Day</th><th>Date</th><th>Time</th><th>Home</th><th>xG</th><th>Score</th>
      <th>xG</th><th>Away</th><th>Attendance</th><th>Venue</th><th>Referee</th><th>Match Report</th>
    </tr>
    <tr>
      <th data-stat="gameweek">2</th>
      <td data-stat="dayofweek">Sun</td>
      <td data-stat="date">2024-09-29</td>
      <td data-stat="start_time">12:30</td>
      <td data-stat="home_team">Arsenal</td>
      <td data-stat="home_xg"></td>
      <td data-stat="score"></td>
      <td data-stat="away_xg"></td>
      <td data-stat="away_team">Chelsea</td>
      <td data-stat="attendance"></td>
      <td data-stat="venue">Emirates Stadium</td>
      <td data-stat="referee"></td>
      <td data-stat="match_report"><a href="/en/matches/e5f6a7b8/Head-to-Head">Head-to-Head</a></td>
    </tr>
    <tr>
      <th data-stat="gameweek">3</th>
      <td data-stat="dayofweek">Sun</td>
      <td data-stat="date">2024-10-06</td>
      <td data-stat="start_time">14:00</td>
      <td data-stat="home_team">Tottenham</td>
      <td data-stat="home_xg">1.1</td>
      <td data-stat="score">2–2</td>
      <td data-stat="away_xg">1.3</td>
      <td data-stat="away_team">Leicester City</td>
      <td data-stat="attendance">1,200</td>
      <td data-stat="venue">Brisbane Road</td>
      <td data-stat="referee">John Roe</td>
      <td data-stat="match_report"></td>
    </tr>
    <tr>
      <th data-stat="gameweek"></th>
      <td data-stat="dayofweek"></td>
      <td data-stat="date"></td>
      <td data-stat="start_time"></td>
      <td data-stat="home_team"></td>
      <td data-stat="home_xg"></td>
      <td data-stat="score"></td>
      <td data-stat="away_xg"></td>
      <td data-stat="away_team"></td>
      <td data-stat="attendance"></td>
      <td data-stat="venue"></td>
      <td data-stat="referee"></td>
      <td data-stat="match_report"></td>
    </tr>
  </tbody>
"""

LEAGUE_TABLE_HTML = """
<table class="stats_table" id="results2024-20251891_overall">
  <caption>Regular season Table</caption>
  <thead><tr><th>Rk</th><th>Squad</th><th>Pts</th></tr></thead>
  <tbody>
    <tr><td>1</td><td>Chelsea</td><td>60</td></tr>
    <tr><td>2</td><td>Arsenal</td><td>50</td></tr>
    <tr><td>3</td><td>Manchester Utd</td><td>45</td></tr>
    <tr><td>4</td><td>Manchester City</td><td>44</td></tr>
    <tr><td>5</td><td>Aston Villa</td><td>30</td></tr>
  </tbody>
</table>
"""

FIXTURES_HTML = f"""
<html>
<head><title>2024-2025 Women's Super League Scores &amp; Fixtures | FBref.com</title></head>
<body>
{LEAGUE_TABLE_HTML}
<table class="stats_table sortable min_width" id="sched_2024-2025_189_1">
  <caption>Scores &amp; Fixtures Table</caption>
  {FIXTURES_HEADER}
  {FIXTURES_BODY}
</table>
</body>
</html>
"""

COMMENTED_FIXTURES_HTML = f"""
<html>
<head><title>Scores &amp; Fixtures | FBref.com</title></head>
<body>
<div id="all_sched">
<!--
<table class="stats_table" id="sched_all">
  <caption>Scores &amp; Fixtures Table</caption>
  {FIXTURES_HEADER}
  {FIXTURES_BODY}
</table>
-->
</div>
</body>
</html>
"""

NO_TABLE_HTML = """
<html><head><title>Scores &amp; Fixtures | FBref.com</title></head>
<body><p>No fixtures have been scheduled.</p></body></html>
"""

NOT_FOUND_HTML = """
<html><head><title>Page Not Found (404 Error) | FBref.com</title></head>
<body><h1>Page Not Found (404 Error)</h1></body></html>
"""


class ScriptedSession(RenderSession):
    def __init__(self, renderer: "ScriptedRenderer") -> None:
        self._renderer = renderer

    async def render(self, url: str, *, timeout_ms: int) -> HtmlDocument:
        renderer = self._renderer
        renderer.calls.append(url)
        renderer.active += 1
        renderer.max_active = max(renderer.max_active, renderer.active)
        try:
            # Yield so concurrently gathered renders overlap.
            await asyncio.sleep(0)
            outcome = renderer.next_outcome(url)
            if isinstance(outcome, BaseException):
                raise outcome
            return HtmlDocument.from_html(outcome, url=url, status_code=200)
        finally:
            renderer.active -= 1


class ScriptedRenderer(PageRenderer):
    """
    Serves canned HTML per URL.

    A page value may be an HTML string, an exception instance to raise, or a
    list of those consumed one call at a time (the last entry repeats).
    """

    def __init__(self, pages: dict[str, Any]) -> None:
        self.pages = dict(pages)
        self.calls: list[str] = []
        self.sessions_opened = 0
        self.sessions_closed = 0
        self.starts = 0
        self.closes = 0
        self.active = 0
        self.max_active = 0

    def next_outcome(self, url: str) -> Any:
        outcome = self.pages[url]
        if isinstance(outcome, list):
            return outcome.pop(0) if len(outcome) > 1 else outcome[0]
        return outcome

    async def start(self) -> None:
        self.starts += 1

    async def close(self) -> None:
        self.closes += 1

    @asynccontextmanager
    async def session(self) -> AsyncIterator[RenderSession]:
        self.sessions_opened += 1
        try:
            yield ScriptedSession(self)
        finally:
            self.sessions_closed += 1


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.delays.append(seconds)


@pytest.fixture()
def wsl() -> CompetitionConfig:
    return CompetitionConfig(
        key="wsl",
        competition_id="189",
        name="Women's Super League",
        slug="Womens-Super-League",
        country="England",
        gender="F",
    )


@pytest.fixture()
def sleep_recorder() -> SleepRecorder:
    return SleepRecorder()
