"""
Header/cell to canonical field mapping with permissive type coercion.
"""

from __future__ import annotations

import re
from typing import Any

from league_scraper.scraping.parsing.document import HeaderDescriptor

# data-stat key -> canonical field name. Unknown keys map to themselves.
DATA_STAT_FIELDS: dict[str, str] = {
    "year_id": "season",
    "season": "season",
    "league_name": "competition",
    "comp_name": "competition",
    "num_teams": "squads",
    "champ": "champion",
    "top_scorers": "top_scorer",
    "top_scorer": "top_scorer",
    "most_assists": "most_assists",
    "game_date": "date",
    "date": "date",
    "time": "start_time",
    "game_time": "start_time",
    "start_time": "start_time",
    "game_week": "gameweek",
    "week_num": "gameweek",
    "gameweek": "gameweek",
    "round": "round",
    "dayofweek": "day_of_week",
    "day_of_week": "day_of_week",
    "home_team": "home_team",
    "squad_a": "home_team",
    "away_team": "away_team",
    "squad_b": "away_team",
    "home_score": "home_score",
    "score_a": "home_score",
    "home_goals": "home_score",
    "away_score": "away_score",
    "score_b": "away_score",
    "away_goals": "away_score",
    "venue": "venue",
    "attendance": "attendance",
    "referee": "referee",
    "match_report": "match_report",
    "notes": "notes",
}

# Slugged display header -> canonical field name, used when no data-stat exists.
HEADER_TEXT_FIELDS: dict[str, str] = {
    "season": "season",
    "competition_name": "competition",
    "comp": "competition",
    "squads": "squads",
    "champion": "champion",
    "top_scorer": "top_scorer",
    "most_assists": "most_assists",
    "assists": "most_assists",
    "wk": "gameweek",
    "week": "gameweek",
    "day": "day_of_week",
    "time": "start_time",
    "home": "home_team",
    "away": "away_team",
    "att": "attendance",
    "match_report": "match_report",
}

INTEGER_FIELDS = frozenset(
    {
        "squads",
        "attendance",
        "home_score",
        "away_score",
        "champion_points",
        "home_penalties",
        "away_penalties",
    }
)

SCORE_REGEX = re.compile(
    r"^\s*(?:\((?P<home_pens>\d+)\)\s*)?"
    r"(?P<home>\d+)\s*[–—−-]\s*(?P<away>\d+)"
    r"(?:\s*\((?P<away_pens>\d+)\))?\s*$"
)
CHAMPION_REGEX = re.compile(
    r"^(?P<name>.+?)\s*"
    r"(?:[–—-]\s*(?P<points>\d+)(?:\s*(?:pts?|points))?"
    r"|\(\s*(?P<paren_points>\d+)(?:\s*(?:pts?|points))?\s*\))\s*$",
    flags=re.IGNORECASE,
)


def slugify_header(text: str) -> str:
    """
    Derive a field name from display header text.
    """

    lowered = text.strip().lower()
    collapsed = re.sub(r"[\s\W]+", "_", lowered)
    return re.sub(r"[^a-z0-9_]", "", collapsed).strip("_")


def resolve_field_name(header: HeaderDescriptor) -> str:
    if header.data_stat:
        return DATA_STAT_FIELDS.get(header.data_stat, header.data_stat)
    slug = slugify_header(header.text)
    return HEADER_TEXT_FIELDS.get(slug, slug)


def parse_int(text: str) -> int | None:
    compact = re.sub(r"[,\s]", "", text)
    if not re.fullmatch(r"[+-]?\d+", compact):
        return None
    return int(compact)


def coerce_value(field_name: str, text: str) -> dict[str, Any]:
    """
    Coerce one cell to typed fields. Never raises; unparsable text is kept raw.
    """

    if field_name == "score":
        return split_score(text)
    if field_name == "champion":
        return split_champion(text)
    if field_name in INTEGER_FIELDS:
        parsed = parse_int(text)
        return {field_name: text if parsed is None else parsed}
    return {field_name: text}


def split_score(text: str) -> dict[str, Any]:
    fields: dict[str, Any] = {"score": text}
    match = SCORE_REGEX.match(text)
    if match is None:
        return fields
    fields["home_score"] = int(match.group("home"))
    fields["away_score"] = int(match.group("away"))
    if match.group("home_pens") is not None and match.group("away_pens") is not None:
        fields["home_penalties"] = int(match.group("home_pens"))
        fields["away_penalties"] = int(match.group("away_pens"))
    return fields


def split_champion(text: str) -> dict[str, Any]:
    match = CHAMPION_REGEX.match(text)
    if match is None:
        return {"champion": text}
    points = match.group("points") or match.group("paren_points")
    return {
        "champion": match.group("name").strip(),
        "champion_points": int(points),
    }


def map_cell(
    header: HeaderDescriptor,
    text: str,
    link: str | None = None,
) -> dict[str, Any]:
    """
    Map one populated cell to canonical fields.

    Returns an empty mapping for empty cells so absent values stay absent
    instead of becoming explicit nulls or zeros.
    """

    if not text or not text.strip():
        return {}

    field_name = resolve_field_name(header)
    if not field_name:
        return {}

    fields = coerce_value(field_name, text.strip())
    if link:
        fields[f"{field_name}_url"] = link
    return fields
