from __future__ import annotations

import csv
import io
import unittest

from league_scraper.scraping.export.csv_export import (
    FIXTURE_COLUMNS,
    SEASON_COLUMNS,
    fixtures_to_csv,
    records_to_csv,
    seasons_to_csv,
    summary_to_csv,
)
from league_scraper.scraping.types import PerItemResult


class TestRecordsToCsv(unittest.TestCase):
    def test_special_characters_are_quoted(self) -> None:
        text = records_to_csv([{"a": 'He said "hi", then\nleft', "b": "plain"}], ["a", "b"])

        self.assertEqual(text, 'a,b\n"He said ""hi"", then\nleft",plain\n')

    def test_carriage_return_is_quoted(self) -> None:
        text = records_to_csv([{"a": "x\ry"}], ["a"])

        self.assertEqual(text, 'a\n"x\ry"\n')

    def test_carriage_return_survives_csv_reader(self) -> None:
        text = records_to_csv([{"a": "x\ry", "b": "\r"}], ["a", "b"])
        parsed = list(csv.DictReader(io.StringIO(text, newline="")))

        self.assertEqual(parsed, [{"a": "x\ry", "b": "\r"}])

    def test_single_empty_column_row_is_kept(self) -> None:
        text = records_to_csv([{}], ["a"])

        self.assertEqual(text, 'a\n""\n')

    def test_missing_and_none_values_are_empty(self) -> None:
        text = records_to_csv([{"a": None}, {}], ["a", "b"])

        self.assertEqual(text, "a,b\n,\n,\n")

    def test_round_trips_through_csv_reader(self) -> None:
        records = [
            {"season": "2024-2025", "champion": 'Chelsea, "The Blues"', "squads": 12},
            {"season": "2023-2024", "champion": "Line\nbreak", "squads": None},
        ]

        text = seasons_to_csv(records)
        parsed = list(csv.DictReader(io.StringIO(text, newline="")))

        self.assertEqual(list(parsed[0].keys()), list(SEASON_COLUMNS))
        self.assertEqual(parsed[0]["champion"], 'Chelsea, "The Blues"')
        self.assertEqual(parsed[0]["squads"], "12")
        self.assertEqual(parsed[1]["champion"], "Line\nbreak")
        self.assertEqual(parsed[1]["squads"], "")


class TestFixtureCsv(unittest.TestCase):
    def test_fixture_columns_are_fixed(self) -> None:
        self.assertEqual(len(FIXTURE_COLUMNS), 20)
        self.assertEqual(FIXTURE_COLUMNS[0], "season")
        self.assertEqual(FIXTURE_COLUMNS[-1], "match_report_url")

    def test_season_filled_from_item_key_and_round_fallback(self) -> None:
        result = PerItemResult(
            key="2024-2025",
            source_url="https://example.test/fixtures",
            status="success",
            records=(
                {"round": "Final", "home_team": "A", "away_team": "B", "home_score": 2},
                {"season": "given", "gameweek": "3", "round": "ignored"},
            ),
        )

        rows = list(csv.DictReader(io.StringIO(fixtures_to_csv([result]), newline="")))

        self.assertEqual(rows[0]["season"], "2024-2025")
        self.assertEqual(rows[0]["gameweek"], "Final")
        self.assertEqual(rows[0]["home_score"], "2")
        self.assertEqual(rows[0]["away_score"], "")
        self.assertEqual(rows[1]["season"], "given")
        self.assertEqual(rows[1]["gameweek"], "3")

    def test_summary_csv(self) -> None:
        results = [
            PerItemResult(key="a", source_url="https://x/a", status="success", records=({},)),
            PerItemResult(key="b", source_url="https://x/b", status="error", error="boom"),
        ]

        self.assertEqual(
            summary_to_csv(results),
            "key,record_count,status,source_url\na,1,success,https://x/a\nb,0,error,https://x/b\n",
        )
