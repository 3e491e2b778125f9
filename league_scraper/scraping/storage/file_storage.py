"""
Dated JSON and CSV report files in an output directory.
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any

from league_scraper.domain.league_scraping import BatchSummary
from league_scraper.schemas.league_scraping import FixturesReportResponse, SeasonsReportResponse
from league_scraper.scraping.config.models import CompetitionConfig
from league_scraper.scraping.export.csv_export import (
    fixtures_to_csv,
    seasons_to_csv,
    summary_to_csv,
)
from league_scraper.scraping.logging_utils import log_event
from league_scraper.scraping.storage.base import ReportStorage

logger = logging.getLogger(__name__)


class FileReportStorage(ReportStorage):
    """
    Writes `<prefix>_seasons_<date>.json` style files; same-day runs overwrite.
    """

    def __init__(self, *, output_dir: str, today: date | None = None) -> None:
        self._output_dir = Path(output_dir)
        self._today = today

    def _stamp(self) -> str:
        return (self._today or date.today()).isoformat()

    def save_seasons(
        self,
        *,
        competition: CompetitionConfig,
        report: SeasonsReportResponse,
    ) -> list[str]:
        stem = f"{competition.file_prefix}_seasons_{self._stamp()}"
        written = [
            self._write_json(f"{stem}.json", report.model_dump()),
            self._write_text(f"{stem}.csv", seasons_to_csv(report.seasons)),
        ]
        log_event(logger, logging.INFO, "report_saved", kind="seasons", files=written)
        return written

    def save_fixtures(
        self,
        *,
        competition: CompetitionConfig,
        report: FixturesReportResponse,
        summary: BatchSummary,
    ) -> list[str]:
        prefix = competition.file_prefix
        stamp = self._stamp()
        written = [
            self._write_json(f"{prefix}_all_seasons_fixtures_{stamp}.json", report.model_dump()),
            self._write_text(f"{prefix}_all_fixtures_{stamp}.csv", fixtures_to_csv(summary.results)),
            self._write_text(
                f"{prefix}_fixtures_summary_{stamp}.csv",
                summary_to_csv(summary.results),
            ),
        ]
        log_event(logger, logging.INFO, "report_saved", kind="fixtures", files=written)
        return written

    def _write_json(self, filename: str, payload: dict[str, Any]) -> str:
        return self._write_text(
            filename,
            json.dumps(payload, indent=2, ensure_ascii=False, default=str),
        )

    def _write_text(self, filename: str, content: str) -> str:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        path = self._output_dir / filename
        path.write_text(content, encoding="utf-8", newline="")
        return str(path)
