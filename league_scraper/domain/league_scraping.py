"""
league_scraper/domain/league_scraping.py

Domain models for league scraping orchestration.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from league_scraper.scraping.types import PerItemResult


@dataclass(frozen=True)
class RunOptions:
    """
    Caller-facing configuration surface for a fixtures run.
    """

    max_concurrent: int = 2
    only_seasons: tuple[str, ...] | None = None
    start_from_season: str | None = None
    save_to_file: bool = True

    def __post_init__(self) -> None:
        if self.max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")

    def as_dict(self) -> dict[str, Any]:
        return {
            "max_concurrent": self.max_concurrent,
            "only_seasons": list(self.only_seasons) if self.only_seasons is not None else None,
            "start_from_season": self.start_from_season,
            "save_to_file": self.save_to_file,
        }


@dataclass(frozen=True)
class BatchSummary:
    """
    Aggregate outcome of one orchestrator run.
    """

    total_processed: int
    successful: int
    failed: int
    total_records: int
    status_counts: dict[str, int]
    results: tuple[PerItemResult, ...] = field(default_factory=tuple)
    options: dict[str, Any] = field(default_factory=dict)

    def summary_dict(self) -> dict[str, Any]:
        """
        Counts and options without the per-item results.
        """

        return {
            "total_processed": self.total_processed,
            "successful": self.successful,
            "failed": self.failed,
            "total_records": self.total_records,
            "status_counts": dict(self.status_counts),
            "processing_options": dict(self.options),
        }


@dataclass(frozen=True)
class ScrapeRun:
    """
    One finished run: its report, the batch summary behind it, and any
    files written for it.
    """

    report: Any
    summary: BatchSummary
    files: tuple[str, ...] = ()
