"""
Fold per-item results into a batch summary.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Mapping, Sequence
from typing import Any

from league_scraper.domain.league_scraping import BatchSummary
from league_scraper.scraping.types import ITEM_STATUSES, STATUS_SUCCESS, PerItemResult


def aggregate_results(
    results: Sequence[PerItemResult],
    *,
    options: Mapping[str, Any] | None = None,
) -> BatchSummary:
    counts = Counter(result.status for result in results)
    status_counts = {status: counts.get(status, 0) for status in ITEM_STATUSES}
    for status, count in counts.items():
        status_counts.setdefault(status, count)

    successful = counts.get(STATUS_SUCCESS, 0)
    return BatchSummary(
        total_processed=len(results),
        successful=successful,
        failed=len(results) - successful,
        total_records=sum(result.record_count for result in results),
        status_counts=status_counts,
        results=tuple(results),
        options=dict(options or {}),
    )
