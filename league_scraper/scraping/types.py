"""
Shared scraping runtime data models.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

STATUS_SUCCESS = "success"
STATUS_NO_DATA = "no_data"
STATUS_ERROR = "error"
ITEM_STATUSES = (STATUS_SUCCESS, STATUS_NO_DATA, STATUS_ERROR)


@dataclass(frozen=True)
class WorkItem:
    """
    One page to render and extract, keyed by season id (or page kind).
    """

    key: str
    url: str


@dataclass(frozen=True)
class BatchOptions:
    """
    Concurrency, retry and politeness knobs for one orchestrator run.
    """

    max_concurrent: int = 2
    inter_batch_delay_ms: int = 10_000
    retry_count: int = 3
    retry_delay_ms: int = 5_000
    per_request_timeout_ms: int = 180_000

    def __post_init__(self) -> None:
        if self.max_concurrent < 1:
            raise ValueError("max_concurrent must be >= 1")
        if self.retry_count < 1:
            raise ValueError("retry_count must be >= 1")
        if min(self.inter_batch_delay_ms, self.retry_delay_ms, self.per_request_timeout_ms) < 0:
            raise ValueError("delays and timeouts must be >= 0")

    def as_dict(self) -> dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class PerItemResult:
    """
    Outcome for one processed page.
    """

    key: str
    source_url: str
    status: str
    records: tuple[dict[str, Any], ...] = field(default_factory=tuple)
    error: str | None = None
    attempts: int = 0

    @property
    def record_count(self) -> int:
        return len(self.records)

    def as_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "key": self.key,
            "source_url": self.source_url,
            "record_count": self.record_count,
            "records": [dict(record) for record in self.records],
            "status": self.status,
            "attempts": self.attempts,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload
