"""
Base table extractor: located table rows -> canonical records.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from league_scraper.scraping.errors import NoTableFoundError
from league_scraper.scraping.logging_utils import log_event
from league_scraper.scraping.parsing.document import (
    HeaderDescriptor,
    HtmlDocument,
    RowHandle,
    TableHandle,
)
from league_scraper.scraping.parsing.field_mapper import map_cell
from league_scraper.scraping.parsing.table_locator import LocatorProfile, TableLocator

logger = logging.getLogger(__name__)


class TableExtractor(ABC):
    """
    Walks a located table through the field mapper and assembles records.

    Subclasses decide which rows count as real records and how retained
    records are post-processed.
    """

    profile: LocatorProfile

    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        self.context = dict(context or {})
        self.locator = TableLocator(profile=self.profile)

    def extract_document(self, document: HtmlDocument) -> list[dict[str, Any]]:
        """
        Locate the data table on a page and extract its records.
        """

        table = self.locator.locate(document)
        if table is None:
            raise NoTableFoundError(
                f"No {self.profile.name} table found on {document.url or 'page'}"
            )
        log_event(
            logger,
            logging.DEBUG,
            "table_located",
            profile=self.profile.name,
            table_id=table.identifier,
            page_url=document.url,
        )
        return self.extract(table)

    def extract(self, table: TableHandle) -> list[dict[str, Any]]:
        headers = table.headers()
        records: list[dict[str, Any]] = []
        skipped = 0
        for row in table.data_rows():
            record = self._map_row(row, headers)
            if not self.is_identity_row(record):
                skipped += 1
                continue
            records.append(self.post_process(record))

        records = self.finalize(records)
        log_event(
            logger,
            logging.INFO,
            "table_extracted",
            profile=self.profile.name,
            table_id=table.identifier,
            records=len(records),
            skipped_rows=skipped,
        )
        return records

    def _map_row(self, row: RowHandle, headers: list[HeaderDescriptor]) -> dict[str, Any]:
        record: dict[str, Any] = {}
        for index, cell in enumerate(row.cells):
            if index >= len(headers):
                continue
            record.update(map_cell(headers[index], cell.text, cell.link))
        return record

    @abstractmethod
    def is_identity_row(self, record: Mapping[str, Any]) -> bool:
        """
        Return True when the row carries a field that identifies a record.
        """

    def post_process(self, record: dict[str, Any]) -> dict[str, Any]:
        record.update(self.context)
        return record

    def finalize(self, records: list[dict[str, Any]]) -> list[dict[str, Any]]:
        return records
