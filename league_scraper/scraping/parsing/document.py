"""
BeautifulSoup-backed document model for rendered report pages.

The locator and extractors only talk to these wrappers, so they can be
exercised against in-memory HTML without a browser.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment, Tag

SKIPPED_ROW_CLASSES = frozenset({"thead", "spacer", "over_header"})
NOT_FOUND_MARKERS = ("page not found", "404 error", "error 404", "404 not found")
NOT_FOUND_STATUS_CODES = frozenset({404, 410})


def clean_text(value: str) -> str:
    return re.sub(r"\s+", " ", value).strip()


@dataclass(frozen=True)
class HeaderDescriptor:
    """
    One column header: display text plus optional machine key.
    """

    text: str
    data_stat: str | None
    index: int


@dataclass(frozen=True)
class TableDescriptor:
    """
    Transient summary of one candidate table, used only for ranking.
    """

    identifier: str
    classes: tuple[str, ...]
    caption: str
    headers: tuple[HeaderDescriptor, ...]
    body_row_count: int
    position: int


@dataclass(frozen=True)
class CellHandle:
    text: str
    link: str | None = None


@dataclass(frozen=True)
class RowHandle:
    classes: tuple[str, ...]
    cells: tuple[CellHandle, ...] = field(default_factory=tuple)

    @property
    def is_data_row(self) -> bool:
        return not SKIPPED_ROW_CLASSES.intersection(self.classes)


class TableHandle:
    """
    Query wrapper around one `<table>` element.
    """

    def __init__(self, *, node: Tag, position: int, base_url: str | None = None) -> None:
        self._node = node
        self.position = position
        self._base_url = base_url

    @property
    def identifier(self) -> str:
        return str(self._node.get("id") or "")

    @property
    def classes(self) -> tuple[str, ...]:
        raw = self._node.get("class") or []
        if isinstance(raw, str):
            raw = raw.split()
        return tuple(raw)

    @property
    def caption(self) -> str:
        caption = self._node.find("caption")
        if caption is None:
            return ""
        return clean_text(caption.get_text(" ", strip=True))

    def headers(self) -> list[HeaderDescriptor]:
        header_row = self._header_row()
        if header_row is None:
            return []
        return [
            HeaderDescriptor(
                text=clean_text(cell.get_text(" ", strip=True)),
                data_stat=cell.get("data-stat") or None,
                index=index,
            )
            for index, cell in enumerate(header_row.find_all(["th", "td"], recursive=False))
        ]

    def rows(self) -> list[RowHandle]:
        return [self._row_handle(row) for row in self._body_rows()]

    def data_rows(self) -> list[RowHandle]:
        return [row for row in self.rows() if row.is_data_row]

    def describe(self) -> TableDescriptor:
        return TableDescriptor(
            identifier=self.identifier,
            classes=self.classes,
            caption=self.caption,
            headers=tuple(self.headers()),
            body_row_count=len(self.data_rows()),
            position=self.position,
        )

    def _header_row(self) -> Tag | None:
        thead = self._node.find("thead")
        if thead is None:
            return self._leading_header_row()
        header_rows = [
            row
            for row in thead.find_all("tr")
            if "over_header" not in (row.get("class") or [])
        ]
        if not header_rows:
            return None
        return header_rows[-1]

    def _body_rows(self) -> list[Tag]:
        bodies = self._node.find_all("tbody")
        if bodies:
            return [row for body in bodies for row in body.find_all("tr", recursive=False)]
        leading = self._leading_header_row()
        return [
            row
            for row in self._node.find_all("tr")
            if row.find_parent("thead") is None and row is not leading
        ]

    def _leading_header_row(self) -> Tag | None:
        # Tables without <thead> carry their header as a first all-<th> row.
        first_row = self._node.find("tr")
        if first_row is None:
            return None
        cells = first_row.find_all(["th", "td"], recursive=False)
        if cells and all(cell.name == "th" for cell in cells):
            return first_row
        return None

    def _row_handle(self, row: Tag) -> RowHandle:
        cells = tuple(
            CellHandle(
                text=clean_text(cell.get_text(" ", strip=True)),
                link=self._cell_link(cell),
            )
            for cell in row.find_all(["th", "td"], recursive=False)
        )
        return RowHandle(classes=tuple(row.get("class") or ()), cells=cells)

    def _cell_link(self, cell: Tag) -> str | None:
        anchor = cell.find("a", href=True)
        if anchor is None:
            return None
        href = str(anchor["href"]).strip()
        if not href:
            return None
        if self._base_url:
            return urljoin(self._base_url, href)
        return href


class HtmlDocument:
    """
    Rendered page exposing its tables and a few page-level signals.
    """

    def __init__(
        self,
        *,
        soup: BeautifulSoup,
        url: str | None = None,
        status_code: int | None = None,
    ) -> None:
        self._soup = soup
        self.url = url
        self.status_code = status_code

    @classmethod
    def from_html(
        cls,
        html: str,
        *,
        url: str | None = None,
        status_code: int | None = None,
        expand_commented_tables: bool = True,
    ) -> "HtmlDocument":
        soup = BeautifulSoup(html, "html.parser")
        if expand_commented_tables:
            _expand_commented_tables(soup)
        return cls(soup=soup, url=url, status_code=status_code)

    @property
    def title(self) -> str:
        if self._soup.title is None:
            return ""
        return clean_text(self._soup.title.get_text(" ", strip=True))

    @property
    def is_not_found(self) -> bool:
        if self.status_code in NOT_FOUND_STATUS_CODES:
            return True
        heading = self._soup.find("h1")
        candidates = [self.title.lower()]
        if heading is not None:
            candidates.append(clean_text(heading.get_text(" ", strip=True)).lower())
        return any(
            marker in candidate
            for candidate in candidates
            for marker in NOT_FOUND_MARKERS
        )

    def tables(self) -> list[TableHandle]:
        return [
            TableHandle(node=node, position=position, base_url=self.url)
            for position, node in enumerate(self._soup.find_all("table"))
        ]


def _expand_commented_tables(soup: BeautifulSoup) -> None:
    """
    Replace HTML comments that wrap `<table>` markup with the parsed markup.
    """

    for comment in soup.find_all(string=lambda text: isinstance(text, Comment)):
        if "<table" not in comment:
            continue
        fragment = BeautifulSoup(str(comment), "html.parser")
        comment.replace_with(fragment)
