"""
Rank candidate tables on a rendered page and pick the data table.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from league_scraper.scraping.parsing.document import HtmlDocument, TableDescriptor, TableHandle


@dataclass(frozen=True)
class LocatorProfile:
    """
    What a page's data table is expected to look like.
    """

    name: str
    id_fragments: tuple[str, ...] = ()
    class_fragments: tuple[str, ...] = ()
    caption_keywords: tuple[str, ...] = ("fixture", "schedule", "season")
    min_rows: int = 1


@dataclass(frozen=True)
class ScoringRule:
    """
    One ranking criterion. Rules are compared in list order.
    """

    name: str
    score: Callable[[TableDescriptor, LocatorProfile], int]


def _identifier_match(table: TableDescriptor, profile: LocatorProfile) -> int:
    identifier = table.identifier.lower()
    if any(fragment in identifier for fragment in profile.id_fragments):
        return 1
    classes = [value.lower() for value in table.classes]
    if any(fragment in value for value in classes for fragment in profile.class_fragments):
        return 1
    return 0


def _caption_match(table: TableDescriptor, profile: LocatorProfile) -> int:
    caption = table.caption.lower()
    return int(any(keyword in caption for keyword in profile.caption_keywords))


def _row_count(table: TableDescriptor, profile: LocatorProfile) -> int:
    return table.body_row_count


DEFAULT_RULES: tuple[ScoringRule, ...] = (
    ScoringRule(name="identifier", score=_identifier_match),
    ScoringRule(name="caption", score=_caption_match),
    ScoringRule(name="row_count", score=_row_count),
)

SEASONS_PROFILE = LocatorProfile(
    name="seasons",
    id_fragments=("seasons",),
    caption_keywords=("season",),
)
FIXTURES_PROFILE = LocatorProfile(
    name="fixtures",
    id_fragments=("sched",),
    class_fragments=("fixture",),
    caption_keywords=("fixture", "schedule", "scores"),
)


@dataclass
class TableLocator:
    """
    Score every table against the rule list and return the best one.
    """

    profile: LocatorProfile
    rules: Sequence[ScoringRule] = field(default=DEFAULT_RULES)

    def score(self, table: TableDescriptor) -> tuple[int, ...]:
        return tuple(rule.score(table, self.profile) for rule in self.rules)

    def rank(self, document: HtmlDocument) -> list[tuple[tuple[int, ...], TableHandle]]:
        ranked: list[tuple[tuple[int, ...], TableHandle]] = []
        for table in document.tables():
            descriptor = table.describe()
            if descriptor.body_row_count < self.profile.min_rows:
                continue
            ranked.append((self.score(descriptor), table))
        return ranked

    def locate(self, document: HtmlDocument) -> TableHandle | None:
        best: TableHandle | None = None
        best_score: tuple[int, ...] | None = None
        for score, table in self.rank(document):
            # Strictly greater keeps the first table on ties.
            if best_score is None or score > best_score:
                best, best_score = table, score
        return best
