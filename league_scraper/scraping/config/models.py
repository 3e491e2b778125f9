"""
Scraping configuration models.
"""

from __future__ import annotations

from dataclasses import dataclass

FBREF_BASE_URL = "https://fbref.com"


@dataclass(frozen=True)
class CompetitionConfig:
    """
    One competition scrape target.

    `slug` is the hyphenated name FBref uses in page paths,
    e.g. ``Womens-Super-League``.
    """

    key: str
    competition_id: str
    name: str
    slug: str
    country: str | None = None
    gender: str | None = None
    base_url: str = FBREF_BASE_URL
    source: str = "fbref.com"
    enabled: bool = True

    @property
    def history_url(self) -> str:
        return f"{self.base_url}/en/comps/{self.competition_id}/history/{self.slug}-Seasons"

    @property
    def live_fixtures_url(self) -> str:
        return (
            f"{self.base_url}/en/comps/{self.competition_id}/schedule/"
            f"{self.slug}-Scores-and-Fixtures"
        )

    @property
    def file_prefix(self) -> str:
        return self.slug.lower().replace("-", "_")

    def record_context(self) -> dict[str, str]:
        """
        Constant metadata attached to every record scraped for this competition.
        """

        context = {"competition": self.name}
        if self.country:
            context["country"] = self.country
        if self.gender:
            context["gender"] = self.gender
        return context
