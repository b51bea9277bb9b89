"""Configuration constants for the Hacker News "newest" scraper."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict

# ---------------------------------------------------------------------------
# Site
# ---------------------------------------------------------------------------
BASE_URL = "https://news.ycombinator.com/newest"
MAX_ARTICLES = 100

# Same-site comment-thread links are rendered relative to the listing
RELATIVE_ITEM_PREFIX = "item?id="

# ---------------------------------------------------------------------------
# Browser
# ---------------------------------------------------------------------------
HEADLESS = True
USER_AGENT = "HNNewest/1.0 (+https://news.ycombinator.com/newest)"

# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------
SELECTORS: dict[str, str] = {
    # listing row (one per article)
    "row": "tr.athing",
    "rank": "span.rank",
    "link": "span.titleline > a",
    # metadata row: the listing row's next <tr>, which has no class of its own
    "sibling": "xpath=following-sibling::tr[1]",
    "score": "span.score",
    "author": "a.hnuser",
    "age": "span.age",
    # pagination
    "more": "a.morelink",
}


class Settings(BaseModel):
    """Recognized run options. Anything else is rejected."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    base_url: str = BASE_URL
    max_articles: int = MAX_ARTICLES

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "Settings":
        return cls(**dict(options))
