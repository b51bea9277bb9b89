"""HackerNews "newest" scraper: walks the listing page by page in a browser."""

from __future__ import annotations

import logging

from playwright.async_api import Page
from playwright.async_api import TimeoutError as PlaywrightTimeout

from .base import Article, BaseScraper, PaginationError, RankMismatchError
from .fields import get_article
from ..config import BASE_URL, SELECTORS

logger = logging.getLogger(__name__)


async def more(page: Page) -> None:
    """Click "More" and wait until the next page has rendered its own "More"."""
    more_link = page.locator(SELECTORS["more"])
    if await more_link.count() == 0:
        raise PaginationError("no 'More' link on the current page")
    await more_link.click()
    try:
        await page.wait_for_selector(SELECTORS["more"])
    except PlaywrightTimeout as exc:
        raise PaginationError("'More' link did not reappear after loading the next page") from exc


async def get_articles(page: Page, limit: int, base_url: str = BASE_URL) -> list[Article]:
    """Collect *limit* articles in listing order, loading more pages as needed.

    Any failing row aborts the whole collection.
    """
    articles: list[Article] = []
    if limit <= 0:
        return articles

    page_no = 1
    while True:
        rows = page.locator(SELECTORS["row"])
        count = await rows.count()
        if count == 0:
            raise PaginationError(f"page {page_no} rendered no article rows")
        logger.info("Page %d: %d rows (have %d/%d)", page_no, count, len(articles), limit)

        for i in range(count):
            article = await get_article(rows.nth(i), base_url)
            expected = len(articles) + 1
            if article.rank != expected:
                raise RankMismatchError(expected, article.rank)
            articles.append(article)
            if len(articles) == limit:
                break

        if len(articles) == limit:
            return articles

        await more(page)
        page_no += 1


class HackerNewsNewestScraper(BaseScraper):
    name = "hackernews_newest"
    base_url = BASE_URL

    def __init__(self, base_url: str | None = None) -> None:
        if base_url:
            self.base_url = base_url

    async def fetch(self, page: Page, limit: int) -> list[Article]:
        articles = await get_articles(page, limit, self.base_url)
        logger.info("HackerNews newest: fetched %d articles", len(articles))
        return articles
