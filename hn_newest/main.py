"""Main orchestrator – opens a browser, collects /newest, checks its order."""

from __future__ import annotations

import asyncio
import logging

from playwright.async_api import async_playwright

from .config import HEADLESS, USER_AGENT, Settings
from .output import print_report
from .sources import Article, HackerNewsNewestScraper
from .verifier import find_unsorted

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
logger = logging.getLogger(__name__)


def _configure_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ---------------------------------------------------------------------------
# Collection
# ---------------------------------------------------------------------------
async def sort_hacker_news_articles(
    settings: Settings | None = None,
) -> tuple[list[Article], bool]:
    """Collect ``settings.max_articles`` articles and check they run newest-first."""
    settings = settings or Settings()
    scraper = HackerNewsNewestScraper(settings.base_url)

    async with async_playwright() as pw:
        browser = await pw.chromium.launch(headless=HEADLESS)
        try:
            context = await browser.new_context(user_agent=USER_AGENT)
            page = await context.new_page()
            await page.goto(settings.base_url)
            articles = await scraper.fetch(page, settings.max_articles)
        finally:
            await browser.close()

    bad = find_unsorted(articles)
    if bad is not None:
        logger.warning(
            "Out of order at rank %d (%s) after rank %d (%s)",
            articles[bad].rank,
            articles[bad].age,
            articles[bad - 1].rank,
            articles[bad - 1].age,
        )
    return articles, bad is None


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
def run() -> None:
    _configure_logging()
    settings = Settings()
    logger.info("=" * 60)
    logger.info(
        "HN newest — collecting %d articles from %s",
        settings.max_articles,
        settings.base_url,
    )
    logger.info("=" * 60)

    try:
        articles, is_sorted = asyncio.run(sort_hacker_news_articles(settings))
    except Exception as exc:
        logger.error("Run failed: %s", exc)
        raise

    print_report(articles, is_sorted)

    logger.info("=" * 60)
    logger.info("Done: %d articles, sorted=%s", len(articles), is_sorted)
    logger.info("=" * 60)


if __name__ == "__main__":
    run()
