"""Per-field extraction for one ``/newest`` listing row.

Each listing row (``tr.athing``) carries id, rank, link and title. Score,
author and age live on the next ``<tr>``, which has no class and no shared
container with the listing row, so it is located positionally via
:func:`get_sibling`.
"""

from __future__ import annotations

import asyncio
import logging
import re
from urllib.parse import urljoin

from playwright.async_api import Locator

from .base import Article, ExtractionError
from ..config import BASE_URL, RELATIVE_ITEM_PREFIX, SELECTORS

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"^\s*(-?\d+)")


async def _required(locator: Locator, field: str) -> Locator:
    # fail now instead of waiting out the browser's default timeout
    if await locator.count() == 0:
        raise ExtractionError(field, "element not found")
    return locator


def _leading_int(text: str, field: str) -> int:
    match = _LEADING_INT.match(text)
    if not match:
        raise ExtractionError(field, f"no number in {text!r}")
    return int(match.group(1))


def get_sibling(row: Locator) -> Locator:
    """Return the metadata row immediately following *row*."""
    return row.locator(SELECTORS["sibling"])


async def get_id(row: Locator) -> str:
    return await row.get_attribute("id") or ""


async def get_rank(row: Locator) -> int:
    """``"12."`` -> ``12``."""
    label = await _required(row.locator(SELECTORS["rank"]), "rank")
    return _leading_int(await label.inner_text(), "rank")


async def get_url(row: Locator, base_url: str = BASE_URL) -> str:
    """Return the article link, resolving ``item?id=`` links against *base_url*."""
    link = await _required(row.locator(SELECTORS["link"]), "url")
    href = await link.get_attribute("href") or ""
    if href.startswith(RELATIVE_ITEM_PREFIX):
        return urljoin(base_url, href)
    return href


async def get_title(row: Locator) -> str:
    link = await _required(row.locator(SELECTORS["link"]), "title")
    return await link.inner_text()


async def get_score(row: Locator) -> int:
    """Leading integer of the sibling's ``"N points"`` label."""
    score = await _required(get_sibling(row).locator(SELECTORS["score"]), "score")
    return _leading_int(await score.inner_text(), "score")


async def get_by(row: Locator) -> str:
    author = await _required(get_sibling(row).locator(SELECTORS["author"]), "by")
    return await author.inner_text()


async def get_age(row: Locator) -> str:
    # the title attribute holds the absolute timestamp; the text is "3 minutes ago"
    age = await _required(get_sibling(row).locator(SELECTORS["age"]), "age")
    return await age.get_attribute("title") or ""


async def get_article(row: Locator, base_url: str = BASE_URL) -> Article:
    """Extract every field of *row* concurrently and validate the result.

    Raises :class:`ExtractionError` when a sub-element is missing and
    :class:`ArticleValidationError` when the assembled values break the
    record's constraints. Nothing is returned for a partially valid row.
    """
    try:
        async with asyncio.TaskGroup() as tg:
            tasks = {
                "id": tg.create_task(get_id(row)),
                "rank": tg.create_task(get_rank(row)),
                "url": tg.create_task(get_url(row, base_url)),
                "title": tg.create_task(get_title(row)),
                "score": tg.create_task(get_score(row)),
                "by": tg.create_task(get_by(row)),
                "age": tg.create_task(get_age(row)),
            }
    except ExceptionGroup as group:
        # other extractors are cancelled and joined by now
        raise group.exceptions[0] from group
    article = Article.build(**{field: task.result() for field, task in tasks.items()})
    logger.debug("Row %d: %s", article.rank, article.id)
    return article
