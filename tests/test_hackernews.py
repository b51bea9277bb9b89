"""Pagination / accumulation over fake listing pages."""

from __future__ import annotations

import asyncio

import pytest

from hn_newest.sources.base import ExtractionError, PaginationError, RankMismatchError
from hn_newest.sources.hackernews import HackerNewsNewestScraper, get_articles, more

from .fakes import FakePage, listing_page, listing_pages


def _collect(page, limit, **kwargs):
    return asyncio.run(get_articles(page, limit, **kwargs))


@pytest.mark.parametrize("limit", [0, -1, -100])
def test_non_positive_limit_touches_nothing(limit):
    page = FakePage(listing_pages(60))
    assert _collect(page, limit) == []
    assert page.queries == 0
    assert page.clicks == 0


@pytest.mark.parametrize("limit", [1, 5, 30])
def test_limit_within_first_page_does_not_paginate(limit):
    page = FakePage(listing_pages(60))
    articles = _collect(page, limit)
    assert len(articles) == limit
    assert [a.rank for a in articles] == list(range(1, limit + 1))
    assert page.clicks == 0


def test_limit_past_first_page_loads_more():
    page = FakePage(listing_pages(90))
    articles = _collect(page, 45)
    assert len(articles) == 45
    assert page.clicks == 1
    assert [a.rank for a in articles] == list(range(1, 46))


def test_hundred_articles_span_four_pages():
    page = FakePage(listing_pages(120))
    articles = _collect(page, 100)
    assert len(articles) == 100
    assert page.clicks == 3
    assert [a.rank for a in articles] == list(range(1, 101))
    assert len({a.id for a in articles}) == 100


def test_exact_page_boundary_stops_before_loading_more():
    page = FakePage(listing_pages(90))
    articles = _collect(page, 60)
    assert len(articles) == 60
    assert page.clicks == 1


def test_malformed_row_aborts_collection():
    pages = [listing_page(1, 30), listing_page(31, 30, rows={37: {"omit": ("by",)}})]
    page = FakePage(pages)
    with pytest.raises(ExtractionError):
        _collect(page, 50)


def test_rank_out_of_sequence_aborts_collection():
    page = FakePage([listing_page(start=5)])
    with pytest.raises(RankMismatchError) as excinfo:
        _collect(page, 3)
    assert (excinfo.value.expected, excinfo.value.actual) == (1, 5)


def test_no_more_link_raises_pagination_error():
    page = FakePage([listing_page(1, 30, more=False)])
    with pytest.raises(PaginationError):
        _collect(page, 40)
    assert page.clicks == 0


def test_more_link_not_reappearing_raises_pagination_error():
    page = FakePage([listing_page(1, 30), listing_page(31, 30, more=False)])
    with pytest.raises(PaginationError):
        _collect(page, 40)
    assert page.clicks == 1


def test_empty_page_raises_pagination_error():
    page = FakePage(["<html><body><table></table></body></html>"])
    with pytest.raises(PaginationError):
        _collect(page, 10)


def test_more_advances_to_next_page():
    page = FakePage(listing_pages(90))
    asyncio.run(more(page))
    assert page.index == 1
    rank = asyncio.run(page.locator("span.rank").first.inner_text())
    assert rank == "31."


def test_item_links_resolved_under_scraper_base_url():
    page = FakePage([listing_page(1, 5, rows={2: {"href": "item?id=41618002"}})])
    scraper = HackerNewsNewestScraper("https://mirror.example.org/newest")
    articles = asyncio.run(scraper.fetch(page, 5))
    assert articles[1].url == "https://mirror.example.org/item?id=41618002"


def test_scraper_defaults_to_site_base_url():
    scraper = HackerNewsNewestScraper()
    assert scraper.base_url == "https://news.ycombinator.com/newest"
    assert repr(scraper) == "<HackerNewsNewestScraper source='hackernews_newest'>"
