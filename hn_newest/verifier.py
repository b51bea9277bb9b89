"""Newest-first ordering check for a collected article sequence."""

from __future__ import annotations

from collections.abc import Sequence

from .sources.base import Article


def find_unsorted(articles: Sequence[Article]) -> int | None:
    """Return the index of the first article not strictly older than its predecessor.

    ``None`` means the sequence is sorted newest-first.
    """
    for i in range(1, len(articles)):
        if articles[i].published_at >= articles[i - 1].published_at:
            return i
    return None


def verify_sorted(articles: Sequence[Article]) -> bool:
    """True if every article is strictly older than the one before it."""
    return find_unsorted(articles) is None
