"""Report output – the collected articles and the sort verdict, on stdout."""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import TextIO

from .sources.base import Article


def render_articles(articles: Sequence[Article]) -> str:
    """JSON array of the articles, in collection order."""
    return json.dumps([a.to_dict() for a in articles], ensure_ascii=False, indent=2)


def render_verdict(is_sorted: bool) -> str:
    return f"Are articles sorted?: {'✅' if is_sorted else '❌'}"


def print_report(
    articles: Sequence[Article],
    is_sorted: bool,
    stream: TextIO | None = None,
) -> None:
    stream = stream or sys.stdout
    print(render_articles(articles), file=stream)
    print(render_verdict(is_sorted), file=stream)
