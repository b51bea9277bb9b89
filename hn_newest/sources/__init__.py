from .base import (
    Article,
    ArticleValidationError,
    BaseScraper,
    ExtractionError,
    PaginationError,
    RankMismatchError,
    ScraperError,
    parse_age,
)
from .hackernews import HackerNewsNewestScraper

__all__ = [
    "Article",
    "ArticleValidationError",
    "BaseScraper",
    "ExtractionError",
    "HackerNewsNewestScraper",
    "PaginationError",
    "RankMismatchError",
    "ScraperError",
    "parse_age",
]
