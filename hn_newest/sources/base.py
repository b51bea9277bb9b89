"""Base scraper interface, the Article record and the error taxonomy."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

if TYPE_CHECKING:
    from playwright.async_api import Page


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------
class ScraperError(Exception):
    """Root of every error raised while collecting articles."""


class ExtractionError(ScraperError):
    """A row is missing an expected sub-element, or its text is unparsable."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field


class ArticleValidationError(ScraperError):
    """An assembled record failed its field constraints.

    One error covers the whole record: ``fields`` names every violating
    field and ``values`` holds what was extracted.
    """

    def __init__(self, values: dict[str, Any], cause: ValidationError) -> None:
        self.values = values
        self.fields = sorted({str(err["loc"][0]) for err in cause.errors() if err["loc"]})
        details = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in cause.errors()
        )
        super().__init__(
            f"invalid article (id={values.get('id')!r}) in {', '.join(self.fields)}: {details}"
        )


class PaginationError(ScraperError):
    """The "More" control is missing or never came back after a click."""


class RankMismatchError(ScraperError):
    """A record's rank does not match its position in the collected sequence."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected rank {expected}, row says {actual}")
        self.expected = expected
        self.actual = actual


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------
def parse_age(value: str) -> datetime:
    """Parse a row's machine-readable timestamp into an aware datetime.

    The site renders either a plain ISO-8601 string (``...Z`` allowed) or
    ``"<iso> <unix-seconds>"``. Anything else is rejected. Naive values are
    taken as UTC.
    """
    tokens = (value or "").split()
    if not tokens:
        raise ValueError("empty timestamp")
    if len(tokens) > 2 or (len(tokens) == 2 and not tokens[1].isdigit()):
        raise ValueError(f"unexpected text after timestamp: {value!r}")
    token = tokens[0]
    if token.endswith(("Z", "z")):
        token = token[:-1] + "+00:00"
    parsed = datetime.fromisoformat(token)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------
class Article(BaseModel):
    """One listing entry from ``/newest``.

    Example::

        Article(
            id="41618389",
            rank=100,
            url="https://chipsandcheese.com/2024/09/22/intels-redwood-cove/",
            title="Intel's Redwood Cove: Baby Steps Are Still Steps",
            score=4,
            by="pella",
            age="2024-09-22T17:13:42.000000Z",
        )
    """

    model_config = ConfigDict(frozen=True, strict=True)

    id: str = Field(min_length=1)
    rank: int = Field(ge=0)
    url: str
    title: str = Field(min_length=1)
    score: int
    by: str = Field(min_length=1)
    age: str = Field(min_length=1)

    @field_validator("url")
    @classmethod
    def _absolute_url(cls, value: str) -> str:
        parsed = urlparse(value)
        if not parsed.scheme or not parsed.netloc:
            raise ValueError(f"not an absolute URL: {value!r}")
        return value

    @field_validator("age")
    @classmethod
    def _timestamp(cls, value: str) -> str:
        try:
            parse_age(value)
        except ValueError as exc:
            raise ValueError(f"not a timestamp: {value!r}") from exc
        return value

    @property
    def published_at(self) -> datetime:
        return parse_age(self.age)

    # ------------------------------------------------------------------
    # Serialisation helpers
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return self.model_dump()

    @classmethod
    def build(cls, **values: Any) -> "Article":
        """Construct a record, raising one ArticleValidationError on any violation."""
        try:
            return cls(**values)
        except ValidationError as exc:
            raise ArticleValidationError(values, exc) from exc


class BaseScraper:
    """Abstract base class every listing scraper must extend."""

    name: str = "base"
    base_url: str = ""

    async def fetch(self, page: "Page", limit: int) -> list[Article]:
        """Return up to *limit* Articles read through *page*.

        Subclasses **must** override this method.
        """
        raise NotImplementedError(f"{self.name} scraper must implement fetch()")

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} source='{self.name}'>"
