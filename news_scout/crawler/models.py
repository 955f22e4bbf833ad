# news_scout/crawler/models.py
"""
Data models for the NewsScout crawler.
"""
from __future__ import annotations

import enum
from collections import Counter
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Dict, List, Optional


@dataclass(slots=True)
class PageData:
    """Holds URL and text content of a fetched page."""

    url: str
    content: str


def format_timestamp(value: datetime) -> str:
    """UTC timestamp with millisecond precision, e.g. ``2022-03-01T00:00:00.000Z``."""
    utc = value.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


@dataclass(frozen=True, slots=True)
class ArticleRecord:
    """Normalized article: non-empty headline, aware publish date, absolute URL."""

    headline: str
    published: datetime
    url: str

    @property
    def date(self) -> str:
        return format_timestamp(self.published)

    def to_dict(self) -> Dict[str, str]:
        return {"headline": self.headline, "date": self.date, "url": self.url}


@dataclass(slots=True)
class PageLinks:
    """Article links and pagination link found on one listing page."""

    article_links: List[str] = field(default_factory=list)
    next_page_url: Optional[str] = None


class SkipReason(str, enum.Enum):
    VISITED = "visited"
    FETCH_FAILED = "fetch_failed"
    NO_HEADLINE = "no_headline"
    NO_DATE = "no_date"
    INVALID_DATE = "invalid_date"
    BEFORE_CUTOFF = "before_cutoff"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class ExtractResult:
    """Outcome of one article extraction: either a record or a skip reason."""

    url: str
    record: Optional[ArticleRecord] = None
    reason: Optional[SkipReason] = None

    def __post_init__(self) -> None:
        if (self.record is None) == (self.reason is None):
            raise ValueError("ExtractResult needs exactly one of record / reason")

    @property
    def failed(self) -> bool:
        # only real failures; filtering and missing data are expected outcomes
        return self.reason in (SkipReason.FETCH_FAILED, SkipReason.ERROR)


@dataclass(slots=True)
class CrawlStats:
    """Counters collected during one crawl."""

    pages: int = 0
    page_failures: int = 0
    article_links: int = 0
    records: int = 0
    skipped: Counter = field(default_factory=Counter)

    def add(self, result: ExtractResult) -> None:
        self.article_links += 1
        if result.record is not None:
            self.records += 1
        else:
            self.skipped[result.reason.value] += 1

    def to_dict(self) -> Dict[str, object]:
        return {
            "pages": self.pages,
            "page_failures": self.page_failures,
            "article_links": self.article_links,
            "records": self.records,
            "skipped": dict(self.skipped),
        }
