# news_scout/crawler/article_extractor.py
"""
Article extraction: one article URL in, one ArticleRecord (or nothing) out.
"""
from __future__ import annotations

import logging
from typing import MutableSet, Optional

from news_scout.config import ScraperConfig
from news_scout.crawler.fetcher import Fetcher, FetchError
from news_scout.crawler.models import ArticleRecord, ExtractResult, SkipReason
from news_scout.logger import LOGGER_NAME
from news_scout.parser.html_parser import parse_article, parse_date

__all__ = ("ArticleExtractor",)


class ArticleExtractor:
    """Fetches an article page and turns it into a record filtered by the cutoff date."""

    def __init__(self, fetcher: Fetcher, config: ScraperConfig) -> None:
        self.fetcher = fetcher
        self.config = config
        self.logger = logging.getLogger(LOGGER_NAME)

    async def extract(self, url: str, visited_articles: MutableSet[str]) -> Optional[ArticleRecord]:
        """Return the record for *url* or None (already visited, failed or filtered)."""
        result = await self.extract_result(url, visited_articles)
        return result.record

    async def extract_result(self, url: str, visited_articles: MutableSet[str]) -> ExtractResult:
        # check-and-mark must stay free of awaits: extractions of one page share the set
        if url in visited_articles:
            return ExtractResult(url, reason=SkipReason.VISITED)
        visited_articles.add(url)

        try:
            page = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.logger.warning("Failed article %s: %s", url, exc.reason)
            return ExtractResult(url, reason=SkipReason.FETCH_FAILED)

        fields = parse_article(page.content, self.config)
        if fields.headline is None:
            return self._skip(url, SkipReason.NO_HEADLINE)
        if fields.date_text is None:
            return self._skip(url, SkipReason.NO_DATE)

        published = parse_date(fields.date_text)
        if published is None:
            return self._skip(url, SkipReason.INVALID_DATE, fields.date_text)
        if published < self.config.cutoff:
            return self._skip(url, SkipReason.BEFORE_CUTOFF, fields.date_text)

        return ExtractResult(url, record=ArticleRecord(fields.headline, published, url))

    def _skip(self, url: str, reason: SkipReason, detail: str = "") -> ExtractResult:
        self.logger.debug("Skip %s (%s) %s", url, reason.value, detail)
        return ExtractResult(url, reason=reason)
