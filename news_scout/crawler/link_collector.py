# news_scout/crawler/link_collector.py
"""
Link collection for listing pages (homepage and "more stories" pages).
"""
from __future__ import annotations

import logging

from news_scout.config import ScraperConfig
from news_scout.crawler.fetcher import Fetcher, FetchError
from news_scout.crawler.models import PageLinks
from news_scout.logger import LOGGER_NAME
from news_scout.parser.html_parser import parse_listing

__all__ = ("LinkCollector",)


class LinkCollector:
    """Fetches a listing page and returns its article links and next page."""

    def __init__(self, fetcher: Fetcher, config: ScraperConfig) -> None:
        self.fetcher = fetcher
        self.config = config
        self.failures = 0
        self.logger = logging.getLogger(LOGGER_NAME)

    async def collect(self, url: str) -> PageLinks:
        """
        Return PageLinks for *url*.

        A page that cannot be fetched yields no links and no next page.
        """
        try:
            page = await self.fetcher.fetch(url)
        except FetchError as exc:
            self.failures += 1
            self.logger.warning("Failed page %s: %s", url, exc.reason)
            return PageLinks()
        links = parse_listing(page.content, self.config)
        self.logger.debug(
            "Page %s: %d article links, next=%s", url, len(links.article_links), links.next_page_url
        )
        return links
