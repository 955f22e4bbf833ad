# === FILE: news_scout/crawler/crawler.py ===
from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field
from typing import List, Optional, Set

from aiohttp import ClientSession, ClientTimeout

from news_scout.config import ScraperConfig
from news_scout.crawler.article_extractor import ArticleExtractor
from news_scout.crawler.fetcher import Fetcher
from news_scout.crawler.link_collector import LinkCollector
from news_scout.crawler.models import ArticleRecord, CrawlStats, ExtractResult, SkipReason
from news_scout.logger import LOGGER_NAME

__all__ = ("CrawlContext", "NewsCrawler")


@dataclass(slots=True)
class CrawlContext:
    """Состояние одного обхода; создаётся заново на каждый вызов crawl()."""
    frontier: List[str]
    visited_pages: Set[str] = field(default_factory=set)
    visited_articles: Set[str] = field(default_factory=set)
    records: List[ArticleRecord] = field(default_factory=list)
    stats: CrawlStats = field(default_factory=CrawlStats)


class NewsCrawler:
    """Асинхронный обход главной страницы и цепочки "more stories"."""

    def __init__(self, config: ScraperConfig) -> None:
        self.config = config
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.last_stats: Optional[CrawlStats] = None
        self.logger = logging.getLogger(LOGGER_NAME)

    async def __aenter__(self) -> NewsCrawler:
        self.session = ClientSession(timeout=ClientTimeout(total=self.config.timeout))
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    async def crawl(self, start_url: Optional[str] = None) -> List[ArticleRecord]:
        """
        Обходит страницы, пока фронтир не опустеет.

        Страницы обрабатываются по одной (LIFO), статьи одной страницы
        конкурентно, с ожиданием всех результатов. Возвращает сырые записи:
        без сортировки, возможно с повторяющимися заголовками.
        """
        if self.fetcher is None:
            raise RuntimeError("Session not initialized")
        ctx = CrawlContext(frontier=[start_url or self.config.entry_url])
        collector = LinkCollector(self.fetcher, self.config)
        extractor = ArticleExtractor(self.fetcher, self.config)
        limiter = asyncio.Semaphore(self.config.max_concurrency) if self.config.max_concurrency else None

        self.logger.info("Старт обхода: %s (cutoff %s)", ctx.frontier[0], self.config.cutoff_date)
        start = time.monotonic()

        while ctx.frontier:
            url = ctx.frontier.pop()
            if url in ctx.visited_pages:
                continue
            ctx.visited_pages.add(url)
            ctx.stats.pages += 1

            self.logger.info("Scraping page: %s", url)
            links = await collector.collect(url)

            results = await asyncio.gather(
                *(self._extract(extractor, link, ctx, limiter) for link in links.article_links)
            )
            for result in results:
                ctx.stats.add(result)
                if result.record is not None:
                    ctx.records.append(result.record)

            if links.next_page_url and links.next_page_url not in ctx.visited_pages:
                ctx.frontier.append(links.next_page_url)

        ctx.stats.page_failures = collector.failures
        self.last_stats = ctx.stats
        duration = time.monotonic() - start
        self.logger.info(
            "Завершено: %d страниц, %d статей из %d ссылок за %.2f с",
            ctx.stats.pages, ctx.stats.records, ctx.stats.article_links, duration,
        )
        if ctx.stats.skipped:
            self.logger.info("Пропущено: %s", dict(ctx.stats.skipped))
        return ctx.records

    async def _extract(
        self,
        extractor: ArticleExtractor,
        url: str,
        ctx: CrawlContext,
        limiter: Optional[asyncio.Semaphore],
    ) -> ExtractResult:
        # one broken article must not abort the page or the crawl
        try:
            if limiter is None:
                return await extractor.extract_result(url, ctx.visited_articles)
            async with limiter:
                return await extractor.extract_result(url, ctx.visited_articles)
        except Exception as exc:
            self.logger.warning("Error extracting %s: %r", url, exc)
            return ExtractResult(url, reason=SkipReason.ERROR)
