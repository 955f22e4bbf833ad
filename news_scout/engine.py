# File: news_scout/engine.py
"""news_scout.engine: Orchestration layer: обход сайта и финализация результатов."""

from __future__ import annotations

from typing import List, Optional

from news_scout.config import ScraperConfig
from news_scout.crawler.crawler import NewsCrawler
from news_scout.crawler.models import ArticleRecord
from news_scout.finalizer import ArticleReport, finalize
from news_scout.logger import logger

__all__ = ["crawl_all", "start_scan"]


async def crawl_all(config: ScraperConfig, start_url: Optional[str] = None) -> List[ArticleRecord]:
    """Запускает NewsCrawler в контексте и возвращает сырые записи (без дедупликации)."""
    async with NewsCrawler(config) as crawler:
        return await crawler.crawl(start_url)


async def start_scan(config: ScraperConfig) -> ArticleReport:
    """Полный цикл: обход с нуля, дедупликация и сортировка."""
    async with NewsCrawler(config) as crawler:
        raw = await crawler.crawl()
        stats = crawler.last_stats
    articles = finalize(raw)
    logger.info("Итог: %d уникальных статей из %d", len(articles), len(raw))
    return ArticleReport(articles=articles, stats=stats)
