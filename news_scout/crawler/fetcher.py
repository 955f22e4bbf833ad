# news_scout/crawler/fetcher.py
"""
Fetcher module: a single plain GET per URL, no retries and no rate limiting.
"""
from __future__ import annotations

import asyncio

from aiohttp import ClientError, ClientSession

from news_scout.config import ScraperConfig
from news_scout.crawler.models import PageData

__all__ = ("Fetcher", "FetchError")


class FetchError(Exception):
    """Network failure, timeout or non-2xx response for *url*."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class Fetcher:
    """Thin wrapper over a shared aiohttp session."""

    def __init__(self, session: ClientSession, config: ScraperConfig) -> None:
        self.session = session
        self.config = config
        self.requests = 0

    async def fetch(self, url: str) -> PageData:
        """
        Fetch *url* and return its text.

        Raises FetchError on any failure; callers decide how to degrade.
        """
        self.requests += 1
        try:
            async with self.session.get(url, raise_for_status=False) as resp:
                if not 200 <= resp.status < 300:
                    raise FetchError(url, f"HTTP {resp.status}")
                text = await resp.text(errors="replace")
                return PageData(url, text)
        except asyncio.TimeoutError as exc:
            raise FetchError(url, "timeout") from exc
        except ClientError as exc:
            raise FetchError(url, str(exc) or type(exc).__name__) from exc
