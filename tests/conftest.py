# File: tests/conftest.py
from __future__ import annotations

from collections import Counter
from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Dict, Optional

import pytest
import pytest_asyncio
from aiohttp import web

from news_scout.config import ScraperConfig

MORE_STORIES = '<a href="{href}"><span class="_1b2cyqa6 _1b2cyqa4">More Stories</span></a>'
NEXT = '<a href="{href}"><span class="mxmugz5 mxmugz3">{label}</span></a>'


def article_html(headline: str = "", datetime_attr: Optional[str] = None, date_text: str = "") -> str:
    """Build a minimal article page."""
    attr = f' datetime="{datetime_attr}"' if datetime_attr is not None else ""
    return (
        "<html><body>"
        f"<h1>{headline}</h1>"
        f"<time{attr}>{date_text}</time>"
        "<p>Body</p></body></html>"
    )


def listing_html(*links: str, more: Optional[str] = None, next_href: Optional[str] = None) -> str:
    """Build a listing page with article anchors and optional pagination controls."""
    body = "".join(f'<a href="{href}">story</a>' for href in links)
    if more:
        body += MORE_STORIES.format(href=more)
    if next_href:
        body += NEXT.format(href=next_href, label="Next")
    return f"<html><body>{body}</body></html>"


@dataclass
class FakeSite:
    """Local aiohttp site serving fixed pages; counts hits per path."""

    url: str
    hits: Counter = field(default_factory=Counter)

    def config(self, **overrides) -> ScraperConfig:
        params = {"base_url": self.url, "timeout": 5.0, "cutoff_date": "2022-01-01"}
        params.update(overrides)
        return ScraperConfig(**params)


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest.fixture()
def pages() -> Dict[str, str]:
    """Path -> HTML mapping served by ``fake_site``; tests fill it before crawling."""
    return {}


@pytest_asyncio.fixture
async def fake_site(pages: Dict[str, str], unused_tcp_port: int) -> AsyncIterator[FakeSite]:
    hits: Counter = Counter()

    async def handle(request: web.Request) -> web.Response:
        hits[request.path] += 1
        if request.path not in pages:
            raise web.HTTPNotFound()
        return web.Response(text=pages[request.path], content_type="text/html")

    app = web.Application()
    app.router.add_get("/{tail:.*}", handle)

    async for url in _serve_app(app, unused_tcp_port):
        yield FakeSite(url=url, hits=hits)


@pytest.fixture()
def basic_config() -> ScraperConfig:
    """Config pointing at a host nobody listens on; used by pure parsing tests."""
    return ScraperConfig(base_url="https://news.example.com", cutoff_date="2022-01-01")
