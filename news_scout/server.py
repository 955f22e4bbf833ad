# File: news_scout/server.py
"""news_scout.server: HTTP-сервис, каждый запрос запускает обход заново и отдаёт HTML."""

from __future__ import annotations

from typing import Awaitable, Callable

from aiohttp import web

from news_scout.config import ScraperConfig
from news_scout.engine import start_scan
from news_scout.finalizer import ArticleReport
from news_scout.logger import logger
from news_scout.report.html_report import render_page

__all__ = ["create_app", "run_server"]

ScanFunc = Callable[[ScraperConfig], Awaitable[ArticleReport]]

CONFIG_KEY = web.AppKey("config", ScraperConfig)
SCAN_KEY = web.AppKey("scan", object)


async def handle_index(request: web.Request) -> web.Response:
    config = request.app[CONFIG_KEY]
    scan: ScanFunc = request.app[SCAN_KEY]  # type: ignore[assignment]
    logger.info("Request %s %s: crawling %s", request.method, request.path, config.entry_url)
    report = await scan(config)
    return web.Response(text=render_page(report), content_type="text/html")


def create_app(config: ScraperConfig, scan: ScanFunc = start_scan) -> web.Application:
    """Создаёт aiohttp-приложение с единственным маршрутом ``GET /``."""
    app = web.Application()
    app[CONFIG_KEY] = config
    app[SCAN_KEY] = scan
    app.router.add_get("/", handle_index)
    return app


def run_server(config: ScraperConfig) -> None:
    """Блокирующий запуск сервиса на config.host:config.port."""
    logger.info("Server is running on http://%s:%d", config.host, config.port)
    web.run_app(create_app(config), host=config.host, port=config.port, print=None)
