# File: news_scout/report/__init__.py
"""news_scout.report: генерация отчётов (JSON и HTML) для CLI и HTTP-сервиса."""

from news_scout.report.html_report import render_html, render_page
from news_scout.report.json_report import render_json

__all__ = ["render_json", "render_html", "render_page"]
