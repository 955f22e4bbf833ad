# File: news_scout/report/html_report.py
"""news_scout.report.html_report: Генерация HTML-страницы со списком статей с помощью Jinja2."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from news_scout.finalizer import ArticleReport

TEMPLATE_NAME = "articles.html.j2"
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"


def short_date(value: datetime) -> str:
    """Дата в виде M/D/YYYY (UTC)."""
    return f"{value.month}/{value.day}/{value.year}"


def _environment(template_dir: Union[Path, str, None]) -> Environment:
    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    env.filters["short_date"] = short_date
    return env


def render_page(
    report: ArticleReport,
    template_dir: Union[Path, str, None] = None,
    title: str = "Article Headlines",
) -> str:
    """Рендерит HTML-страницу со статьями в порядке отчёта и возвращает строку."""
    template = _environment(template_dir).get_template(TEMPLATE_NAME)
    context: dict[str, Any] = {
        "title": title,
        "articles": report.articles,
    }
    return template.render(**context)


def render_html(
    report: ArticleReport,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект ArticleReport.
        output_path: путь к итоговому HTML-файлу.
        template_dir: директория с Jinja2-шаблонами (по умолчанию встроенная).

    Returns:
        Path до сохранённого HTML-файла.

    Пример:
    ```python
    from news_scout.report.html_report import render_html
    html_path = render_html(report, 'reports/articles.html')
    ```
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(render_page(report, template_dir), encoding="utf-8")
    return output_path
