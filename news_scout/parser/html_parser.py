# === FILE: news_scout/parser/html_parser.py ===
"""HTML parsing utilities for NewsScout.

Pure functions over page markup, no network access:

* :func:`parse_article`: headline and raw date string of an article page.
* :func:`parse_date`: flexible date parsing into an aware UTC datetime.
* :func:`parse_listing`: article links and the pagination link of a
  homepage / "more stories" page.

The selectors come from :class:`~news_scout.config.ScraperConfig` and are a
contract with the external site's markup. When the site changes its markup
these functions simply stop finding things; nothing here tries to adapt.
"""
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag
from dateutil import parser as dateparser

from news_scout.config import ScraperConfig
from news_scout.crawler.models import PageLinks

__all__: Sequence[str] = ("ArticleFields", "parse_article", "parse_date", "parse_listing")

# Missing date components (year, month, day, time) are taken from here
_DATE_DEFAULT = datetime(1970, 1, 1)


@dataclass(slots=True)
class ArticleFields:
    """Raw fields of an article page; ``None`` means absent."""

    headline: Optional[str]
    date_text: Optional[str]


def _attr(tag: Tag, name: str) -> Optional[str]:
    value = tag.get(name)
    if isinstance(value, list):
        value = " ".join(value)
    if not isinstance(value, str):
        return None
    return value.strip() or None


def parse_article(html: str, config: ScraperConfig) -> ArticleFields:
    """Extract headline and date string from article markup.

    The date prefers the machine-readable attribute (``datetime`` by default)
    and falls back to the visible text of the same element.
    """
    soup = BeautifulSoup(html, "html.parser")

    headline: Optional[str] = None
    heading = soup.select_one(config.headline_selector)
    if heading is not None:
        headline = heading.get_text().strip() or None

    date_text: Optional[str] = None
    date_tag = soup.select_one(config.date_selector)
    if date_tag is not None:
        date_text = _attr(date_tag, config.date_attribute) or date_tag.get_text().strip() or None

    return ArticleFields(headline=headline, date_text=date_text)


def parse_date(text: Optional[str]) -> Optional[datetime]:
    """Parse *text* into an aware UTC datetime, ``None`` if it is not a date.

    Naive values are interpreted as UTC.
    """
    if not text or not text.strip():
        return None
    try:
        parsed = dateparser.parse(text.strip(), default=_DATE_DEFAULT)
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=timezone.utc)
        # may leave the datetime range, e.g. 0001-01-01T00:00:00+01:00
        return parsed.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        return None


def _parent_href(tag: Optional[Tag], base_url: str) -> Optional[str]:
    if tag is None or not isinstance(tag.parent, Tag):
        return None
    href = _attr(tag.parent, "href")
    return urljoin(base_url, href) if href else None


def parse_listing(html: str, config: ScraperConfig) -> PageLinks:
    """Collect article links and the next page link from listing markup.

    Article anchors are those whose raw ``href`` starts with
    ``config.article_prefix``; they keep document order and duplicates.

    Pagination is decided in two steps. If the landing page "more stories"
    marker is present, its link wins and the "Next" marker is not looked at.
    Otherwise the first ``next_selector`` element whose stripped text equals
    ``next_label`` is used. In both cases the link is the ``href`` of the
    marker's parent anchor.
    """
    soup = BeautifulSoup(html, "html.parser")
    base_url = config.origin

    links: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        href = tag.get("href")
        if isinstance(href, str) and href.startswith(config.article_prefix):
            links.append(urljoin(base_url, href))

    more_stories = _parent_href(soup.select_one(config.more_stories_selector), base_url)
    if more_stories:
        return PageLinks(article_links=links, next_page_url=more_stories)

    next_marker = next(
        (t for t in soup.select(config.next_selector) if t.get_text().strip() == config.next_label),
        None,
    )
    return PageLinks(article_links=links, next_page_url=_parent_href(next_marker, base_url))
