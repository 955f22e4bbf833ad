# File: tests/test_finalizer.py
from __future__ import annotations

import json
from datetime import datetime, timezone

from news_scout.crawler.models import ArticleRecord, CrawlStats, ExtractResult, SkipReason
from news_scout.finalizer import ArticleReport, finalize


def record(headline: str, day: str, url: str = "") -> ArticleRecord:
    published = datetime.fromisoformat(day).replace(tzinfo=timezone.utc)
    return ArticleRecord(headline, published, url or f"https://news.example.com/{headline}/{day}")


def test_finalize_dedupes_first_and_sorts_descending():
    records = [record("A", "2022-03-01"), record("B", "2022-05-01"), record("A", "2022-01-01")]
    result = finalize(records)
    assert [(r.headline, r.published.date().isoformat()) for r in result] == [
        ("B", "2022-05-01"),
        ("A", "2022-03-01"),
    ]


def test_finalize_ties_keep_input_order():
    records = [record("X", "2022-02-02"), record("Y", "2022-02-02"), record("Z", "2022-02-02")]
    assert [r.headline for r in finalize(records)] == ["X", "Y", "Z"]


def test_finalize_is_case_sensitive_and_pure():
    records = [record("Story", "2022-01-02"), record("story", "2022-01-03")]
    snapshot = list(records)
    result = finalize(records)
    assert [r.headline for r in result] == ["story", "Story"]
    assert records == snapshot


def test_finalize_empty():
    assert finalize([]) == []


def test_report_json():
    stats = CrawlStats(pages=1)
    stats.add(ExtractResult("u1", record=record("A", "2022-03-01", "u1")))
    stats.add(ExtractResult("u2", reason=SkipReason.BEFORE_CUTOFF))
    report = ArticleReport(articles=[record("A", "2022-03-01", "u1")], stats=stats)

    data = json.loads(report.json(pretty=True))
    assert data["articles"] == [{"headline": "A", "date": "2022-03-01T00:00:00.000Z", "url": "u1"}]
    assert data["stats"]["records"] == 1
    assert data["stats"]["skipped"] == {"before_cutoff": 1}
