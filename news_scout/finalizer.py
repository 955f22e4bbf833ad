# File: news_scout/finalizer.py
"""news_scout.finalizer: дедупликация, сортировка и итоговый отчёт по статьям."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

from news_scout.crawler.models import ArticleRecord, CrawlStats

__all__ = ["ArticleReport", "finalize"]


def finalize(records: Iterable[ArticleRecord]) -> List[ArticleRecord]:
    """Убирает повторы по заголовку (первый побеждает) и сортирует по дате, новые сверху.

    Сортировка стабильна: при равных датах сохраняется входной порядок.
    """
    seen: set[str] = set()
    unique: List[ArticleRecord] = []
    for record in records:
        if record.headline in seen:
            continue
        seen.add(record.headline)
        unique.append(record)
    return sorted(unique, key=lambda r: r.published, reverse=True)


@dataclass(slots=True)
class ArticleReport:
    """Итог обхода: отсортированные статьи и статистика."""

    articles: List[ArticleRecord] = field(default_factory=list)
    stats: Optional[CrawlStats] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "articles": [a.to_dict() for a in self.articles],
            "stats": self.stats.to_dict() if self.stats else {},
        }

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.to_dict(), ensure_ascii=False, indent=2 if pretty else None)
