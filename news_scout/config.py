# === FILE: news_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации NewsScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from datetime import date, datetime, time, timezone
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    HttpUrl,
    field_validator,
)

__all__ = ["ScraperConfig", "load_config", "DEFAULT_CONFIG_PATH"]


class ScraperConfig(BaseModel):
    """Конфигурация одного запуска обхода новостного сайта."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    base_url: HttpUrl = Field(
        "https://www.theverge.com", description="Origin сайта, от которого строятся абсолютные ссылки."
    )
    start_url: Optional[HttpUrl] = Field(
        None, description="Первая страница обхода (по умолчанию base_url)."
    )
    cutoff_date: date = Field(
        date(2022, 1, 1), description="Статьи, опубликованные раньше этой даты (UTC), отбрасываются."
    )

    # Селекторы: контракт с разметкой внешнего сайта
    article_prefix: str = Field("/202", min_length=1, description="Префикс href ссылок на статьи.")
    headline_selector: str = Field("h1", min_length=1)
    date_selector: str = Field("time", min_length=1)
    date_attribute: str = Field("datetime", min_length=1)
    more_stories_selector: str = Field("span._1b2cyqa6._1b2cyqa4", min_length=1)
    next_selector: str = Field("span.mxmugz5.mxmugz3", min_length=1)
    next_label: str = Field("Next", min_length=1)

    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Лимит одновременных загрузок статей одной страницы."
    )

    host: str = Field("0.0.0.0", min_length=1, description="Адрес HTTP-сервиса.")
    port: int = Field(3000, ge=1, le=65535, description="Порт HTTP-сервиса.")

    @field_validator("article_prefix")
    @classmethod
    def _prefix_is_path(cls, v: str) -> str:
        if not v.startswith("/"):
            raise ValueError("article_prefix must start with '/'")
        return v

    @property
    def origin(self) -> str:
        return str(self.base_url)

    @property
    def entry_url(self) -> str:
        return str(self.start_url or self.base_url)

    @property
    def cutoff(self) -> datetime:
        """Cutoff as an aware datetime: midnight UTC of ``cutoff_date``."""
        return datetime.combine(self.cutoff_date, time.min, tzinfo=timezone.utc)


DEFAULT_CONFIG_PATH = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.

    Без явного пути используется configs/default.yaml, а если его нет,
    значения по умолчанию. Явно указанный, но отсутствующий файл даёт
    FileNotFoundError.
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.is_file():
            return ScraperConfig()
        path_obj = DEFAULT_CONFIG_PATH
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    # ValidationError пробрасывается вызывающему как есть
    return ScraperConfig(**data)
