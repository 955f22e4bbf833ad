# news_scout/report/json_report.py

"""
Генерация JSON-отчёта для проекта NewsScout.

Сериализация объекта ArticleReport в файл.
"""
import json
from pathlib import Path

from news_scout.finalizer import ArticleReport


def render_json(report: ArticleReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект ArticleReport с найденными статьями
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 при True
    :return: Path сохранённого файла
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(report.to_dict(), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
