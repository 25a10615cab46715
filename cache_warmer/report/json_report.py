# cache_warmer/report/json_report.py

"""
Генерация JSON-отчёта для CacheWarmer.

Сериализация объекта CrawlReport в файл.
"""
from pathlib import Path

from cache_warmer.aggregator import CrawlReport


def render_json(report: CrawlReport, output_path: Path | str, *, pretty: bool = True) -> Path:
    """
    Сохраняет отчёт report в формате JSON по указанному пути.

    :param report: объект CrawlReport с данными прогона
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from cache_warmer.report.json_report import render_json
    report_path = render_json(report, 'reports/warmup.json')
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(report.json(pretty=pretty), encoding="utf-8")
    return output
