# File: cache_warmer/report/html_report.py
"""cache_warmer.report.html_report: Генерация HTML-отчёта с помощью Jinja2."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Union

from jinja2 import Environment, FileSystemLoader, select_autoescape

from cache_warmer.aggregator import CrawlReport
from cache_warmer.report.text_report import format_duration

DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
TEMPLATE_NAME = "report.html.j2"


def render_html(
    report: CrawlReport,
    output_path: Union[Path, str],
    template_dir: Optional[Union[Path, str]] = None,
) -> Path:
    """Рендерит HTML-отчёт из шаблона и сохраняет его по указанному пути.

    Args:
        report: объект CrawlReport.
        output_path: путь к итоговому HTML-файлу.
        template_dir: директория с шаблоном ``report.html.j2``;
            по умолчанию используется встроенный шаблон пакета.

    Returns:
        Path до сохранённого HTML-файла.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    env = Environment(
        loader=FileSystemLoader(str(template_dir or DEFAULT_TEMPLATE_DIR)),
        autoescape=select_autoescape(["html", "xml", "j2"]),
    )
    template = env.get_template(TEMPLATE_NAME)

    context: dict[str, Any] = {
        "visited": report.visited,
        "skipped": report.skipped,
        "fetches": report.fetches,
        "debug_trace": report.debug_trace,
        "elapsed": format_duration(report.elapsed),
        "stopped": report.stopped,
    }

    output_path.write_text(template.render(**context), encoding="utf-8")
    return output_path
