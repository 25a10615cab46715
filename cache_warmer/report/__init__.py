"""cache_warmer.report: вывод результатов прогона (консоль, JSON, HTML)."""

from cache_warmer.report.html_report import render_html
from cache_warmer.report.json_report import render_json
from cache_warmer.report.text_report import format_duration, render_text

__all__ = ["render_json", "render_html", "render_text", "format_duration"]
