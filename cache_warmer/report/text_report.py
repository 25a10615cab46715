# cache_warmer/report/text_report.py
"""
Человекочитаемый вывод результатов прогона для консоли.
"""
from __future__ import annotations

from typing import List

from cache_warmer.aggregator import CrawlReport


def format_duration(seconds: float) -> str:
    """``125.3`` -> ``'2m 5.3s'``."""
    minutes, rest = divmod(seconds, 60)
    return f"{int(minutes)}m {round(rest, 2)}s"


def render_text(report: CrawlReport, *, debug: bool = False) -> str:
    lines: List[str] = ["Visited URLs:"]
    lines += [f"  {url}" for url in report.visited]
    lines.append(f"Total URLs loaded: {len(report.visited)}")

    lines.append(f"Skipped URLs: {len(report.skipped)}")
    lines += [f"  {url}" for url in report.skipped]

    if debug:
        lines.append("")
        lines.append("Debug Information:")
        for source, hrefs in report.debug_trace.items():
            lines.append(f"  {source} ({len(hrefs)} links)")
            lines += [f"    {href}" for href in hrefs]

    if report.stopped:
        lines.append("Crawl stopped before the frontier was empty.")
    lines.append(f"Total execution time: {format_duration(report.elapsed)}")
    return "\n".join(lines)
