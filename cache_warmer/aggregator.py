# File: cache_warmer/aggregator.py
"""cache_warmer.aggregator: накопление результатов прогона (visited, skipped, debug)."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from cache_warmer.crawler.models import FetchResult, FetchStat


@dataclass(slots=True)
class CrawlReport:
    """Итог одного прогона: загруженные, пропущенные URL и отладочные ссылки."""

    visited: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    debug_trace: Dict[str, List[str]] = field(default_factory=dict)
    fetches: List[FetchStat] = field(default_factory=list)
    elapsed: float = 0.0
    stopped: bool = False

    def record_fetch(self, result: FetchResult) -> None:
        """Учитывает ответ: 200 с телом попадает в visited, остальное в skipped."""
        self.fetches.append(FetchStat(result.url, result.status, result.elapsed_ms))
        if result.ok:
            self.visited.append(result.url)
        else:
            self.skipped.append(result.url)

    def record_skip(self, url: str) -> None:
        self.skipped.append(url)

    def record_links(self, source: str, hrefs: List[str]) -> None:
        self.debug_trace[source] = list(hrefs)

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def json(self, *, pretty: bool = False) -> str:
        """Возвращает JSON-представление отчёта."""
        return json.dumps(self.as_dict(), ensure_ascii=False, indent=2 if pretty else None)
