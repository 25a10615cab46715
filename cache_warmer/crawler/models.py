# cache_warmer/crawler/models.py
"""
Data models for the CacheWarmer crawler.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(slots=True)
class FetchResult:
    """Outcome of one GET request. Consumed right after the batch finishes."""

    url: str
    status: Optional[int]
    body: Optional[str]
    elapsed: float
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 200 and bool(self.body)

    @property
    def elapsed_ms(self) -> float:
        return round(self.elapsed * 1000, 2)


@dataclass(slots=True)
class FetchStat:
    """Status and latency of a fetched URL, kept for the report."""

    url: str
    status: Optional[int]
    elapsed_ms: float
