# cache_warmer/crawler/frontier.py
"""
Frontier: FIFO queue of discovered URLs plus the visited-set.

Each URL identity (see :func:`cache_warmer.urls.normalize`) moves only
forward: unseen -> pending -> visited.
"""
from __future__ import annotations

from collections import deque
from typing import Deque, List, Set

from cache_warmer.urls import normalize


class Frontier:
    """Breadth-first crawl queue with identity-based deduplication."""

    def __init__(self) -> None:
        self._queue: Deque[str] = deque()
        self._pending: Set[str] = set()
        self._visited: Set[str] = set()

    def enqueue(self, url: str) -> bool:
        """Append *url* unless its identity is already pending or visited."""
        key = normalize(url)
        if key in self._pending or key in self._visited:
            return False
        self._pending.add(key)
        self._queue.append(url)
        return True

    def dequeue_batch(self, n: int) -> List[str]:
        """Pop up to *n* URLs from the front, preserving order."""
        if n < 1:
            raise ValueError("batch size must be >= 1")
        batch: List[str] = []
        while self._queue and len(batch) < n:
            batch.append(self._queue.popleft())
        return batch

    def mark_visited(self, url: str) -> None:
        key = normalize(url)
        self._pending.discard(key)
        self._visited.add(key)

    def is_visited(self, url: str) -> bool:
        return normalize(url) in self._visited

    @property
    def visited_count(self) -> int:
        return len(self._visited)

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
