from __future__ import annotations

import asyncio
import logging
import time
from typing import List, Optional, Sequence

from aiohttp import ClientSession, ClientTimeout

from cache_warmer.aggregator import CrawlReport
from cache_warmer.blacklist import is_blacklisted
from cache_warmer.config import WarmerConfig
from cache_warmer.crawler.fetcher import Fetcher
from cache_warmer.crawler.frontier import Frontier
from cache_warmer.crawler.link_extractor import decode_href, find_hrefs
from cache_warmer.crawler.models import FetchResult
from cache_warmer.crawler.seeder import SitemapSeeder
from cache_warmer.urls import is_fetchable, is_same_host, resolve

__all__ = ("CacheWarmer",)


class CacheWarmer:
    """Обход сайта пачками фиксированного размера для прогрева кэша."""

    def __init__(
        self,
        config: WarmerConfig,
        blacklist: Sequence[str] = (),
        seeds: Sequence[str] = (),
    ) -> None:
        self.config = config
        self.base_url: str = str(config.base_url)
        self.sitemap_url: Optional[str] = str(config.sitemap_url) if config.sitemap_url else None
        self.concurrency: int = config.concurrency
        self.blacklist: List[str] = list(blacklist)
        self.seeds: List[str] = list(seeds)
        self.session: Optional[ClientSession] = None
        self.fetcher: Optional[Fetcher] = None
        self.logger = logging.getLogger("CacheWarmer")
        self._stop = asyncio.Event()
        self._loaded = 0

    async def __aenter__(self) -> CacheWarmer:
        self.session = ClientSession(
            timeout=ClientTimeout(total=self.config.timeout),
            headers={"User-Agent": self.config.user_agent},
            raise_for_status=False,
        )
        self.fetcher = Fetcher(self.session, self.config)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if self.session and not self.session.closed:
            await self.session.close()

    def stop(self) -> None:
        """Не начинать новых пачек; текущая пачка дорабатывает до конца."""
        self._stop.set()

    @property
    def stopping(self) -> bool:
        return self._stop.is_set()

    async def crawl(self) -> CrawlReport:
        if not self.fetcher:
            raise RuntimeError("Session not initialized")
        self.logger.info("Warming started: %s (concurrency %d)", self.base_url, self.concurrency)
        start = time.monotonic()
        frontier = Frontier()
        report = CrawlReport()
        self._loaded = 0

        seeder = SitemapSeeder(self.fetcher, self._enqueue_link)
        await seeder.seed(frontier, self.base_url, self.sitemap_url, self.seeds)

        while not self.stopping:
            batch = frontier.dequeue_batch(self.concurrency)
            if not batch:
                break
            await self._run_batch(batch, frontier, report)

        report.stopped = self.stopping
        report.elapsed = time.monotonic() - start
        self.logger.info(
            "Finished: %d loaded, %d skipped in %.2f s",
            len(report.visited), len(report.skipped), report.elapsed,
        )
        if report.stopped:
            self.logger.info("Stopped on request, %d URLs left in the frontier", len(frontier))
        return report

    async def _run_batch(self, batch: List[str], frontier: Frontier, report: CrawlReport) -> None:
        to_fetch: List[str] = []
        for url in batch:
            if (
                frontier.is_visited(url)
                or not is_fetchable(url, self.config.skip_extensions)
                or is_blacklisted(url, self.blacklist)
            ):
                self.logger.info("Skipping URL: %s", url)
                report.record_skip(url)
            else:
                to_fetch.append(url)

        results = await asyncio.gather(*(self.fetcher.fetch(url) for url in to_fetch))

        # all batch members count as attempted, whatever the outcome
        for url in batch:
            frontier.mark_visited(url)

        for result in results:
            self.logger.info(
                "Loading URL #%d: %s | Response Code: %s | Time: %.2fms",
                self._loaded, result.url, result.status if result.status is not None else "none",
                result.elapsed_ms,
            )
            self._loaded += 1
            report.record_fetch(result)
            if result.ok:
                self._expand(result, frontier, report)

    def _expand(self, result: FetchResult, frontier: Frontier, report: CrawlReport) -> None:
        hrefs = find_hrefs(result.body or "")
        if self.config.debug:
            report.record_links(result.url, hrefs)
        added = sum(self._enqueue_link(frontier, decode_href(href)) for href in hrefs)
        self.logger.debug("%s: %d links, %d new", result.url, len(hrefs), added)

    def _enqueue_link(self, frontier: Frontier, href: str) -> bool:
        # relative hrefs join the crawl base URL, not the page they were found on
        url = resolve(self.base_url, href)
        if url is None or not is_same_host(self.base_url, url):
            return False
        if is_blacklisted(url, self.blacklist):
            return False
        return frontier.enqueue(url)
