# cache_warmer/crawler/seeder.py
"""
Initial frontier population: base URL, extra seeds, sitemap locations.
"""
from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from lxml import etree

from cache_warmer.crawler.fetcher import Fetcher
from cache_warmer.crawler.frontier import Frontier
from cache_warmer.logger import logger
from cache_warmer.parser.sitemap_parser import parse_sitemap


class SitemapSeeder:
    """Fetches the sitemap once and feeds its ``<loc>`` entries to the frontier."""

    def __init__(self, fetcher: Fetcher, admit: Callable[[Frontier, str], bool]) -> None:
        self.fetcher = fetcher
        self._admit = admit

    async def seed(
        self,
        frontier: Frontier,
        base_url: str,
        sitemap_url: Optional[str],
        extra: Iterable[str] = (),
    ) -> int:
        """Enqueue *base_url*, then *extra*, then sitemap entries.

        Returns the number of URLs that were newly enqueued.
        """
        added = int(frontier.enqueue(base_url))
        for url in extra:
            added += self._admit(frontier, url)
        for url in await self.sitemap_locations(sitemap_url):
            added += self._admit(frontier, url)
        logger.info("Frontier seeded with %d URLs", added)
        return added

    async def sitemap_locations(self, sitemap_url: Optional[str]) -> List[str]:
        """Return sitemap ``<loc>`` values; any failure yields an empty list."""
        if not sitemap_url:
            return []
        result = await self.fetcher.fetch(sitemap_url)
        if result.status != 200 or not result.body:
            logger.warning(
                "Sitemap %s unavailable (status %s), seeding with base URL only",
                sitemap_url,
                result.status,
            )
            return []
        try:
            locations = parse_sitemap(result.body)
        except etree.XMLSyntaxError as exc:
            logger.warning("Malformed sitemap %s: %s", sitemap_url, exc)
            return []
        logger.info("Sitemap %s lists %d URLs", sitemap_url, len(locations))
        return locations
