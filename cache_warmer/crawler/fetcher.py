# cache_warmer/crawler/fetcher.py
"""
Fetcher module: one GET per URL with a fixed timeout, no retries.
"""
from __future__ import annotations

import asyncio
import time

from aiohttp import ClientError, ClientSession

from cache_warmer.config import WarmerConfig
from cache_warmer.crawler.models import FetchResult
from cache_warmer.logger import logger


class Fetcher:
    """Issues GET requests on a shared session and times them."""

    def __init__(self, session: ClientSession, config: WarmerConfig) -> None:
        self.session = session
        self.config = config

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch *url*, following redirects.

        Never raises on network problems: transport errors and timeouts
        produce a FetchResult with ``status=None``.
        """
        # verify_tls is off by default: ssl=False lets staging and self-signed hosts be warmed
        ssl = bool(self.config.verify_tls)
        start = time.perf_counter()
        try:
            async with self.session.get(url, ssl=ssl, allow_redirects=True) as resp:
                text = await resp.text(errors="replace")
                return FetchResult(
                    url=url,
                    status=resp.status,
                    body=text or None,
                    elapsed=time.perf_counter() - start,
                )
        except asyncio.TimeoutError:
            logger.warning("Timeout after %.1f s: %s", self.config.timeout, url)
            return FetchResult(url, None, None, time.perf_counter() - start, "timeout")
        except ClientError as exc:
            logger.warning("Failed %s: %s", url, exc)
            return FetchResult(url, None, None, time.perf_counter() - start, str(exc) or type(exc).__name__)
