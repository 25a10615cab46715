# File: cache_warmer/engine.py
"""cache_warmer.engine: запуск прогрева по готовой конфигурации."""

from __future__ import annotations

import asyncio
import signal
from typing import Optional, Sequence

from cache_warmer.aggregator import CrawlReport
from cache_warmer.blacklist import load_patterns, load_seed_urls
from cache_warmer.config import WarmerConfig
from cache_warmer.crawler.crawler import CacheWarmer
from cache_warmer.logger import logger

__all__ = ["start_crawl"]


async def start_crawl(
    cfg: WarmerConfig,
    *,
    blacklist: Optional[Sequence[str]] = None,
    seeds: Optional[Sequence[str]] = None,
    handle_signals: bool = False,
) -> CrawlReport:
    """
    Загружает чёрный список и дополнительные URL (если не переданы явно),
    запускает CacheWarmer в контексте и возвращает CrawlReport.

    При ``handle_signals=True`` SIGINT/SIGTERM не прерывают процесс, а
    останавливают обход после текущей пачки.
    """
    if blacklist is None:
        blacklist = load_patterns(cfg.blacklist_file)
    if seeds is None:
        seeds = load_seed_urls(cfg.seed_file)

    logger.info("Starting crawl…")
    async with CacheWarmer(cfg, blacklist=blacklist, seeds=seeds) as warmer:
        if handle_signals:
            _install_stop_handlers(warmer)
        return await warmer.crawl()


def _install_stop_handlers(warmer: CacheWarmer) -> None:
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _request_stop, warmer, sig)
        except (NotImplementedError, RuntimeError, ValueError):
            # Windows loops and non-main threads have no signal handlers
            logger.debug("Cannot install handler for %s", sig)


def _request_stop(warmer: CacheWarmer, sig: signal.Signals) -> None:
    logger.warning("Received %s, finishing current batch…", sig.name)
    warmer.stop()
