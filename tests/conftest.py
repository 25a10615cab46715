# File: tests/conftest.py
from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from typing import Dict

import pytest
import pytest_asyncio
from aiohttp import web

from cache_warmer.config import WarmerConfig

Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


def pytest_configure(config):
    """Register custom markers so that `--strict-markers` does not fail."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests as slow (deselect with '-m \"not slow\"')",
    )


# --------------------------------------------------------------------------- #
#                            Handler builders                                 #
# --------------------------------------------------------------------------- #


def html_page(markup: str, hits: Dict[str, int] | None = None) -> Handler:
    """Handler returning *markup* as text/html, counting hits per path."""

    async def handler(request: web.Request) -> web.Response:
        if hits is not None:
            hits[request.path] = hits.get(request.path, 0) + 1
        return web.Response(text=markup, content_type="text/html")

    return handler


def sitemap(*paths: str) -> Handler:
    """Handler serving a sitemap whose <loc> entries are absolute URLs on this server."""

    async def handler(request: web.Request) -> web.Response:
        origin = str(request.url.origin())
        entries = "".join(f"<url><loc>{origin}{p}</loc></url>" for p in paths)
        body = (
            '<?xml version="1.0" encoding="UTF-8"?>'
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">'
            f"{entries}</urlset>"
        )
        return web.Response(text=body, content_type="application/xml")

    return handler


# --------------------------------------------------------------------------- #
#                                  Fixtures                                   #
# --------------------------------------------------------------------------- #


@pytest_asyncio.fixture
async def serve(unused_tcp_port: int) -> AsyncIterator[Callable[[Dict[str, Handler]], Awaitable[str]]]:
    """Start a local aiohttp app from a ``{path: handler}`` map, yield its base URL."""
    runners: list[web.AppRunner] = []

    async def _serve(routes: Dict[str, Handler]) -> str:
        app = web.Application()
        for path, handler in routes.items():
            app.router.add_get(path, handler)
        runner = web.AppRunner(app)
        await runner.setup()
        await web.TCPSite(runner, "127.0.0.1", unused_tcp_port).start()
        runners.append(runner)
        return f"http://127.0.0.1:{unused_tcp_port}"

    try:
        yield _serve
    finally:
        for runner in runners:
            await runner.cleanup()


@pytest.fixture()
def make_config() -> Callable[..., WarmerConfig]:
    """Config factory with no blacklist/seed files unless given explicitly."""

    def _make(base_url: str, **kwargs) -> WarmerConfig:
        kwargs.setdefault("sitemap_url", f"{base_url}/sitemap.xml")
        kwargs.setdefault("timeout", 2.0)
        kwargs.setdefault("user_agent", "TestAgent/1.0")
        kwargs.setdefault("blacklist_file", None)
        kwargs.setdefault("seed_file", None)
        return WarmerConfig(base_url=base_url, **kwargs)

    return _make
