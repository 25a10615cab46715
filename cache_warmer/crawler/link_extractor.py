# cache_warmer/crawler/link_extractor.py
"""
Link extraction for CacheWarmer: anchor hrefs found by pattern matching.
"""
from __future__ import annotations

import html
import re
from typing import List

_HREF_RE = re.compile(r"""<a\s+href=["']([^"']+)["']""", re.IGNORECASE)


def find_hrefs(markup: str) -> List[str]:
    """
    Return raw href values of ``<a href="...">`` tags, in document order.

    Only anchors whose first attribute is href are matched; entities are
    left as written in the document.
    """
    return _HREF_RE.findall(markup)


def decode_href(href: str) -> str:
    return html.unescape(href)


def extract_links(markup: str) -> List[str]:
    """Entity-decoded hrefs of every anchor in *markup*."""
    return [decode_href(h) for h in find_hrefs(markup)]
