# File: cache_warmer/urls.py
"""cache_warmer.urls: нормализация, разрешение и классификация URL."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence
from urllib.parse import urlsplit, urlunsplit

from cache_warmer.config import SKIP_EXTENSIONS

__all__: Sequence[str] = (
    "normalize",
    "resolve",
    "is_same_host",
    "is_fetchable",
)

_WEB_SCHEMES = ("http", "https")


def normalize(url: str) -> str:
    """Ключ дедупликации: ``path?query`` без схемы, хоста и фрагмента."""
    parts = urlsplit(url)
    return f"{parts.path or '/'}?{parts.query}"


def resolve(base: str, href: str) -> Optional[str]:
    """Превращает href в абсолютный URL относительно base.

    Абсолютные ссылки возвращаются без изменений, ``/path`` привязывается к
    корню хоста, прочие относительные ссылки дописываются к base через один
    слеш. Для схем вроде ``mailto:`` и для ссылок, которые не удаётся
    разобрать (``//[oops/x``), возвращается None.
    """
    href = href.strip()
    try:
        parts = urlsplit(href)
    except ValueError:
        return None
    if parts.scheme and parts.scheme.lower() not in _WEB_SCHEMES:
        return None
    if parts.netloc:
        if not parts.scheme:
            return f"{urlsplit(base).scheme}:{href}"
        return href

    base_parts = urlsplit(base)
    if href.startswith("/"):
        origin = urlunsplit((base_parts.scheme, base_parts.netloc, "", "", ""))
        return origin + href
    return base.rstrip("/") + "/" + href.lstrip("/")


def is_same_host(base: str, url: str) -> bool:
    """Сравнивает сетевые части двух абсолютных URL (с учётом регистра)."""
    return urlsplit(base).netloc == urlsplit(url).netloc


def is_fetchable(url: str, extensions: Iterable[str] = SKIP_EXTENSIONS) -> bool:
    """False, если путь заканчивается на расширение из списка (картинки, pdf)."""
    path = urlsplit(url).path.lower()
    return not path.endswith(tuple(f".{ext.lower()}" for ext in extensions))
