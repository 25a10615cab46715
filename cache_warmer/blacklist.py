# File: cache_warmer/blacklist.py
"""cache_warmer.blacklist: чтение списков шаблонов и фильтрация URL по подстрокам."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from cache_warmer.logger import logger

__all__: Sequence[str] = ("is_blacklisted", "load_patterns", "load_seed_urls", "read_lines")


def read_lines(path: Union[str, Path, None], label: str) -> List[str]:
    """Читает файл построчно, отбрасывая пустые строки.

    Отсутствующий файл не является ошибкой: пишется предупреждение и
    возвращается пустой список.
    """
    if path is None:
        return []
    p = Path(path).expanduser()
    if not p.is_file():
        logger.warning("%s file not found (%s), proceeding without it", label, p)
        return []
    lines = [line.strip() for line in p.read_text(encoding="utf-8").splitlines() if line.strip()]
    logger.info("%s loaded with %d entries from %s", label, len(lines), p)
    return lines


def load_patterns(path: Union[str, Path, None]) -> List[str]:
    """Шаблоны чёрного списка: по одной подстроке на строку."""
    return read_lines(path, "Blacklist")


def load_seed_urls(path: Union[str, Path, None]) -> List[str]:
    """Дополнительные стартовые URL: по одному на строку."""
    return read_lines(path, "Seed")


def is_blacklisted(url: str, patterns: Optional[Iterable[str]]) -> bool:
    """True, если хотя бы один шаблон входит в url без учёта регистра."""
    if not patterns:
        return False
    lowered = url.lower()
    return any(pattern.lower() in lowered for pattern in patterns)
