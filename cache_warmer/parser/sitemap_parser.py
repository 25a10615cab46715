# File: cache_warmer/parser/sitemap_parser.py
"""cache_warmer.parser.sitemap_parser: Модуль для парсинга sitemap.xml и извлечения URL."""

from __future__ import annotations

from typing import List, Union

from lxml import etree


def parse_sitemap(xml_content: Union[str, bytes]) -> List[str]:
    """Разбирает XML sitemap и возвращает список URL из тегов <url><loc>.

    Args:
        xml_content: содержимое sitemap.xml (str или bytes).

    Returns:
        Список URL в порядке следования в документе. Пустой документ даёт [].

    Raises:
        lxml.etree.XMLSyntaxError: если документ не является XML.

    Пример:
    ```python
    from cache_warmer.parser.sitemap_parser import parse_sitemap

    with open('sitemap.xml', encoding='utf-8') as f:
        urls = parse_sitemap(f.read())
    ```
    """
    if isinstance(xml_content, str):
        xml_content = xml_content.encode("utf-8")
    if not xml_content.strip():
        return []
    parser = etree.XMLParser(ns_clean=True, recover=False, resolve_entities=False)
    root = etree.fromstring(xml_content, parser=parser)
    locs = root.findall(".//{*}url/{*}loc")
    return [loc.text.strip() for loc in locs if loc.text and loc.text.strip()]
