"""Парсеры внешних документов (sitemap)."""
from cache_warmer.parser.sitemap_parser import parse_sitemap

__all__ = ["parse_sitemap"]
