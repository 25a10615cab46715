# cache_warmer/__init__.py
"""
CacheWarmer package initializer.
Defines package version; the CLI lives in :mod:`cache_warmer.cli`.
"""
__version__ = "0.1.0"
