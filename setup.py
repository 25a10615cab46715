# setup.py
from setuptools import setup, find_packages

setup(
    name="cache_warmer",
    version="0.1.0",
    description="Асинхронный прогрев кэша сайта по sitemap и внутренним ссылкам",
    packages=find_packages(include=["cache_warmer", "cache_warmer.*"]),
    package_data={"cache_warmer": ["templates/*.j2"]},
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.1",
        "jinja2>=3.1",
        "lxml>=5.0",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": ["pytest>=8.0", "pytest-asyncio>=0.23"],
    },
    entry_points={
        "console_scripts": ["cache-warmer=cache_warmer.cli:cli"],
    },
    python_requires=">=3.11",
)
