# File: tests/test_config.py
import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from cache_warmer.config import SKIP_EXTENSIONS, WarmerConfig, load_config


def write_file(tmp_path: Path, content: str, suffix: str) -> Path:
    path = tmp_path / f"config{suffix}"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "content,suffix,expect_exc",
    [
        ("base_url: http://example.com\nconcurrency: 4", ".yaml", None),
        (json.dumps({"base_url": "http://example.com", "concurrency": 4}), ".json", None),
        ("{}", ".json", ValidationError),
        ("not: a: mapping", ".yaml", ValueError),
        ("::invalid yaml", ".yaml", TypeError),
        ("{broken json", ".json", ValueError),
        ("base_url = 'x'", ".toml", ValueError),
    ],
)
def test_load_config_variants(tmp_path, content, suffix, expect_exc):
    cfg_path = write_file(tmp_path, content, suffix)
    if expect_exc:
        with pytest.raises(expect_exc):
            load_config(cfg_path)
    else:
        cfg = load_config(cfg_path)
        assert isinstance(cfg, WarmerConfig)
        assert str(cfg.base_url).rstrip("/") == "http://example.com"
        assert cfg.concurrency == 4


def test_defaults():
    cfg = WarmerConfig(base_url="https://example.com")
    assert cfg.sitemap_url is None
    assert cfg.concurrency == 1
    assert cfg.timeout == 10.0
    assert cfg.verify_tls is False
    assert cfg.debug is False
    assert cfg.blacklist_file == Path("blacklist")
    assert cfg.seed_file == Path("urls")
    assert cfg.skip_extensions == SKIP_EXTENSIONS


def test_overrides_win_over_file_and_none_is_ignored(tmp_path):
    cfg_path = write_file(tmp_path, "base_url: http://example.com\nconcurrency: 4\ntimeout: 3", ".yaml")
    cfg = load_config(cfg_path, base_url="https://other.org", concurrency=8, timeout=None)
    assert str(cfg.base_url).startswith("https://other.org")
    assert cfg.concurrency == 8
    assert cfg.timeout == 3


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yaml")


@pytest.mark.parametrize("field,value", [("concurrency", 0), ("timeout", 0), ("unknown", 1)])
def test_invalid_values(field, value):
    with pytest.raises(ValidationError):
        WarmerConfig(base_url="https://example.com", **{field: value})


def test_skip_extensions_are_cleaned():
    cfg = WarmerConfig(base_url="https://example.com", skip_extensions=[".PDF", " zip ", ""])
    assert cfg.skip_extensions == ("pdf", "zip")


def test_config_is_frozen():
    cfg = WarmerConfig(base_url="https://example.com")
    with pytest.raises(ValidationError):
        cfg.concurrency = 5


@pytest.mark.parametrize(
    "raw",
    ["http://LOCALHOST:8080", "https://example.com:443/shop/", "https://bücher.de", " https://example.com "],
)
def test_base_url_is_kept_as_written(raw):
    assert WarmerConfig(base_url=raw).base_url == raw.strip()


def test_base_url_must_be_http():
    with pytest.raises(ValidationError):
        WarmerConfig(base_url="ftp://example.com")
