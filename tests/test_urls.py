import pytest

from cache_warmer.urls import is_fetchable, is_same_host, normalize, resolve


@pytest.mark.parametrize(
    "base,href,expected",
    [
        ("https://example.com/blog/", "page2", "https://example.com/blog/page2"),
        ("https://example.com/blog", "page2", "https://example.com/blog/page2"),
        ("https://example.com/blog/", "/about", "https://example.com/about"),
        ("https://example.com", "/about?x=1", "https://example.com/about?x=1"),
        ("https://example.com/", "https://other.org/x", "https://other.org/x"),
        ("https://example.com/", "//cdn.example.com/a", "https://cdn.example.com/a"),
    ],
)
def test_resolve(base, href, expected):
    assert resolve(base, href) == expected


@pytest.mark.parametrize("href", ["mailto:me@example.com", "javascript:void(0)", "tel:+123", "data:text/plain,hi"])
def test_resolve_rejects_non_web_schemes(href):
    assert resolve("https://example.com/", href) is None


def test_normalize_ignores_fragment_scheme_and_host():
    assert normalize("https://example.com/page?x=1#section") == normalize("https://example.com/page?x=1")
    assert normalize("http://example.com/page?x=1") == "/page?x=1"


def test_normalize_keeps_query_variants_apart():
    assert normalize("https://example.com/page?x=1") != normalize("https://example.com/page?x=2")


def test_normalize_empty_path_is_root():
    assert normalize("https://example.com") == normalize("https://example.com/") == "/?"


def test_is_same_host():
    assert is_same_host("https://example.com/", "https://example.com/a/b")
    assert not is_same_host("https://example.com/", "https://cdn.example.com/a")
    assert not is_same_host("http://127.0.0.1:8000/", "http://127.0.0.1:9000/")


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/file.pdf",
        "https://example.com/IMG.JPG",
        "https://example.com/a/b.webp?v=3",
        "https://example.com/favicon.ico",
        "https://example.com/scan.Tiff",
    ],
)
def test_not_fetchable(url):
    assert not is_fetchable(url)


@pytest.mark.parametrize(
    "url",
    ["https://example.com/", "https://example.com/pdf", "https://example.com/page.html", "https://example.com/?f=a.png"],
)
def test_fetchable(url):
    assert is_fetchable(url)


def test_fetchable_custom_extensions():
    assert not is_fetchable("https://example.com/data.zip", ["zip"])
    assert is_fetchable("https://example.com/file.pdf", ["zip"])


@pytest.mark.parametrize("href", ["//[oops/x", "http://[bad", "https://[::1/x"])
def test_resolve_rejects_unparsable_hrefs(href):
    assert resolve("https://example.com/", href) is None
