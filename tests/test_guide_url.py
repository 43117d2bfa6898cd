"""Tests for guide page URLs."""

from apilinks.guide_url import generate_guide_url

BASE = "https://guide.example/docs"


def test_fragment_and_directories() -> None:
    """Verify directory stripping and fragment reattachment."""
    assert generate_guide_url("foo/bar.md#section", BASE, "guide-") == (
        "https://guide.example/docs/guide-bar.html#section"
    )


def test_plain_file() -> None:
    """Verify a bare file name with the default prefix."""
    assert generate_guide_url("intro.md", BASE) == f"{BASE}/guide-intro.html"
    assert generate_guide_url("intro", BASE) == f"{BASE}/guide-intro.html"


def test_trailing_slash_and_prefix() -> None:
    """Verify base URL trimming and custom prefixes."""
    assert generate_guide_url("a.md", BASE + "/", "") == f"{BASE}/a.html"
    assert generate_guide_url("a.md", BASE, "book-") == f"{BASE}/book-a.html"


def test_external_urls_unchanged() -> None:
    """Verify that absolute web URLs are returned byte-for-byte."""
    for url in (
        "http://example.com/page.md#x",
        "https://example.com/a/b.md",
    ):
        assert generate_guide_url(url, BASE) == url


def test_only_md_extension_stripped() -> None:
    """Verify that other extensions are kept."""
    assert generate_guide_url("dir/notes.txt", BASE) == f"{BASE}/guide-notes.txt.html"
