"""Tests for link emitters and API URL generators."""

from apilinks.api_urls import MultiPageUrls, SinglePageUrls, page_name_for
from apilinks.link_emitters import (
    HtmlLinkEmitter,
    LatexLinkEmitter,
    MarkdownLinkEmitter,
    latex_escape,
)


def test_html_emitter() -> None:
    """Verify anchor markup with escaped text and attributes."""
    emitter = HtmlLinkEmitter()
    assert emitter.emit("Foo", "foo.html", {}) == '<a href="foo.html">Foo</a>'
    assert emitter.emit("a<b", "x.html?a=1&b=2", {"class": "t", "hidden": True}) == (
        '<a href="x.html?a=1&amp;b=2" class="t" hidden>a&lt;b</a>'
    )
    assert emitter.emit("F", "f", {"id": None}) == '<a href="f">F</a>'


def test_markdown_emitter() -> None:
    """Verify inline links with an optional title."""
    emitter = MarkdownLinkEmitter()
    assert emitter.emit("Foo", "/foo", {}) == "[Foo](/foo)"
    assert emitter.emit("Foo", "/foo", {"title": 'say "hi"'}) == (
        '[Foo](/foo "say \\"hi\\"")'
    )


def test_latex_emitter() -> None:
    """Verify hyperref output with escaped special characters."""
    emitter = LatexLinkEmitter()
    assert emitter.emit("$this", "#type-app-user", {}) == (
        "\\hyperlink{type-app-user}{\\$this}"
    )
    assert emitter.emit("a_b", "https://x.example/p.html#m%20n", {}) == (
        "\\href{https://x.example/p.html\\#m\\%20n}{a\\_b}"
    )
    assert latex_escape("a_b\\c") == "a\\_b\\textbackslash{}c"


def test_latex_emitter_with_single_page_urls() -> None:
    """Verify that single-document anchors resolve to internal hyperlinks."""
    href = SinglePageUrls().url_for("app\\models\\User")
    assert LatexLinkEmitter().emit("User", href, {}) == (
        "\\hyperlink{type-app-models-user}{User}"
    )


def test_multi_page_urls() -> None:
    """Verify one page per entity under the API base URL."""
    assert page_name_for("\\app\\models\\User") == "app-models-user"
    urls = MultiPageUrls("https://api.example/")
    assert urls.url_for("app\\models\\User") == (
        "https://api.example/app-models-user.html"
    )
    assert MultiPageUrls().url_for("Foo") == "foo.html"


def test_single_page_urls() -> None:
    """Verify anchor targets for single-document output."""
    assert SinglePageUrls().url_for("app\\User") == "#type-app-user"
    assert SinglePageUrls("api-").url_for("User") == "#api-user"
    assert SinglePageUrls().url_for("\\app\\models\\User_Base") == (
        "#type-app-models-user-base"
    )
    assert SinglePageUrls().anchor_for("app\\User") == "type-app-user"


def test_latex_emitter_member_anchor() -> None:
    """Verify that a member anchor inside a single document stays escaped."""
    emitter = LatexLinkEmitter()
    assert emitter.emit("id", "#type-app-user#id-detail", {}) == (
        "\\hyperlink{type-app-user\\#id-detail}{id}"
    )
