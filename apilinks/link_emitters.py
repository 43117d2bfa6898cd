"""Concrete link markup for the supported output formats."""

import re
from collections.abc import Mapping
from html import escape
from typing import Any

LATEX_SPECIALS_RE = re.compile(r"([\\{}$&#%_^~])")
LATEX_REPLACEMENTS = {
    "\\": r"\textbackslash{}",
    "^": r"\textasciicircum{}",
    "~": r"\textasciitilde{}",
}


class HtmlLinkEmitter:
    """Emits HTML anchor tags; options become tag attributes."""

    def emit(self, text: str, href: str, options: Mapping[str, Any]) -> str:
        attrs = [f'href="{escape(href)}"']
        for key, value in options.items():
            if value is None or value is False:
                continue
            if value is True:
                attrs.append(escape(str(key)))
            else:
                attrs.append(f'{escape(str(key))}="{escape(str(value))}"')
        return f"<a {' '.join(attrs)}>{escape(text, quote=False)}</a>"


class MarkdownLinkEmitter:
    """Emits Markdown inline links."""

    def emit(self, text: str, href: str, options: Mapping[str, Any]) -> str:
        title = options.get("title")
        if title:
            escaped_title = str(title).replace('"', '\\"')
            return f'[{text}]({href} "{escaped_title}")'
        return f"[{text}]({href})"


def latex_escape(text: str) -> str:
    """Escape LaTeX special characters."""

    def repl(m: re.Match) -> str:
        ch = m.group(1)
        return LATEX_REPLACEMENTS.get(ch, "\\" + ch)

    return LATEX_SPECIALS_RE.sub(repl, text)


def latex_escape_target(target: str) -> str:
    """Escape a link target; hyperref only needs # and % escaped."""
    return target.replace("%", "\\%").replace("#", "\\#")


class LatexLinkEmitter:
    """Emits hyperref links for LaTeX output.

    In-document targets (``#anchor``) become ``\\hyperlink``; anything else
    becomes ``\\href``.
    """

    def emit(self, text: str, href: str, options: Mapping[str, Any]) -> str:
        label = latex_escape(text)
        if href.startswith("#"):
            return f"\\hyperlink{{{latex_escape_target(href[1:])}}}{{{label}}}"
        return f"\\href{{{latex_escape_target(href)}}}{{{label}}}"
