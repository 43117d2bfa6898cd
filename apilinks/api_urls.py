"""URL generators for entity documentation pages."""

import re

from apilinks.entity import NAMESPACE_SEPARATOR

WORD_RE = re.compile(r"[a-z0-9]+")


def page_name_for(entity_name: str) -> str:
    """Flatten a fully-qualified name: app\\models\\User -> app-models-user."""
    name = entity_name.lstrip(NAMESPACE_SEPARATOR)
    return name.replace(NAMESPACE_SEPARATOR, "-").lower()


class MultiPageUrls:
    """One HTML page per entity under a common base URL."""

    def __init__(self, api_url: str = "") -> None:
        self.api_url = api_url.rstrip("/")

    def url_for(self, entity_name: str) -> str:
        page = f"{page_name_for(entity_name)}.html"
        if not self.api_url:
            return page
        return f"{self.api_url}/{page}"


class SinglePageUrls:
    """All entities rendered into one document, addressed by anchors."""

    def __init__(self, prefix: str = "type-") -> None:
        self.prefix = prefix

    def anchor_for(self, entity_name: str) -> str:
        """Anchor id of an entity: its name's words, lowercased and hyphenated."""
        words = WORD_RE.findall(entity_name.lower())
        return self.prefix + "-".join(words)

    def url_for(self, entity_name: str) -> str:
        return f"#{self.anchor_for(entity_name)}"
