"""Collaborator interfaces supplied by the concrete output format."""

from collections.abc import Mapping
from typing import Any, Protocol


class LinkEmitter(Protocol):
    """Renders a (text, href, options) triple as link markup."""

    def emit(self, text: str, href: str, options: Mapping[str, Any]) -> str: ...


class ApiUrlGenerator(Protocol):
    """Builds the documentation URL of an entity."""

    def url_for(self, entity_name: str) -> str: ...
