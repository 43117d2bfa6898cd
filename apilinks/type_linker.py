"""Resolution of type references to links or plain text.

A reference is tried against the following, in order: the ``$this`` marker,
the registry by exact name, the registry relative to the context namespace,
the runtime's own classes, and the built-in primitive types. Anything else is
emitted as-is.
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from apilinks.builtin_types import (
    builtin_display_name,
    builtin_type_url,
    is_builtin_type,
)
from apilinks.entity import NAMESPACE_SEPARATOR, Entity
from apilinks.internal_symbols import InternalSymbols
from apilinks.late_binding import substitute_late_binding
from apilinks.member import Member
from apilinks.namespace_of import namespace_of
from apilinks.ports import ApiUrlGenerator, LinkEmitter
from apilinks.reference_token import (
    SELF_MARKER,
    ReferenceToken,
    TokenKind,
    parse_token,
)
from apilinks.registry import Registry

logger = logging.getLogger(__name__)

UNION_SEPARATOR = "|"


class TypeLinker:
    """Builds links for type references within a rendering context."""

    def __init__(
        self,
        registry: Registry,
        emitter: LinkEmitter,
        api_urls: ApiUrlGenerator,
        internal_symbols: InternalSymbols | None = None,
    ) -> None:
        """Initialize the linker with its lookup and output collaborators."""
        self.registry = registry
        self.emitter = emitter
        self.api_urls = api_urls
        self.internal_symbols = internal_symbols or InternalSymbols()

    def create_type_link(
        self,
        types: str | Sequence[str],
        context: Entity | Member | None = None,
        title: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Create links for one type or a union of types joined by ``|``."""
        if isinstance(types, str):
            types = [types]
        if len(types) > 1:
            # A union cannot share one title.
            title = None
        opts = options or {}
        links = [
            self._link_token(parse_token(raw), context, title, opts) for raw in types
        ]
        return UNION_SEPARATOR.join(links)

    def create_entity_link(
        self,
        entity: Entity,
        title: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Create a link to an entity object."""
        href = self.api_urls.url_for(entity.name)
        text = title if title is not None else entity.short_name
        return self.emitter.emit(text, href, options or {})

    def create_method_return_type_link(
        self,
        method: Member,
        context: Entity,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        """Create links for a method's return types as seen from context."""
        return_types = substitute_late_binding(
            method.return_types, method, context, self.registry
        )
        return self.create_type_link(return_types, context, options=options)

    def resolve_entity(
        self,
        name: str,
        context: Entity | Member | None = None,
    ) -> Entity | None:
        """Find the entity a name refers to, trying the context namespace."""
        entity = self.registry.lookup(name.lstrip(NAMESPACE_SEPARATOR))
        if entity is None and name and not name.startswith(NAMESPACE_SEPARATOR):
            ns = namespace_of(context, self.registry)
            entity = self.registry.lookup(f"{ns}{NAMESPACE_SEPARATOR}{name}")
        return entity

    def _link_token(
        self,
        token: ReferenceToken,
        context: Entity | Member | None,
        title: str | None,
        options: Mapping[str, Any],
    ) -> str:
        if token.kind is TokenKind.SELF and isinstance(context, Entity):
            href = self.api_urls.url_for(context.name)
            text = title if title is not None else SELF_MARKER
            return self.emitter.emit(text, href, options) + token.suffix

        name = token.name
        entity = self.resolve_entity(name, context)
        if entity is not None:
            return self.create_entity_link(entity, title, options) + token.suffix

        if self.internal_symbols.is_internal(name):
            text = title if title is not None else name.lstrip(NAMESPACE_SEPARATOR)
            href = self.internal_symbols.doc_url(name)
            return self.emitter.emit(text, href, options) + token.suffix

        if is_builtin_type(name):
            text = builtin_display_name(name, title)
            href = builtin_type_url(name)
            return self.emitter.emit(text, href, options) + token.suffix

        logger.debug("Unresolved type reference: %s", name)
        return str(token)
