"""Wiring of the link builders for one output format."""

from collections.abc import Mapping, Sequence
from typing import Any

from apilinks.api_urls import MultiPageUrls, SinglePageUrls
from apilinks.entity import Entity
from apilinks.guide_url import DEFAULT_GUIDE_PREFIX, generate_guide_url
from apilinks.internal_symbols import InternalSymbols
from apilinks.link_emitters import (
    HtmlLinkEmitter,
    LatexLinkEmitter,
    MarkdownLinkEmitter,
)
from apilinks.member import Member
from apilinks.ports import ApiUrlGenerator, LinkEmitter
from apilinks.registry import Registry
from apilinks.subject_link import create_subject_link
from apilinks.type_linker import TypeLinker

EMITTERS: dict[str, type] = {
    "html": HtmlLinkEmitter,
    "markdown": MarkdownLinkEmitter,
    "latex": LatexLinkEmitter,
}


class LinkRenderer:
    """Entry point used by page templates to build links."""

    def __init__(
        self,
        registry: Registry,
        emitter: LinkEmitter,
        api_urls: ApiUrlGenerator,
        *,
        guide_url: str = "",
        guide_prefix: str = DEFAULT_GUIDE_PREFIX,
        internal_symbols: InternalSymbols | None = None,
    ) -> None:
        """Initialize the renderer with the registry and format adapters."""
        self.registry = registry
        self.emitter = emitter
        self.api_urls = api_urls
        self.guide_url = guide_url
        self.guide_prefix = guide_prefix
        self.type_linker = TypeLinker(registry, emitter, api_urls, internal_symbols)

    def create_type_link(
        self,
        types: str | Sequence[str],
        context: Entity | Member | None = None,
        title: str | None = None,
        options: Mapping[str, Any] | None = None,
    ) -> str:
        return self.type_linker.create_type_link(types, context, title, options)

    def create_method_return_type_link(self, method: Member, context: Entity) -> str:
        return self.type_linker.create_method_return_type_link(method, context)

    def create_subject_link(
        self,
        member: Member,
        title: str | None = None,
        options: Mapping[str, Any] | None = None,
        owner: Entity | None = None,
    ) -> str:
        return create_subject_link(
            member,
            self.registry,
            self.emitter,
            self.api_urls,
            title=title,
            options=options,
            owner=owner,
        )

    def generate_api_url(self, entity_name: str) -> str:
        return self.api_urls.url_for(entity_name)

    def generate_guide_url(self, file: str) -> str:
        return generate_guide_url(file, self.guide_url, self.guide_prefix)


def build_renderer(config: dict[str, Any], registry: Registry) -> LinkRenderer:
    """Create a renderer for the output format named in the configuration."""
    fmt = config["output"]["format"]
    if fmt not in EMITTERS:
        msg = f"Unknown output format: {fmt} (expected one of {sorted(EMITTERS)})"
        raise ValueError(msg)

    urls = config["urls"]
    style = urls.get("style", "multi-page")
    api_urls: ApiUrlGenerator
    if style == "multi-page":
        api_urls = MultiPageUrls(urls.get("api_url") or "")
    elif style == "single-page":
        api_urls = SinglePageUrls()
    else:
        msg = f"Unknown URL style: {style}"
        raise ValueError(msg)

    return LinkRenderer(
        registry,
        EMITTERS[fmt](),
        api_urls,
        guide_url=urls.get("guide_url") or "",
        guide_prefix=urls.get("guide_prefix", DEFAULT_GUIDE_PREFIX),
        internal_symbols=InternalSymbols(config.get("internal_symbols")),
    )
