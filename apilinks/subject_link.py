"""Links to members (properties, methods, constants, events) of an entity."""

import logging
from collections.abc import Mapping
from typing import Any

from apilinks.entity import Entity
from apilinks.member import Member
from apilinks.ports import ApiUrlGenerator, LinkEmitter
from apilinks.registry import Registry

logger = logging.getLogger(__name__)

DETAIL_SUFFIX = "-detail"
METHOD_MARKER = "()"


def subject_anchor(member: Member) -> str:
    """Return the fragment id of a member's detail section."""
    name = member.name + METHOD_MARKER if member.is_method else member.name
    return name + DETAIL_SUFFIX


def create_subject_link(
    member: Member,
    registry: Registry,
    emitter: LinkEmitter,
    api_urls: ApiUrlGenerator,
    *,
    title: str | None = None,
    options: Mapping[str, Any] | None = None,
    owner: Entity | None = None,
) -> str:
    """Create a link to a member's detail section on its owner's page."""
    if title is None:
        title = member.name + METHOD_MARKER if member.is_method else member.name

    if owner is None:
        owner = registry.lookup(member.defined_by)
    if owner is None:
        logger.warning(
            "Cannot link %s: declaring type %s is not documented",
            member.name,
            member.defined_by,
        )
        return member.name

    href = f"{api_urls.url_for(owner.name)}#{subject_anchor(member)}"
    return emitter.emit(title, href, options or {})
