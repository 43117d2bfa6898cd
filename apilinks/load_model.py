"""Loading of an extracted API model from YAML into a registry."""

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml

from apilinks.entity import Entity, namespace_from_name
from apilinks.kinds import is_entity_kind, is_member_kind
from apilinks.member import Member
from apilinks.registry import Registry

logger = logging.getLogger(__name__)


def iter_type_items(doc: dict[str, Any]) -> Iterable[dict[str, Any]]:
    """Iterate over the type entries of a model document."""
    items = doc.get("types") or []
    for it in items:
        if isinstance(it, dict) and it.get("name"):
            yield it


def _as_names(v: object) -> tuple[str, ...]:
    if not v:
        return ()
    if isinstance(v, str):
        return (v.lstrip("\\"),)
    return tuple(str(x).lstrip("\\") for x in v)


def _as_tokens(v: object) -> tuple[str, ...]:
    # Return types may be given as a union string: "static|null"
    if not v:
        return ()
    if isinstance(v, str):
        return tuple(v.split("|"))
    return tuple(str(x) for x in v)


def build_member(raw: dict[str, Any], owner: str) -> Member | None:
    """Build a member from its model entry, or None if malformed."""
    name = raw.get("name")
    kind = str(raw.get("kind") or "")
    if not name or not is_member_kind(kind):
        logger.warning("Skipping member %r of %s with kind %r", name, owner, kind)
        return None
    return Member(
        name=str(name),
        kind=kind.lower(),
        defined_by=str(raw.get("definedBy") or owner).lstrip("\\"),
        return_types=_as_tokens(raw.get("returnTypes")),
    )


def build_entity(raw: dict[str, Any]) -> Entity | None:
    """Build an entity from its model entry, or None if malformed."""
    name = str(raw["name"]).lstrip("\\")
    kind = str(raw.get("kind") or "class")
    if not is_entity_kind(kind):
        logger.warning("Skipping %s: unknown kind %r", name, kind)
        return None

    members: dict[str, Member] = {}
    for m in raw.get("members") or []:
        if isinstance(m, dict):
            member = build_member(m, name)
            if member is not None:
                members[member.name] = member

    parent = raw.get("parent")
    return Entity(
        name=name,
        kind=kind.lower(),
        namespace=str(raw.get("namespace") or namespace_from_name(name)),
        is_abstract=bool(raw.get("abstract", False)),
        parent_class=str(parent).lstrip("\\") if parent else None,
        interfaces=_as_names(raw.get("interfaces")),
        traits=_as_names(raw.get("traits")),
        members=members,
    )


def load_model(path: Path) -> Registry:
    """Load a YAML model file and index its types by name."""
    doc = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    entities = []
    for it in iter_type_items(doc):
        entity = build_entity(it)
        if entity is not None:
            entities.append(entity)
    registry = Registry(entities)
    logger.info("Loaded %s types from %s", len(registry), path)
    return registry
