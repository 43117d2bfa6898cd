"""Utility for determining the namespace of a rendering context."""

from apilinks.entity import Entity
from apilinks.member import Member
from apilinks.registry import Registry


def namespace_of(context: Entity | Member | None, registry: Registry) -> str:
    """Determine the namespace used for relative type lookups."""
    if isinstance(context, Entity):
        return context.namespace
    if isinstance(context, Member):
        # Members only hold the name of their declaring entity.
        owner = registry.lookup(context.defined_by)
        if owner is not None:
            return owner.namespace
    return ""
