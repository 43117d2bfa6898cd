"""Predicates for entity and member kinds."""

ENTITY_KINDS = {"class", "interface", "trait"}
MEMBER_KINDS = {"property", "method", "constant", "event"}


def is_entity_kind(kind: str) -> bool:
    """Check if the kind represents a class-like entity."""
    return kind.lower() in ENTITY_KINDS


def is_member_kind(kind: str) -> bool:
    """Check if the kind represents a member (method, property, etc.)."""
    return kind.lower() in MEMBER_KINDS


def is_composable_kind(kind: str) -> bool:
    """Check if the kind is an interface or trait."""
    return kind.lower() in {"interface", "trait"}
