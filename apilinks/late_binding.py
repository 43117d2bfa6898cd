"""Substitution of the late static binding placeholder in return types."""

from collections.abc import Sequence

from apilinks.entity import Entity
from apilinks.member import Member
from apilinks.reference_token import TokenKind, parse_token
from apilinks.registry import Registry


def substitute_late_binding(
    return_types: Sequence[str],
    method: Member,
    context: Entity | Member | None,
    registry: Registry,
) -> list[str]:
    """Replace ``static`` and ``static[]`` with the concrete type name.

    Only instantiable classes get a substitution; for abstract classes,
    interfaces and traits the placeholder is passed through unchanged.
    A method declared by an interface or trait returns the rendered class
    itself, while one declared by an ancestor class keeps that ancestor.
    """
    if not isinstance(context, Entity) or not context.is_class or context.is_abstract:
        return list(return_types)

    if registry.is_interface_or_trait(method.defined_by):
        replacement = context.name
    else:
        replacement = method.defined_by

    result: list[str] = []
    for raw in return_types:
        token = parse_token(raw)
        if token.kind is TokenKind.LATE_BINDING:
            result.append(str(token.replace_name(replacement)))
        else:
            result.append(raw)
    return result
