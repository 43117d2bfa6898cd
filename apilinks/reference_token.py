"""Parsing of raw type reference tokens."""

from dataclasses import dataclass
from enum import Enum

ARRAY_SUFFIX = "[]"
SELF_MARKER = "$this"
LATE_BINDING_MARKER = "static"


class TokenKind(Enum):
    """Shape of a reference token."""

    NAME = "name"
    SELF = "self"
    LATE_BINDING = "late_binding"


@dataclass(frozen=True)
class ReferenceToken:
    """A single type reference, e.g. ``Foo``, ``int[]``, ``$this`` or ``static``."""

    kind: TokenKind
    name: str  # without array suffix
    is_array: bool = False

    @property
    def suffix(self) -> str:
        return ARRAY_SUFFIX if self.is_array else ""

    def __str__(self) -> str:
        return self.name + self.suffix

    def replace_name(self, name: str) -> "ReferenceToken":
        """Return a plain name token keeping the array suffix."""
        return ReferenceToken(TokenKind.NAME, name, self.is_array)


def parse_token(raw: str) -> ReferenceToken:
    """Classify a raw token by its shape."""
    name = raw
    is_array = False
    if raw.endswith(ARRAY_SUFFIX):
        name = raw[: -len(ARRAY_SUFFIX)]
        is_array = True

    if name == SELF_MARKER:
        kind = TokenKind.SELF
    elif name == LATE_BINDING_MARKER:
        kind = TokenKind.LATE_BINDING
    else:
        kind = TokenKind.NAME
    return ReferenceToken(kind, name, is_array)
