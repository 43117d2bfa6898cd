"""Data model for documented class-like entities."""

from dataclasses import dataclass, field

from apilinks.member import Member

NAMESPACE_SEPARATOR = "\\"


@dataclass(frozen=True)
class Entity:
    """Represents a documented class, interface or trait."""

    name: str  # fully-qualified, e.g. app\models\User
    kind: str  # class/interface/trait
    namespace: str = ""
    is_abstract: bool = False
    parent_class: str | None = None
    interfaces: tuple[str, ...] = field(default_factory=tuple)
    traits: tuple[str, ...] = field(default_factory=tuple)
    members: dict[str, Member] = field(default_factory=dict, compare=False)

    @property
    def short_name(self) -> str:
        return self.name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    @property
    def is_class(self) -> bool:
        return self.kind.lower() == "class"

    def declared_members(self) -> list[Member]:
        """Return members declared by this entity itself."""
        return [m for m in self.members.values() if m.defined_by == self.name]

    def inherited_members(self) -> list[Member]:
        """Return members inherited from a parent class, interface or trait."""
        return [m for m in self.members.values() if m.defined_by != self.name]


def namespace_from_name(name: str) -> str:
    """Derive the namespace from a fully-qualified name."""
    parts = name.strip(NAMESPACE_SEPARATOR).split(NAMESPACE_SEPARATOR)
    if len(parts) > 1:
        return NAMESPACE_SEPARATOR.join(parts[:-1])
    return ""
