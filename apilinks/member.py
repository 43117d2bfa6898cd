"""Data model for documented members."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Member:
    """Represents a property, method, constant or event."""

    name: str
    kind: str  # property/method/constant/event
    defined_by: str  # FQN of the declaring entity
    return_types: tuple[str, ...] = field(default_factory=tuple)

    @property
    def is_method(self) -> bool:
        return self.kind.lower() == "method"
