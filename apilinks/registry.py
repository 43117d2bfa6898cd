"""Read-only lookup of documented entities by fully-qualified name."""

from collections.abc import Iterable

from apilinks.entity import NAMESPACE_SEPARATOR, Entity
from apilinks.kinds import is_composable_kind


class Registry:
    """Maps fully-qualified names to entities."""

    def __init__(self, entities: Iterable[Entity] = ()) -> None:
        self.name_to_entity: dict[str, Entity] = {e.name: e for e in entities}

    def __len__(self) -> int:
        return len(self.name_to_entity)

    def lookup(self, name: str) -> Entity | None:
        """Return the entity registered under name, if any."""
        return self.name_to_entity.get(name.lstrip(NAMESPACE_SEPARATOR))

    def is_interface_or_trait(self, name: str) -> bool:
        """Check if name refers to a registered interface or trait."""
        entity = self.lookup(name)
        return entity is not None and is_composable_kind(entity.kind)
