"""Content entity definitions.

The CMS owns entity storage and routing; this module only describes what the
URL resolver needs from an entity.
"""

from dataclasses import dataclass, field
from typing import Protocol


class EntityMalformedError(Exception):
    """Raised when an entity cannot produce its canonical path."""


class Entity(Protocol):
    """A content item with an optional canonical public path."""

    @property
    def entity_type(self) -> str: ...

    @property
    def id(self) -> int | str | None: ...

    @property
    def domain_ids(self) -> tuple[str, ...]:
        """Domain access assignments, empty when the entity is not assigned."""
        ...

    def has_canonical_link(self) -> bool: ...

    def canonical_path(self) -> str: ...


@dataclass(frozen=True)
class ContentEntity:
    """Plain entity handle passed in from the CMS.

    Attributes:
        entity_type: Entity type id (e.g., "node", "taxonomy_term")
        id: Entity id, None for entities that were never saved
        path: Relative canonical path (e.g., "/about"), None when the entity
            type has no canonical link template
        domain_ids: Domain access assignments, in assignment order
    """

    entity_type: str
    id: int | str | None
    path: str | None = None
    domain_ids: tuple[str, ...] = field(default_factory=tuple)

    def has_canonical_link(self) -> bool:
        return self.path is not None

    def canonical_path(self) -> str:
        """Return the relative canonical path.

        Raises:
            EntityMalformedError: If the entity has no id or no canonical path
        """
        if self.id is None or self.id == "":
            raise EntityMalformedError(
                f"The {self.entity_type} entity cannot have a URI as it does not have an ID"
            )
        if self.path is None:
            raise EntityMalformedError(
                f"The {self.entity_type} entity has no canonical link template"
            )
        return self.path
