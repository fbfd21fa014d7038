"""Domain provider protocol and registry.

A domain provider returns the front-end origins an entity is published on.
Exactly one provider is active, selected by ``siteimprove.domain_plugin_id``.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol

from siteimprove.config import Config
from siteimprove.entity import Entity


class DomainProvider(Protocol):
    """Strategy returning active domains for an entity."""

    def get_urls(self, entity: Entity) -> list[str]:
        """Return origins without trailing slash, in priority order."""
        ...


DomainProviderFactory = Callable[[Config], DomainProvider]


@dataclass(frozen=True)
class DomainPluginDefinition:
    """Registered domain provider metadata."""

    id: str
    label: str


class DomainRegistry:
    """Maps domain plugin ids to provider factories."""

    def __init__(self) -> None:
        self._definitions: dict[str, DomainPluginDefinition] = {}
        self._factories: dict[str, DomainProviderFactory] = {}

    def register(self, plugin_id: str, label: str, factory: DomainProviderFactory) -> None:
        """Register a domain provider.

        Raises:
            ValueError: If plugin_id is already registered
        """
        if plugin_id in self._factories:
            raise ValueError(f"Domain plugin already registered: {plugin_id}")
        self._definitions[plugin_id] = DomainPluginDefinition(id=plugin_id, label=label)
        self._factories[plugin_id] = factory

    def definitions(self) -> list[DomainPluginDefinition]:
        """Return registered plugins in registration order."""
        return list(self._definitions.values())

    def __contains__(self, plugin_id: object) -> bool:
        return plugin_id in self._factories

    def create(self, plugin_id: str, config: Config) -> DomainProvider:
        """Create the provider registered under plugin_id.

        Raises:
            ValueError: If plugin_id is not registered
        """
        factory = self._factories.get(plugin_id)
        if factory is None:
            available = ", ".join(self._factories) or "none"
            raise ValueError(
                f"Unknown domain plugin: {plugin_id} (available: {available})"
            )
        return factory(config)
