"""Pluggable domain providers.

This package provides the domain provider protocol, the plugin registry and
the bundled providers.
"""

from .base import DomainPluginDefinition, DomainProvider, DomainRegistry
from .domain_access import DomainAccessProvider
from .simple import SimpleDomainProvider


def default_registry() -> DomainRegistry:
    """Create a registry with the bundled providers."""
    registry = DomainRegistry()
    registry.register("simple", "Simple domain", SimpleDomainProvider.from_config)
    registry.register("domain_access", "Domain access", DomainAccessProvider.from_config)
    return registry


__all__ = [
    "DomainAccessProvider",
    "DomainPluginDefinition",
    "DomainProvider",
    "DomainRegistry",
    "SimpleDomainProvider",
    "default_registry",
]
