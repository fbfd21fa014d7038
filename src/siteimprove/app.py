"""Application wiring for siteimprove.

Builds the token client and the active domain provider once, and hands out
request-scoped resolvers.
"""

from dataclasses import dataclass

import httpx

from siteimprove.config import Config
from siteimprove.domains import DomainProvider, DomainRegistry, default_registry
from siteimprove.resolver import EntityUrlResolver
from siteimprove.routing import RequestContext
from siteimprove.token import TokenClient


@dataclass
class SiteimproveApp:
    """Configured Siteimprove integration."""

    config: Config
    token_client: TokenClient
    domain_provider: DomainProvider

    def get_token(self) -> str | None:
        """Return the token stored in configuration, if any."""
        return self.config.siteimprove.token

    def request_token(self) -> str | None:
        """Request a fresh token from Siteimprove."""
        return self.token_client.request_token()

    def resolver(self, request: RequestContext) -> EntityUrlResolver:
        """Create a resolver for the request being served."""
        return EntityUrlResolver(self.domain_provider, self.config.site, request)


def create_app(
    config: Config,
    http_client: httpx.Client,
    registry: DomainRegistry | None = None,
) -> SiteimproveApp:
    """Create the Siteimprove integration.

    Args:
        config: Application configuration
        http_client: httpx Client used for token requests
        registry: Domain plugin registry (default: bundled providers)

    Returns:
        Configured SiteimproveApp

    Raises:
        ValueError: If the configured domain plugin is not registered
    """
    if registry is None:
        registry = default_registry()

    domain_provider = registry.create(config.siteimprove.domain_plugin_id, config)
    token_client = TokenClient(
        http_client,
        cms_name=config.siteimprove.cms_name,
        cms_version=config.siteimprove.cms_version,
    )
    return SiteimproveApp(
        config=config,
        token_client=token_client,
        domain_provider=domain_provider,
    )
