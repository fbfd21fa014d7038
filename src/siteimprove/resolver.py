"""Entity URL resolution.

Resolves a content entity to the absolute front-end URLs Siteimprove should
check, across the domains of the active domain provider.
"""

import logging

from siteimprove.config import SiteConfig
from siteimprove.domains import DomainProvider
from siteimprove.entity import Entity
from siteimprove.routing import RequestContext
from siteimprove.session import USE_SITEIMPROVE, SessionContext

logger = logging.getLogger(__name__)


class EntityUrlResolver:
    """Request-scoped resolver for entity front-end URLs."""

    def __init__(
        self,
        domain_provider: DomainProvider,
        site: SiteConfig,
        request: RequestContext,
    ):
        """Initialize resolver.

        Args:
            domain_provider: Active domain provider
            site: Site front page configuration
            request: Route information of the current request
        """
        self.domain_provider = domain_provider
        self.site = site
        self.request = request

    def set_session_url(self, entity: Entity, session: SessionContext) -> None:
        """Append the entity's URLs to the session.

        Does nothing unless the session account may use Siteimprove.

        Raises:
            EntityMalformedError: If the entity has no usable canonical path
        """
        if not session.account.has_permission(USE_SITEIMPROVE):
            return

        urls = self.get_entity_urls(entity)
        session.append_urls(urls)
        logger.debug(f"Stored {len(urls)} URLs for {entity.entity_type} {entity.id}")

    def get_entity_urls(self, entity: Entity) -> list[str]:
        """Return front-end URLs for an entity.

        URLs for the canonical path come first, in domain order. If the entity
        is the front page, the front page URL of every domain follows.
        Entities without a canonical link get no URLs.

        Raises:
            EntityMalformedError: If the entity has no usable canonical path
        """
        if not entity.has_canonical_link():
            return []

        domains = self.get_entity_domains(entity)
        url_relative = entity.canonical_path()

        urls = [domain + url_relative for domain in domains]

        if self.is_front_page(entity):
            urls.extend(domain + self.site.base_path for domain in domains)

        return urls

    def get_entity_domains(self, entity: Entity) -> list[str]:
        """Return active domains for an entity, without trailing slash."""
        return self.domain_provider.get_urls(entity)

    def is_front_page(self, entity: Entity) -> bool:
        """Check whether the entity is the configured front page."""
        if self.request.is_front_page:
            return True

        front_page = self.site.front_page
        if self.site.front_page_detection == "canonical":
            # Any content type, compared by canonical path
            return (
                self.request.is_node_edit_route
                or self.request.is_taxonomy_term_edit_route
            ) and entity.canonical_path() == front_page

        if self.request.is_node_edit_route and f"/node/{entity.id}" == front_page:
            return True
        if (
            self.request.is_taxonomy_term_edit_route
            and f"/taxonomy/term/{entity.id}" == front_page
        ):
            return True
        return False
