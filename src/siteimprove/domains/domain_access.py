"""Domain access provider for multi-site setups.

Entities are assigned to one or more sites by domain id; each id maps to
the origin the site is served from.
"""

import logging

from siteimprove.config import Config
from siteimprove.entity import Entity

logger = logging.getLogger(__name__)


class DomainAccessProvider:
    """Returns the origins of the domains an entity is assigned to."""

    def __init__(
        self,
        hostnames: dict[str, str],
        default_domain: str | None = None,
        include_default: bool = False,
    ):
        """Initialize provider.

        Args:
            hostnames: Domain id to origin mapping
            default_domain: Domain id used for unassigned entities
            include_default: Fall back to default_domain for unassigned entities
        """
        self.hostnames = {key: value.rstrip("/") for key, value in hostnames.items()}
        self.default_domain = default_domain
        self.include_default = include_default

    @classmethod
    def from_config(cls, config: Config) -> "DomainAccessProvider":
        section = config.domains.domain_access
        return cls(
            section.hostnames,
            default_domain=section.default_domain,
            include_default=section.include_default,
        )

    def get_urls(self, entity: Entity) -> list[str]:
        domain_ids = list(entity.domain_ids)
        if not domain_ids and self.include_default and self.default_domain:
            domain_ids = [self.default_domain]

        urls: list[str] = []
        for domain_id in domain_ids:
            hostname = self.hostnames.get(domain_id)
            if hostname is None:
                logger.warning(
                    f"Unknown domain {domain_id!r} on {entity.entity_type} {entity.id}"
                )
                continue
            urls.append(hostname)
        return urls
