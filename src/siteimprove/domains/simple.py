"""Simple domain provider: a fixed list of configured domains."""

import logging

from siteimprove.config import Config
from siteimprove.entity import Entity

logger = logging.getLogger(__name__)


class SimpleDomainProvider:
    """Returns the same configured domains for every entity."""

    def __init__(self, domains: list[str]):
        self.domains = [domain.rstrip("/") for domain in domains]

    @classmethod
    def from_config(cls, config: Config) -> "SimpleDomainProvider":
        return cls(config.domains.simple.domains)

    def get_urls(self, entity: Entity) -> list[str]:
        if not self.domains:
            logger.debug("No domains configured for the simple domain provider")
        return list(self.domains)
