"""Configuration management for siteimprove.

Supports TOML configuration format with auto-discovery.
"""

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "siteimprove.toml"

DEFAULT_DOMAIN_PLUGIN_ID = "simple"
DEFAULT_CMS_NAME = "Drupal"
DEFAULT_CMS_VERSION = "10.3.0"
DEFAULT_FRONT_PAGE = "/node"

FRONT_PAGE_DETECTION_MODES = ("legacy", "canonical")


@dataclass
class SiteimproveConfig:
    """Siteimprove service configuration."""

    token: str | None = None
    domain_plugin_id: str = DEFAULT_DOMAIN_PLUGIN_ID
    cms_name: str = DEFAULT_CMS_NAME
    cms_version: str = DEFAULT_CMS_VERSION


@dataclass
class SiteConfig:
    """Site front page configuration."""

    front_page: str = DEFAULT_FRONT_PAGE
    base_path: str = "/"
    front_page_detection: str = "legacy"


@dataclass
class SimpleDomainConfig:
    """Configuration for the simple domain provider."""

    domains: list[str] = field(default_factory=list)


@dataclass
class DomainAccessConfig:
    """Configuration for the domain access provider."""

    hostnames: dict[str, str] = field(default_factory=dict)
    default_domain: str | None = None
    include_default: bool = False


@dataclass
class DomainsConfig:
    """Per-provider domain configuration."""

    simple: SimpleDomainConfig = field(default_factory=SimpleDomainConfig)
    domain_access: DomainAccessConfig = field(default_factory=DomainAccessConfig)


@dataclass
class Config:
    """Application configuration."""

    siteimprove: SiteimproveConfig
    site: SiteConfig
    domains: DomainsConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> "Config":
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for siteimprove.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents.

        Returns:
            Path to config file or None if not found
        """
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> "Config":
        return cls(
            siteimprove=SiteimproveConfig(),
            site=SiteConfig(),
            domains=DomainsConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> "Config":
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            data = tomllib.load(f)

        if not isinstance(data, dict):
            raise ValueError("Configuration must be a dictionary")

        siteimprove = cls._parse_siteimprove(data.get("siteimprove"))
        site = cls._parse_site(data.get("site"))
        domains = cls._parse_domains(data.get("domains"))

        return cls(
            siteimprove=siteimprove,
            site=site,
            domains=domains,
            config_path=path,
        )

    @classmethod
    def _parse_siteimprove(cls, data: object) -> SiteimproveConfig:
        """Parse siteimprove configuration section.

        Args:
            data: Raw siteimprove section data

        Returns:
            SiteimproveConfig instance
        """
        if data is None:
            return SiteimproveConfig()

        if not isinstance(data, dict):
            raise ValueError("siteimprove section must be a dictionary")

        token = data.get("token")
        if token is not None and not isinstance(token, str):
            raise ValueError("siteimprove.token must be a string")

        domain_plugin_id = data.get("domain_plugin_id", DEFAULT_DOMAIN_PLUGIN_ID)
        if not isinstance(domain_plugin_id, str):
            raise ValueError("siteimprove.domain_plugin_id must be a string")

        cms_name = data.get("cms_name", DEFAULT_CMS_NAME)
        if not isinstance(cms_name, str):
            raise ValueError("siteimprove.cms_name must be a string")

        cms_version = data.get("cms_version", DEFAULT_CMS_VERSION)
        if not isinstance(cms_version, str):
            raise ValueError("siteimprove.cms_version must be a string")

        return SiteimproveConfig(
            token=token or None,
            domain_plugin_id=domain_plugin_id,
            cms_name=cms_name,
            cms_version=cms_version,
        )

    @classmethod
    def _parse_site(cls, data: object) -> SiteConfig:
        """Parse site configuration section.

        Args:
            data: Raw site section data

        Returns:
            SiteConfig instance
        """
        if data is None:
            return SiteConfig()

        if not isinstance(data, dict):
            raise ValueError("site section must be a dictionary")

        front_page = data.get("front_page", DEFAULT_FRONT_PAGE)
        if not isinstance(front_page, str):
            raise ValueError("site.front_page must be a string")

        base_path = data.get("base_path", "/")
        if not isinstance(base_path, str):
            raise ValueError("site.base_path must be a string")

        detection = data.get("front_page_detection", "legacy")
        if detection not in FRONT_PAGE_DETECTION_MODES:
            raise ValueError(
                "site.front_page_detection must be one of: "
                + ", ".join(FRONT_PAGE_DETECTION_MODES)
            )

        return SiteConfig(
            front_page=front_page,
            base_path=base_path,
            front_page_detection=detection,
        )

    @classmethod
    def _parse_domains(cls, data: object) -> DomainsConfig:
        """Parse domains configuration section.

        Args:
            data: Raw domains section data

        Returns:
            DomainsConfig instance
        """
        if data is None:
            return DomainsConfig()

        if not isinstance(data, dict):
            raise ValueError("domains section must be a dictionary")

        return DomainsConfig(
            simple=cls._parse_simple_domains(data.get("simple")),
            domain_access=cls._parse_domain_access(data.get("domain_access")),
        )

    @classmethod
    def _parse_simple_domains(cls, data: object) -> SimpleDomainConfig:
        if data is None:
            return SimpleDomainConfig()

        if not isinstance(data, dict):
            raise ValueError("domains.simple section must be a dictionary")

        domains_raw = data.get("domains", [])
        if not isinstance(domains_raw, list):
            raise ValueError("domains.simple.domains must be a list")
        domains: list[str] = []
        for item in domains_raw:
            if not isinstance(item, str):
                raise ValueError("domains.simple.domains items must be strings")
            domains.append(item)

        return SimpleDomainConfig(domains=domains)

    @classmethod
    def _parse_domain_access(cls, data: object) -> DomainAccessConfig:
        if data is None:
            return DomainAccessConfig()

        if not isinstance(data, dict):
            raise ValueError("domains.domain_access section must be a dictionary")

        hostnames_raw = data.get("hostnames", {})
        if not isinstance(hostnames_raw, dict):
            raise ValueError("domains.domain_access.hostnames must be a table")
        hostnames: dict[str, str] = {}
        for key, value in hostnames_raw.items():
            if not isinstance(value, str):
                raise ValueError("domains.domain_access.hostnames values must be strings")
            hostnames[key] = value

        default_domain = data.get("default_domain")
        if default_domain is not None and not isinstance(default_domain, str):
            raise ValueError("domains.domain_access.default_domain must be a string")

        include_default = data.get("include_default", False)
        if not isinstance(include_default, bool):
            raise ValueError("domains.domain_access.include_default must be a boolean")

        return DomainAccessConfig(
            hostnames=hostnames,
            default_domain=default_domain,
            include_default=include_default,
        )

    def with_overrides(
        self,
        *,
        domain_plugin_id: str | None = None,
        token: str | None = None,
    ) -> "Config":
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            domain_plugin_id: Override siteimprove.domain_plugin_id
            token: Override siteimprove.token

        Returns:
            New Config instance with overrides applied
        """
        siteimprove = self.siteimprove
        if domain_plugin_id is not None:
            siteimprove = replace(siteimprove, domain_plugin_id=domain_plugin_id)
        if token is not None:
            siteimprove = replace(siteimprove, token=token)

        return replace(self, siteimprove=siteimprove)
