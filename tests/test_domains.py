"""Tests for domain providers and the plugin registry."""

import logging

import pytest
from siteimprove.config import (
    Config,
    DomainAccessConfig,
    DomainsConfig,
    SiteConfig,
    SiteimproveConfig,
)
from siteimprove.domains import (
    DomainAccessProvider,
    DomainRegistry,
    SimpleDomainProvider,
    default_registry,
)
from siteimprove.entity import ContentEntity


class TestDomainRegistry:
    """Tests for DomainRegistry."""

    def test__definitions__in_registration_order(self) -> None:
        """List registered plugins in the order they were added."""
        registry = DomainRegistry()
        registry.register("b", "Plugin B", SimpleDomainProvider.from_config)
        registry.register("a", "Plugin A", SimpleDomainProvider.from_config)

        assert [(d.id, d.label) for d in registry.definitions()] == [
            ("b", "Plugin B"),
            ("a", "Plugin A"),
        ]

    def test__duplicate_id__raises_error(self) -> None:
        """Reject registering the same plugin id twice."""
        registry = DomainRegistry()
        registry.register("simple", "Simple", SimpleDomainProvider.from_config)

        with pytest.raises(ValueError, match="already registered"):
            registry.register("simple", "Other", SimpleDomainProvider.from_config)

    def test__unknown_id__raises_error(self, test_config: Config) -> None:
        """Creating an unregistered plugin fails."""
        with pytest.raises(ValueError, match="Unknown domain plugin: missing"):
            default_registry().create("missing", test_config)

    def test__create__uses_factory(self, test_config: Config) -> None:
        """Create the provider from configuration."""
        provider = default_registry().create("simple", test_config)

        assert isinstance(provider, SimpleDomainProvider)
        assert provider.domains == ["https://a.example", "https://b.example"]

    def test__default_registry__bundled_plugins(self) -> None:
        """The default registry holds the bundled providers."""
        registry = default_registry()

        assert [d.id for d in registry.definitions()] == ["simple", "domain_access"]
        assert "domain_access" in registry


class TestSimpleDomainProvider:
    """Tests for SimpleDomainProvider."""

    def test__strips_trailing_slash(self) -> None:
        """Configured domains lose their trailing slash."""
        provider = SimpleDomainProvider(["https://a.example/", "https://b.example"])
        entity = ContentEntity(entity_type="node", id=1, path="/foo")

        assert provider.get_urls(entity) == ["https://a.example", "https://b.example"]

    def test__no_domains__returns_empty(self) -> None:
        """No configured domains yields an empty list."""
        provider = SimpleDomainProvider([])
        entity = ContentEntity(entity_type="node", id=1, path="/foo")

        assert provider.get_urls(entity) == []


def _domain_access_config(**kwargs) -> Config:
    return Config(
        siteimprove=SiteimproveConfig(domain_plugin_id="domain_access"),
        site=SiteConfig(),
        domains=DomainsConfig(domain_access=DomainAccessConfig(**kwargs)),
    )


class TestDomainAccessProvider:
    """Tests for DomainAccessProvider."""

    HOSTNAMES = {
        "main": "https://example.com",
        "blog": "https://blog.example.com/",
    }

    def test__assigned_domains__in_assignment_order(self) -> None:
        """Return origins in the order the entity lists its domains."""
        provider = DomainAccessProvider(self.HOSTNAMES)
        entity = ContentEntity(
            entity_type="node", id=1, path="/foo", domain_ids=("blog", "main")
        )

        assert provider.get_urls(entity) == [
            "https://blog.example.com",
            "https://example.com",
        ]

    def test__unknown_domain__skipped_with_warning(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Unknown domain ids are skipped and logged."""
        provider = DomainAccessProvider(self.HOSTNAMES)
        entity = ContentEntity(
            entity_type="node", id=1, path="/foo", domain_ids=("gone", "main")
        )

        with caplog.at_level(logging.WARNING, logger="siteimprove.domains.domain_access"):
            result = provider.get_urls(entity)

        assert result == ["https://example.com"]
        assert "Unknown domain 'gone'" in caplog.text

    def test__unassigned__falls_back_to_default(self) -> None:
        """Unassigned entities use the default domain when enabled."""
        provider = DomainAccessProvider.from_config(
            _domain_access_config(
                hostnames=self.HOSTNAMES,
                default_domain="main",
                include_default=True,
            )
        )
        entity = ContentEntity(entity_type="node", id=1, path="/foo")

        assert provider.get_urls(entity) == ["https://example.com"]

    def test__unassigned_without_default__returns_empty(self) -> None:
        """Unassigned entities get no domains unless the default is included."""
        provider = DomainAccessProvider.from_config(
            _domain_access_config(hostnames=self.HOSTNAMES, default_domain="main")
        )
        entity = ContentEntity(entity_type="node", id=1, path="/foo")

        assert provider.get_urls(entity) == []

    def test__other_entity_implementation__uses_domain_ids(self) -> None:
        """Any Entity implementation exposes its assignments to the provider."""

        class TermEntity:
            entity_type = "taxonomy_term"
            id = 7
            domain_ids = ("blog",)

            def has_canonical_link(self) -> bool:
                return True

            def canonical_path(self) -> str:
                return "/tags/news"

        provider = DomainAccessProvider(self.HOSTNAMES)

        assert provider.get_urls(TermEntity()) == ["https://blog.example.com"]
