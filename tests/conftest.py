"""Shared test fixtures."""

from pathlib import Path

import pytest
from siteimprove.config import (
    Config,
    DomainsConfig,
    SimpleDomainConfig,
    SiteConfig,
    SiteimproveConfig,
)
from siteimprove.session import USE_SITEIMPROVE, Account, SessionContext


@pytest.fixture
def test_config() -> Config:
    """Create a configuration with two simple domains and /node/1 as front page."""
    return Config(
        siteimprove=SiteimproveConfig(token="stored-token"),
        site=SiteConfig(front_page="/node/1"),
        domains=DomainsConfig(
            simple=SimpleDomainConfig(
                domains=["https://a.example", "https://b.example"],
            ),
        ),
    )


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a siteimprove.toml with simple domains."""
    path = tmp_path / "siteimprove.toml"
    path.write_text("""
[siteimprove]
token = "stored-token"
domain_plugin_id = "simple"

[site]
front_page = "/node/1"

[domains.simple]
domains = ["https://a.example", "https://b.example/"]
""")
    return path


@pytest.fixture
def editor_session() -> SessionContext:
    """Session of a user allowed to use Siteimprove."""
    return SessionContext(account=Account(permissions=frozenset({USE_SITEIMPROVE})))


@pytest.fixture
def anonymous_session() -> SessionContext:
    """Session of a user without Siteimprove access."""
    return SessionContext(account=Account())
