"""Per-user session state for Siteimprove URLs."""

from dataclasses import dataclass, field
from typing import Any

SESSION_URL_KEY = "siteimprove_url"
USE_SITEIMPROVE = "use siteimprove"


@dataclass(frozen=True)
class Account:
    """The user on whose behalf a request is served."""

    permissions: frozenset[str] = frozenset()

    def has_permission(self, permission: str) -> bool:
        return permission in self.permissions


@dataclass
class SessionContext:
    """Session-scoped state.

    ``urls`` only grows: entries are appended in call order and never
    deduplicated or removed here.
    """

    account: Account
    urls: list[str] = field(default_factory=list)

    def append_urls(self, urls: list[str]) -> None:
        self.urls.extend(urls)

    def to_dict(self) -> dict[str, Any]:
        """Return the values to store in the host session."""
        return {SESSION_URL_KEY: list(self.urls)}

    @classmethod
    def from_dict(cls, account: Account, data: dict[str, Any]) -> "SessionContext":
        """Restore session state from host session values.

        Raises:
            ValueError: If the stored URL list is malformed
        """
        raw = data.get(SESSION_URL_KEY, [])
        if not isinstance(raw, list) or not all(isinstance(url, str) for url in raw):
            raise ValueError(f"Session key {SESSION_URL_KEY} must be a list of strings")
        return cls(account=account, urls=list(raw))
