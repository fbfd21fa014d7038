"""Siteimprove token client.

Requests a new authentication token from the Siteimprove service.
"""

import logging
from typing import TypedDict, cast

import httpx

from siteimprove.config import DEFAULT_CMS_NAME, DEFAULT_CMS_VERSION

logger = logging.getLogger(__name__)

TOKEN_REQUEST_URL = "https://my2.siteimprove.com/auth/token"


class TokenResponseDict(TypedDict):
    """Token endpoint response."""

    token: str


class TokenRequestError(Exception):
    """Raised when the token endpoint returns an unusable response."""


class TokenClient:
    """HTTP client for the Siteimprove token endpoint."""

    def __init__(
        self,
        client: httpx.Client,
        cms_name: str = DEFAULT_CMS_NAME,
        cms_version: str = DEFAULT_CMS_VERSION,
        url: str = TOKEN_REQUEST_URL,
    ):
        """Initialize token client.

        Args:
            client: httpx Client used for the request
            cms_name: Name of the host CMS reported to Siteimprove
            cms_version: Version of the host CMS reported to Siteimprove
            url: Token endpoint URL
        """
        self.client = client
        self.cms = f"{cms_name}-{cms_version}"
        self.url = url

    @property
    def request_url(self) -> str:
        """Full versioned token request URL."""
        return str(httpx.URL(self.url, params={"cms": self.cms}))

    def request_token(self) -> str | None:
        """Request a new Siteimprove token.

        Failures are logged and never raised.

        Returns:
            Token string, or None if the request failed
        """
        try:
            return self._fetch_token()
        except (httpx.HTTPError, TokenRequestError):
            logger.exception("There was an error requesting a new token.")
        return None

    def _fetch_token(self) -> str:
        """Perform the token request.

        Raises:
            httpx.HTTPError: If the request fails
            TokenRequestError: If the response body has no usable token
        """
        logger.info(f"Requesting Siteimprove token for {self.cms}")
        response = self.client.get(
            self.url,
            params={"cms": self.cms},
            headers={"Accept": "application/json"},
            follow_redirects=True,
        )
        if response.status_code >= 400:
            logger.error(f"Token error response: {response.text}")
        response.raise_for_status()

        if not response.content:
            raise TokenRequestError("Empty response body")

        try:
            raw = response.json()
        except (ValueError, RecursionError) as e:
            raise TokenRequestError(f"Token response is not valid JSON: {e}") from e
        if not isinstance(raw, dict):
            raise TokenRequestError("Token response must be a JSON object")

        data = cast(TokenResponseDict, raw)
        token = data.get("token")
        if not isinstance(token, str) or not token:
            raise TokenRequestError("Token response has no token")

        return token
