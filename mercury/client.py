"""Async client for the Mercury Parser API.

A :class:`Mercury` instance holds an API key and an ``httpx.AsyncClient``
and nothing else; after construction it carries no mutable state, so one
instance can be shared freely between concurrent tasks.  Each
:meth:`Mercury.parse` call performs exactly one HTTP request.
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from mercury.decoder import decode_response
from mercury.errors import ConfigError, MercuryError, TransportError
from mercury.models import Article, ParseOptions
from mercury.request import build_request

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://mercury.postlight.com/parser"


class Mercury:
    """A client used to make requests to the Mercury Parser API.

    Args:
        api_key: The key sent with every request.  Must be non-blank.
        http_client: Shared ``httpx.AsyncClient`` to issue requests through.
            When omitted the client creates (and owns) its own, with no
            timeout: callers wrap :meth:`parse` in a deadline if they need
            one.
        endpoint: Base URL of the parser endpoint.

    Raises:
        ConfigError: If *api_key* is empty or *endpoint* is not an absolute
            http(s) URL.

    Example::

        async with Mercury(os.environ["MERCURY_API_KEY"]) as client:
            article = await client.parse("https://example.com")
            print(article.title)
    """

    def __init__(
        self,
        api_key: str,
        *,
        http_client: Optional[httpx.AsyncClient] = None,
        endpoint: str = DEFAULT_ENDPOINT,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigError("API key must not be empty")
        if not endpoint or not endpoint.strip():
            raise ConfigError("endpoint must not be empty")
        try:
            parsed = httpx.URL(endpoint.strip())
        except httpx.InvalidURL as exc:
            raise ConfigError(f"invalid endpoint {endpoint!r}: {exc}") from exc
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise ConfigError(f"endpoint must be an absolute http(s) URL, got {endpoint!r}")

        self._api_key = api_key.strip()
        self._endpoint = endpoint.strip()
        self._owns_client = http_client is None
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=None)
        self._client = http_client

    @property
    def endpoint(self) -> str:
        return self._endpoint

    def __repr__(self) -> str:
        # Never echo the key.
        return f"Mercury(endpoint={self._endpoint!r})"

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> Mercury:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    async def parse(self, url: str, options: Optional[ParseOptions] = None) -> Article:
        """Ask the service to parse *url* and return the decoded article.

        Raises:
            ValueError: If *url* is empty.
            TransportError: The request failed before a response arrived.
            ApiError: The service answered with a non-2xx status or an
                error envelope.
            DecodeError: The success body could not be decoded.
        """
        request = build_request(self._endpoint, url, self._api_key, options)
        logger.debug("GET %s (target=%s)", self._endpoint, url)

        try:
            response = await self._client.send(request)
        except httpx.RequestError as exc:
            logger.warning("Mercury request for %s failed: %s", url, exc)
            raise TransportError(f"request to {self._endpoint} failed: {exc}") from exc

        logger.debug("Mercury responded HTTP %d for %s", response.status_code, url)
        try:
            return decode_response(response.status_code, response.content)
        except MercuryError as exc:
            logger.warning("Mercury could not parse %s: %s", url, exc)
            raise
