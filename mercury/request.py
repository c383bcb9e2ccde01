"""Outbound request construction.

``build_request`` is pure: it returns an unsent :class:`httpx.Request` so the
exact wire shape can be asserted in tests without any transport.
"""

from __future__ import annotations

from typing import Optional

import httpx

from mercury.models import ParseOptions

API_KEY_HEADER = "x-api-key"

# Query parameter names used by the service for the modelled options.
_FORMAT_PARAM = "contentType"
_FETCH_ALL_PAGES_PARAM = "fetchAllPages"


def _option_params(options: ParseOptions) -> list[tuple[str, str]]:
    """Flatten *options* into query pairs, skipping anything left unset."""
    params: list[tuple[str, str]] = []
    fmt = options.content_format
    if fmt is not None:
        params.append((_FORMAT_PARAM, fmt.value))
    if options.fetch_all_pages is not None:
        params.append((_FETCH_ALL_PAGES_PARAM, "true" if options.fetch_all_pages else "false"))
    for key, value in options.extra.items():
        if key == "url":
            continue
        params.append((key, str(value)))
    return params


def build_request(
    endpoint: str,
    url: str,
    api_key: str,
    options: Optional[ParseOptions] = None,
) -> httpx.Request:
    """Return the GET request asking the service to parse *url*.

    The target goes first in the query string as ``url=<percent-encoded>``,
    followed by any supplied options.  The API key travels in the
    ``x-api-key`` header.

    Raises:
        ValueError: If *url* is empty or blank.
    """
    target = url.strip() if url else ""
    if not target:
        raise ValueError("target url must not be empty")

    params = [("url", target)]
    if options is not None:
        params.extend(_option_params(options))

    return httpx.Request(
        "GET",
        endpoint,
        params=params,
        headers={
            "Accept": "application/json",
            API_KEY_HEADER: api_key,
        },
    )
