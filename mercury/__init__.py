"""Python client for the Mercury Parser API.

Public re-exports so callers can write::

    from mercury import Mercury, ParseOptions

    async with Mercury(api_key) as client:
        article = await client.parse("https://example.com")
"""

from mercury.client import DEFAULT_ENDPOINT, Mercury
from mercury.decoder import decode_response
from mercury.errors import ApiError, ConfigError, DecodeError, MercuryError, TransportError
from mercury.models import Article, ContentFormat, ParseOptions, TextDirection
from mercury.request import build_request

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_ENDPOINT",
    "Mercury",
    "Article",
    "ContentFormat",
    "ParseOptions",
    "TextDirection",
    "MercuryError",
    "ConfigError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "build_request",
    "decode_response",
]
