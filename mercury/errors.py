"""Error taxonomy raised by the Mercury client.

Every failure surfaces as a :class:`MercuryError` subclass; the original
library exception (``httpx``, ``json``, ``pydantic``) is chained as
``__cause__``.
"""

from __future__ import annotations


class MercuryError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ConfigError(MercuryError):
    """The client or its options were configured with invalid values."""


class TransportError(MercuryError):
    """The request never produced an HTTP response (DNS, TCP, TLS, ...)."""


class ApiError(MercuryError):
    """The service answered with a failure response."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status

    def __str__(self) -> str:
        return f"HTTP {self.status}: {self.message}"


class DecodeError(MercuryError):
    """A success response whose body does not match the article schema."""
