"""Response decoding: raw status + body bytes to an :class:`Article`.

The decoder is a pure function and never raises anything other than a
:class:`~mercury.errors.MercuryError` subclass, whatever the body contains.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
from pydantic import ValidationError

from mercury.errors import ApiError, DecodeError
from mercury.models import Article

logger = logging.getLogger(__name__)

# Upper bound on how much of a non-JSON error body is echoed into messages.
_MAX_BODY_ECHO = 200


def _is_success(status: int) -> bool:
    return 200 <= status <= 299


def _server_message(payload: Any) -> Optional[str]:
    """Pull the human-readable failure text out of an error payload.

    The service uses either ``message`` or ``messages`` (string or list).
    """
    if not isinstance(payload, dict):
        return None
    for key in ("message", "messages"):
        value = payload.get(key)
        if isinstance(value, str) and value.strip():
            return value.strip()
        if isinstance(value, list):
            parts = [str(v).strip() for v in value if str(v).strip()]
            if parts:
                return "; ".join(parts)
    return None


def _signals_failure(payload: dict[str, Any]) -> bool:
    """``True`` for 2xx bodies that are really error envelopes."""
    if payload.get("error") is True:
        return True
    return "url" not in payload and _server_message(payload) is not None


def _body_excerpt(body: bytes) -> str:
    text = body.decode("utf-8", errors="replace").strip()
    if len(text) > _MAX_BODY_ECHO:
        text = text[:_MAX_BODY_ECHO] + "…"
    return text


def _api_error(status: int, body: bytes, payload: Any = None) -> ApiError:
    message = (
        _server_message(payload)
        or _body_excerpt(body)
        or httpx.codes.get_reason_phrase(status)
        or "request failed"
    )
    return ApiError(status, message)


def decode_response(status: int, body: bytes) -> Article:
    """Decode a service response into an :class:`Article`.

    Raises:
        ApiError: *status* is outside 200-299, or a 2xx body is an error
            envelope (``error: true`` or a bare ``message``).
        DecodeError: A 2xx body is not JSON, not an object, or does not
            satisfy the article schema.
    """
    if not _is_success(status):
        try:
            payload = json.loads(body) if body else None
        except (ValueError, RecursionError):
            payload = None
        raise _api_error(status, body, payload)

    try:
        payload = json.loads(body)
    except (ValueError, RecursionError) as exc:
        raise DecodeError(f"response body is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise DecodeError(
            f"expected a JSON object, got {type(payload).__name__}"
        )

    if _signals_failure(payload):
        raise _api_error(status, body, payload)

    try:
        return Article.model_validate(payload)
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) or "<root>" for err in exc.errors()
        )
        logger.debug("Article schema mismatch: %s", exc)
        raise DecodeError(f"response does not match the article schema ({fields})") from exc
