"""Logging setup shared by the terminal reader and the reader service.

Library modules only ever call ``logging.getLogger(__name__)``; configuring
handlers is left to whichever application embeds them.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> str:
    """Configure the root logger with a single stderr handler.

    Args:
        level: Logging level name (DEBUG, INFO, ...).  Defaults to
            ``settings.log_level``.  Unknown names fall back to INFO.

    Returns:
        The canonical name of the level applied (``WARN`` becomes
        ``WARNING``).
    """
    if level is None:
        from mercury.config import settings

        level = settings.log_level

    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        numeric = logging.INFO

    logging.basicConfig(
        level=numeric,
        format=_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
        force=True,
    )

    # One line per request from httpx at INFO is noise for a reader.
    for name in ("httpx", "httpcore"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return logging.getLevelName(numeric)
