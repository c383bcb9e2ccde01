"""Settings for the terminal reader and the reader service.

The client library itself never reads the environment; only the application
surfaces (``cli`` and ``mercury.api``) resolve their configuration here.
Values can be overridden via environment variables or a `.env` file in the
project root (loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from mercury.client import DEFAULT_ENDPOINT

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Service access
    # ------------------------------------------------------------------
    api_key: str = field(
        default_factory=lambda: os.environ.get("MERCURY_API_KEY", "")
    )
    endpoint: str = field(
        default_factory=lambda: os.environ.get("MERCURY_ENDPOINT", DEFAULT_ENDPOINT)
    )

    # ------------------------------------------------------------------
    # Reader surfaces
    # ------------------------------------------------------------------
    reader_timeout: float = field(
        default_factory=lambda: float(os.environ.get("MERCURY_READER_TIMEOUT", "30.0"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton. Import this everywhere:
#   from mercury.config import settings
settings = Settings()
