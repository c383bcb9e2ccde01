"""Tests for environment-driven settings."""

from __future__ import annotations

from mercury.client import DEFAULT_ENDPOINT
from mercury.config import Settings


def test_defaults(monkeypatch):
    for var in ("MERCURY_API_KEY", "MERCURY_ENDPOINT", "MERCURY_READER_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    s = Settings()

    assert s.api_key == ""
    assert s.endpoint == DEFAULT_ENDPOINT
    assert s.reader_timeout == 30.0
    assert s.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("MERCURY_API_KEY", "abc")
    monkeypatch.setenv("MERCURY_ENDPOINT", "http://localhost:3000/parser")
    monkeypatch.setenv("MERCURY_READER_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings()

    assert s.api_key == "abc"
    assert s.endpoint == "http://localhost:3000/parser"
    assert s.reader_timeout == 2.5
    assert s.log_level == "DEBUG"


def test_setup_logging_sets_levels():
    import logging

    from mercury.log import setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert logging.getLogger("httpx").level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)


def test_setup_logging_returns_canonical_level_name():
    import logging

    from mercury.log import setup_logging

    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        assert setup_logging("warn") == "WARNING"
        assert root.level == logging.WARNING
        assert setup_logging("chatty") == "INFO"
        assert root.level == logging.INFO
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
