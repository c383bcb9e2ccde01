"""Reader service package.

Public re-export so callers can write::

    from mercury.api import app

    uvicorn mercury.api:app --reload
"""

from mercury.api.app import app, create_app

__all__ = ["app", "create_app"]
