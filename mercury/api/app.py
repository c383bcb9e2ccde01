"""FastAPI application factory for the reader service.

Lifespan
--------
On startup the app builds a single :class:`~mercury.Mercury` client (shared
across all requests via ``request.app.state.mercury``) from the configured
API key.  On shutdown it closes the client's HTTP connection pool.

Routers
-------
    /read      — parse a URL and return the article as JSON
    /health    — liveness probe
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from mercury import __version__
from mercury.api.routers import read as read_router
from mercury.client import Mercury
from mercury.config import settings


def create_app(mercury: Optional[Mercury] = None) -> FastAPI:
    """Return a fully-configured FastAPI application instance.

    Args:
        mercury: Client to serve requests with.  When omitted, one is built
            from ``settings`` at startup and closed at shutdown.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if mercury is not None:
            app.state.mercury = mercury
            yield
            return

        client = Mercury(settings.api_key, endpoint=settings.endpoint)
        app.state.mercury = client
        try:
            yield
        finally:
            await client.aclose()

    app = FastAPI(
        title="Mercury Reader",
        description="Read any web article as clean, structured JSON. Powered by the Mercury Parser.",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(read_router.router, tags=["read"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn mercury.api.app:app --reload
app = create_app()
