"""Read endpoint: parse a web article through the shared Mercury client.

Routes
------
GET /read?url=<target>&format=html|markdown|text&fetch_all_pages=true|false
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Request

from mercury.config import settings
from mercury.errors import ApiError, MercuryError
from mercury.models import ContentFormat, ParseOptions

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/read")
async def read(
    request: Request,
    url: str,
    format: Optional[ContentFormat] = None,
    fetch_all_pages: Optional[bool] = None,
) -> dict[str, Any]:
    """Parse *url* and return the extracted article.

    Upstream failures map to ``502``; a parse that outlives
    ``settings.reader_timeout`` maps to ``504``.
    """
    mercury = request.app.state.mercury
    options = ParseOptions(format=format, fetch_all_pages=fetch_all_pages)

    try:
        article = await asyncio.wait_for(
            mercury.parse(url, options), timeout=settings.reader_timeout
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except asyncio.TimeoutError as exc:
        logger.warning("Timed out reading %s after %.1fs", url, settings.reader_timeout)
        raise HTTPException(status_code=504, detail="Mercury did not respond in time") from exc
    except ApiError as exc:
        raise HTTPException(
            status_code=502,
            detail=f"Mercury returned HTTP {exc.status}: {exc.message}",
        ) from exc
    except MercuryError as exc:
        raise HTTPException(status_code=502, detail=f"Read failed: {exc}") from exc

    return article.to_dict()
