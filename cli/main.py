"""Mercury Reader CLI. Read articles in your terminal.

Usage:
    mercury --help
    mercury read https://example.com/some-article
    mercury serve --port 8000

The API key is read from ``MERCURY_API_KEY`` (environment or `.env`).
"""

from __future__ import annotations

import asyncio
import json
from typing import Optional

import typer

from cli.rendering import render_article
from mercury.client import Mercury
from mercury.config import settings
from mercury.errors import ConfigError, MercuryError
from mercury.log import setup_logging
from mercury.models import Article, ContentFormat, ParseOptions

# Level names uvicorn accepts for its own loggers.
_UVICORN_LEVELS = ("critical", "error", "warning", "info", "debug")

app = typer.Typer(
    name="mercury",
    help="Read articles in your terminal. Powered by the Mercury Parser.",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Configure logging before any command runs."""
    ctx.obj = {"log_level": setup_logging(log_level)}


async def _parse(url: str, options: ParseOptions) -> Article:
    async with Mercury(settings.api_key, endpoint=settings.endpoint) as client:
        return await asyncio.wait_for(
            client.parse(url, options), timeout=settings.reader_timeout
        )


# ---------------------------------------------------------------------------
# read
# ---------------------------------------------------------------------------
@app.command("read")
def read(
    url: str = typer.Argument(..., help="The url of the article you would like to read."),
    format: Optional[ContentFormat] = typer.Option(
        None, "--format", "-f", help="Content type to request from the service."
    ),
    fetch_all_pages: bool = typer.Option(
        False, "--fetch-all-pages", help="Merge multi-page articles into one."
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw article as JSON."),
    width: int = typer.Option(80, help="Wrap width for rendered text."),
) -> None:
    """Fetch URL through the Mercury Parser and print the article."""
    if not settings.api_key.strip():
        typer.echo("❌ MERCURY_API_KEY is not set.", err=True)
        raise typer.Exit(code=2)

    options = ParseOptions(format=format, fetch_all_pages=fetch_all_pages or None)

    try:
        article = asyncio.run(_parse(url, options))
    except (ConfigError, ValueError) as exc:
        typer.echo(f"❌ Invalid input: {exc}", err=True)
        raise typer.Exit(code=2)
    except asyncio.TimeoutError:
        typer.echo(f"❌ No response within {settings.reader_timeout:.0f}s.", err=True)
        raise typer.Exit(code=1)
    except MercuryError as exc:
        typer.echo(f"❌ {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(article.to_dict(), indent=2, ensure_ascii=False))
        return

    typer.echo(render_article(article, content_format=options.content_format, width=width))


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------
@app.command("serve")
def serve(
    ctx: typer.Context,
    host: str = typer.Option("127.0.0.1", help="Interface to bind."),
    port: int = typer.Option(8000, help="Port to listen on."),
) -> None:
    """Run the reader service (GET /read?url=...)."""
    import uvicorn

    if not settings.api_key.strip():
        typer.echo("❌ MERCURY_API_KEY is not set.", err=True)
        raise typer.Exit(code=2)

    typer.echo(f"[serve] Mercury Reader on http://{host}:{port}/read?url=…")
    level = str((ctx.obj or {}).get("log_level") or "info").lower()
    if level not in _UVICORN_LEVELS:
        level = "info"
    uvicorn.run("mercury.api.app:app", host=host, port=port, log_level=level)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
