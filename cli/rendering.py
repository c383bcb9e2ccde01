"""Utilities for rendering parsed articles in the terminal."""

from __future__ import annotations

import textwrap
from typing import List, Optional

from bs4 import BeautifulSoup

from mercury.models import Article, ContentFormat

_BLOCK_TAGS = ["p", "h1", "h2", "h3", "h4", "h5", "h6", "li", "blockquote", "pre", "figcaption"]


def html_to_text(html: str, width: int = 80) -> str:
    """Flatten article HTML into wrapped plain-text paragraphs.

    Block elements become paragraphs; ``<pre>`` blocks keep their layout.
    Falls back to the document's full text when no block elements exist.
    """
    soup = BeautifulSoup(html, "html.parser")
    for tag in soup(["script", "style", "noscript"]):
        tag.decompose()

    paragraphs: List[str] = []
    for block in soup.find_all(_BLOCK_TAGS):
        # Nested blocks (e.g. <p> inside <li>) are emitted by their parent.
        if block.find_parent(_BLOCK_TAGS) is not None:
            continue
        if block.name == "pre":
            paragraphs.append(block.get_text().rstrip())
            continue
        text = " ".join(block.get_text(separator=" ").split())
        if not text:
            continue
        prefix = "• " if block.name == "li" else ""
        paragraphs.append(textwrap.fill(prefix + text, width=width))

    if not paragraphs:
        text = " ".join(soup.get_text(separator=" ").split())
        return textwrap.fill(text, width=width) if text else ""

    return "\n\n".join(paragraphs)


def render_article(
    article: Article,
    content_format: Optional[ContentFormat] = None,
    width: int = 80,
) -> str:
    """Render *article* as author, title, then body text.

    Content is treated as HTML unless a markdown/text format was requested,
    in which case it is printed as-is.
    """
    lines: List[str] = [""]
    if article.author:
        lines.append(article.author)
    lines.append(article.title or article.url)
    lines.append("")

    if content_format in (ContentFormat.MARKDOWN, ContentFormat.TEXT):
        lines.append(article.content.strip())
    else:
        lines.append(html_to_text(article.content, width=width))

    if article.has_next_page:
        lines.append("")
        lines.append(f"Next page: {article.next_page_url}")

    lines.append("")
    return "\n".join(lines)
