"""Typed records for parse options and parsed articles.

``Article`` is a frozen pydantic model so the decoder gets field coercion
(ISO timestamps, integers) and unknown-key tolerance for free.  Options are a
plain dataclass; they never touch JSON.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator

from mercury.errors import ConfigError


class TextDirection(str, Enum):
    """Reading direction of the parsed body content."""

    LTR = "ltr"
    RTL = "rtl"

    @property
    def is_ltr(self) -> bool:
        return self is TextDirection.LTR

    @property
    def is_rtl(self) -> bool:
        return self is TextDirection.RTL


class ContentFormat(str, Enum):
    """Output type the service renders ``content`` in."""

    HTML = "html"
    MARKDOWN = "markdown"
    TEXT = "text"


# ---------------------------------------------------------------------------
# Options
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ParseOptions:
    """Optional knobs forwarded to the service as query parameters.

    Any field left as ``None`` is omitted so the server default applies.
    ``output_type`` is accepted as an alias for ``format``.  ``extra`` is
    passed through verbatim for parameters not modelled here.
    """

    format: Optional[ContentFormat] = None
    output_type: Optional[ContentFormat] = None
    fetch_all_pages: Optional[bool] = None
    extra: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("format", "output_type"):
            value = getattr(self, name)
            if value is None or isinstance(value, ContentFormat):
                continue
            try:
                object.__setattr__(self, name, ContentFormat(str(value).lower()))
            except ValueError as exc:
                choices = ", ".join(f.value for f in ContentFormat)
                raise ConfigError(
                    f"unsupported {name} {value!r} (expected one of: {choices})"
                ) from exc

        if self.format and self.output_type and self.format is not self.output_type:
            raise ConfigError(
                f"format={self.format.value!r} conflicts with "
                f"output_type={self.output_type.value!r}"
            )

    @property
    def content_format(self) -> Optional[ContentFormat]:
        """The requested format, whichever of the two aliases carried it."""
        return self.format or self.output_type


# ---------------------------------------------------------------------------
# Article
# ---------------------------------------------------------------------------

class Article(BaseModel):
    """Structured data extracted from a web page by the service.

    Only ``url`` and ``content`` are guaranteed; every other attribute is
    absent when the service could not extract it.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    url: str
    content: str
    title: Optional[str] = None
    author: Optional[str] = None
    date_published: Optional[datetime] = None
    dek: Optional[str] = None
    excerpt: Optional[str] = None
    lead_image_url: Optional[str] = None
    next_page_url: Optional[str] = None
    domain: Optional[str] = None
    word_count: Optional[int] = None
    direction: TextDirection = TextDirection.LTR
    total_pages: int = 1
    rendered_pages: int = 1

    @field_validator("direction", "total_pages", "rendered_pages", mode="before")
    @classmethod
    def null_means_default(cls, value: Any, info: ValidationInfo) -> Any:
        # The service sends explicit nulls for fields it could not compute.
        if value is None:
            return cls.model_fields[info.field_name].default
        return value

    @property
    def has_next_page(self) -> bool:
        """``True`` when the service reported a further page to follow."""
        return bool(self.next_page_url)

    def to_dict(self) -> dict[str, Any]:
        """JSON-compatible representation (timestamps as ISO strings)."""
        return self.model_dump(mode="json")
