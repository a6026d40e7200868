"""
Content-Type parsing and classification.

A raw ``Content-Type`` header is reduced to a lowercase ``type/subtype`` media
type and mapped onto one of a handful of ``MediaTypeCategory`` buckets that
drive pretty-printing and file extension choice.

Classification walks ``CLASSIFICATION_RULES`` top to bottom and stops at the
first match. The order is significant: ``application/xhtml+xml`` must hit the
HTML rule before the generic ``+xml`` rule sees it.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Mapping, Optional, Tuple, Union

import httpx

from .exceptions import ContentTypeParseError

__all__ = [
    "DEFAULT_MEDIA_TYPE",
    "MediaTypeCategory",
    "CLASSIFICATION_RULES",
    "ContentType",
    "ParseResult",
    "parse_content_type",
    "get_media_type_category",
    "classify",
]

DEFAULT_MEDIA_TYPE = "application/octet-stream"

# RFC 7230 token characters
_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"^({_TOKEN})/({_TOKEN})$")
_PARAMETER_RE = re.compile(rf'^({_TOKEN})\s*=\s*({_TOKEN}|"(?:[^"\\]|\\.)*")$')


class MediaTypeCategory(str, Enum):
    """Broad media type buckets we know how to pretty-print or name on disk."""

    XML = "xml"
    HTML = "html"
    JSON = "json"
    JAVASCRIPT = "javascript"
    TEXT = "text"
    APPLICATION = "application"
    OTHER = "other"


def _exact(*media_types: str) -> Callable[[str], bool]:
    return lambda mt: mt in media_types


def _prefix(*prefixes: str) -> Callable[[str], bool]:
    return lambda mt: mt.startswith(prefixes)


def _suffix(suffix: str) -> Callable[[str], bool]:
    return lambda mt: mt.endswith(suffix)


def _any_of(*predicates: Callable[[str], bool]) -> Callable[[str], bool]:
    return lambda mt: any(p(mt) for p in predicates)


# Evaluated in order; first match wins.
CLASSIFICATION_RULES: Tuple[Tuple[Callable[[str], bool], MediaTypeCategory], ...] = (
    (_exact("text/html", "application/xhtml+xml"), MediaTypeCategory.HTML),
    # +xml catch-all must come after HTML
    (_any_of(_exact("text/xml", "application/xml"), _suffix("+xml")), MediaTypeCategory.XML),
    (_exact("text/json", "application/json"), MediaTypeCategory.JSON),
    (
        _exact("text/javascript", "application/javascript", "application/x-javascript"),
        MediaTypeCategory.JAVASCRIPT,
    ),
    (_exact("text/plain"), MediaTypeCategory.TEXT),
    (
        _any_of(
            _prefix("image/", "video/", "audio/"),
            _exact("application/zip", DEFAULT_MEDIA_TYPE),
        ),
        MediaTypeCategory.APPLICATION,
    ),
)


def get_media_type_category(media_type: str) -> MediaTypeCategory:
    """Map a lowercase ``type/subtype`` onto its category."""
    for matches, category in CLASSIFICATION_RULES:
        if matches(media_type):
            return category
    return MediaTypeCategory.OTHER


@dataclass(frozen=True)
class ParseResult:
    """Outcome of parsing a header: media type (and charset) or the parse error."""

    media_type: Optional[str] = None
    charset: Optional[str] = None
    error: Optional[ContentTypeParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def parse_content_type(header: Optional[str]) -> ParseResult:
    """
    Parse the first declaration of a Content-Type header.

    Servers occasionally send comma separated declarations
    (``text/html, application/xhtml+xml``); only the first one counts.
    """
    if not isinstance(header, str):
        return ParseResult(error=ContentTypeParseError("", header=repr(header)))

    declaration = header.split(",")[0]
    media_type, _, params = declaration.partition(";")
    match = _MEDIA_TYPE_RE.match(media_type.strip())
    if match is None:
        return ParseResult(error=ContentTypeParseError("", header=header))

    charset: Optional[str] = None
    for param in params.split(";"):
        param = param.strip()
        if not param:
            continue
        param_match = _PARAMETER_RE.match(param)
        if param_match is None:
            return ParseResult(error=ContentTypeParseError("", header=header, context={"parameter": param}))
        name, value = param_match.groups()
        if name.lower() == "charset":
            charset = value.strip('"').lower()

    return ParseResult(media_type=match.group(0).lower(), charset=charset)


@dataclass(frozen=True)
class ContentType:
    """
    Immutable, normalized view of a Content-Type header.

    Construction never fails: anything unparsable becomes
    ``application/octet-stream``.

    Example:
        ct = ContentType("Text/HTML; charset=UTF-8")
        ct.media_type  # "text/html"
        ct.category    # MediaTypeCategory.HTML
    """

    header: Optional[str] = field(default=None, repr=False, compare=False)
    media_type: str = field(init=False)
    category: MediaTypeCategory = field(init=False)
    charset: Optional[str] = field(init=False)

    def __post_init__(self) -> None:
        result = parse_content_type(self.header)
        media_type = result.media_type if result.ok else DEFAULT_MEDIA_TYPE
        object.__setattr__(self, "media_type", media_type)
        object.__setattr__(self, "charset", result.charset)
        object.__setattr__(self, "category", get_media_type_category(media_type))

    @classmethod
    def from_headers(cls, headers: Union[httpx.Headers, Mapping[str, str], None]) -> "ContentType":
        """Build from a header mapping; a missing Content-Type yields the fallback."""
        if headers is None:
            return cls()
        if not isinstance(headers, httpx.Headers):
            headers = httpx.Headers(headers)
        return cls(headers.get("Content-Type"))

    @property
    def type(self) -> str:
        return self.media_type.split("/", 1)[0]

    @property
    def subtype(self) -> str:
        return self.media_type.split("/", 1)[1]


def classify(raw_header: Optional[str]) -> ContentType:
    """Parse and classify a raw Content-Type header."""
    return ContentType(raw_header)
