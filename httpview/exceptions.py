"""
Exception hierarchy for the httpview content toolkit.

None of these exceptions escape the public operations (``classify``,
``pretty_print``, ``infer_extension``). They describe *why* a best-effort
operation fell back, and travel inside ``ParseResult`` / ``FormatResult``
outcomes until they are logged.

Exception Hierarchy:
    HttpviewError (base)
    ├── ContentTypeParseError
    └── FormattingError
        ├── XmlFormatError
        ├── JsonFormatError
        └── HtmlTidyError

Usage:
    from httpview.formatters import format_json

    result = format_json(body)
    if not result.ok:
        logger.warning("content.pretty_print.failed", error=str(result.error))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Dict, Any

__all__ = [
    "HttpviewError",
    "ContentTypeParseError",
    "FormattingError",
    "XmlFormatError",
    "JsonFormatError",
    "HtmlTidyError",
]


# ============================================================================
# Base Exception
# ============================================================================


@dataclass(slots=True)
class HttpviewError(Exception):
    """
    Base exception for all httpview failures.

    Carries the triggering exception as ``cause`` (also chained as
    ``__cause__``) plus free-form context for logging.
    """

    message: str
    cause: Optional[BaseException] = None
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message)
        if self.cause is not None:
            self.__cause__ = self.cause

    def __str__(self) -> str:
        parts = [self.message]
        if self.cause is not None:
            parts.append(f"cause={self.cause.__class__.__name__}: {self.cause}")
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            parts.append(f"context=({ctx_str})")
        return " | ".join(parts)


# ============================================================================
# Header Parsing
# ============================================================================


@dataclass(slots=True)
class ContentTypeParseError(HttpviewError):
    """Content-Type header could not be parsed as ``type/subtype[; params]``."""

    header: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"Unparsable Content-Type header: {self.header!r}"
        HttpviewError.__post_init__(self)


# ============================================================================
# Formatting Errors
# ============================================================================


@dataclass(slots=True)
class FormattingError(HttpviewError):
    """
    Base class for pretty-print failures.

    Raised inside a formatter when the underlying parser rejects the body.
    """

    category: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.message:
            self.message = f"Failed content conversion (category={self.category})"
        HttpviewError.__post_init__(self)


@dataclass(slots=True)
class XmlFormatError(FormattingError):
    """Body is not well-formed XML."""

    def __post_init__(self) -> None:
        if self.category is None:
            self.category = "xml"
        FormattingError.__post_init__(self)


@dataclass(slots=True)
class JsonFormatError(FormattingError):
    """Body is not valid JSON."""

    def __post_init__(self) -> None:
        if self.category is None:
            self.category = "json"
        FormattingError.__post_init__(self)


@dataclass(slots=True)
class HtmlTidyError(FormattingError):
    """HTML tidying failed (encoding adaptation or the tree builder rejected the markup)."""

    def __post_init__(self) -> None:
        if self.category is None:
            self.category = "html"
        FormattingError.__post_init__(self)
