from __future__ import annotations
from typing import Optional

from .config import DEFAULT_SETTINGS, PrettyPrintSettings
from .exceptions import FormattingError
from .formatters import FormatResult, format_json, format_xml, tidy_html
from .logging import (
    HttpviewLoggerAdapter,
    get_httpview_logger,
    log_content_processing,
    log_exception,
)
from .media_types import MediaTypeCategory

__all__ = ["pretty_print"]


def _dispatch(category: MediaTypeCategory, content: str, settings: PrettyPrintSettings) -> Optional[FormatResult]:
    if category is MediaTypeCategory.XML:
        return format_xml(content, settings)
    # some APIs label JSON bodies as text/javascript
    if category in (MediaTypeCategory.JSON, MediaTypeCategory.JAVASCRIPT):
        return format_json(content, settings)
    if category is MediaTypeCategory.HTML:
        return tidy_html(content, settings.tidy)
    return None


def pretty_print(
    category: MediaTypeCategory,
    content: str,
    logger: Optional[HttpviewLoggerAdapter] = None,
    settings: Optional[PrettyPrintSettings] = None,
) -> str:
    """
    Best-effort reformatting of a decoded body according to its category.

    XML, JSON/Javascript and HTML bodies are re-indented; every other category
    is returned untouched. Never raises: when the body cannot be formatted a
    ``content.pretty_print.failed`` warning is logged and ``content`` comes
    back unchanged.

    Args:
        category: Category from ``classify(...).category``
        content: Decoded body text
        logger: Where to report formatting failures (defaults to this module's logger)
        settings: Formatting knobs (indentation, tidy options)

    Returns:
        Reformatted text, or ``content`` itself
    """
    settings = settings or DEFAULT_SETTINGS
    logger = logger or get_httpview_logger(__name__)

    try:
        category = MediaTypeCategory(category)
    except ValueError:
        return content

    try:
        result = _dispatch(category, content, settings)
    except Exception as exc:
        result = FormatResult.failure(
            FormattingError("Failed content conversion", cause=exc, category=category.value)
        )

    if result is None:
        return content

    if not result.ok:
        log_exception(
            logger,
            result.error,
            "content.pretty_print.failed",
            category=category.value,
            size_chars=len(content),
        )
        return content

    log_content_processing(
        logger,
        operation="pretty_print",
        category=category.value,
        size_chars=len(content),
    )
    return result.text
