"""
Logging adapter for the httpview content toolkit.

This module provides dependency injection for structured logging while keeping
httpview decoupled from specific logging implementations.

Architecture:
- HttpviewLoggerAdapter wraps any LoggerAdapter and provides httpview-specific helpers
- _logger_factory allows consumers to inject their logger factory
- Default factory uses standard library logging when no custom factory is configured

Loggers are handed to ``pretty_print`` / ``render_response`` explicitly; the
core never reaches for a process-wide logger on its own.

Usage in httpview:
    from httpview.logging import get_httpview_logger

    logger = get_httpview_logger(__name__, url="https://example.com/feed.xml")
    text = pretty_print(MediaTypeCategory.XML, body, logger=logger)

Usage in consumer applications (configuring the factory):
    from httpview.logging import configure_logging
    from myproxy.logging import get_custom_logger

    configure_logging(logger_factory=get_custom_logger)
"""

from __future__ import annotations

import logging
from logging import Logger, LoggerAdapter
from typing import Any, Callable, Dict, Optional


# Global logger factory (can be injected by embedding applications)
_logger_factory: Optional[Callable[..., LoggerAdapter]] = None


class HttpviewLoggerAdapter:
    """
    Thin wrapper around LoggerAdapter providing httpview-specific logging helpers.

    Event names are dotted (``content.pretty_print.failed``); metadata goes
    into ``extra``.
    """

    def __init__(self, logger: LoggerAdapter, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the adapter.

        Args:
            logger: Underlying LoggerAdapter (from custom logger or stdlib)
            context: Additional context to bind to all log records
        """
        self._logger = logger
        self._context = context or {}

    def _merge_context(self, **extra: Any) -> Dict[str, Any]:
        """Merge bound context with extra fields."""
        return {**self._context, **extra}

    def bind(self, **extra: Any) -> "HttpviewLoggerAdapter":
        """Return a new adapter with additional bound context."""
        return HttpviewLoggerAdapter(self._logger, self._merge_context(**extra))

    def debug(self, event: str, **extra: Any) -> None:
        """Log DEBUG-level event."""
        self._logger.debug(event, extra=self._merge_context(**extra))

    def info(self, event: str, **extra: Any) -> None:
        """Log INFO-level event."""
        self._logger.info(event, extra=self._merge_context(**extra))

    def warning(self, event: str, exc_info: Optional[BaseException] = None, **extra: Any) -> None:
        """Log WARNING-level event."""
        self._logger.warning(event, extra=self._merge_context(**extra), exc_info=exc_info)

    def error(self, event: str, exc_info: Optional[BaseException] = None, **extra: Any) -> None:
        """Log ERROR-level event."""
        self._logger.error(event, extra=self._merge_context(**extra), exc_info=exc_info)


def _default_logger_factory(name: str, **context: Any) -> LoggerAdapter:
    """
    Default logger factory using standard library logging.

    Returns a basic LoggerAdapter when no custom factory is configured.
    """
    base_logger: Logger = logging.getLogger(name)
    return logging.LoggerAdapter(base_logger, {"extra": context})


def configure_logging(logger_factory: Optional[Callable[..., LoggerAdapter]]) -> None:
    """
    Configure httpview to use a custom logger factory.

    Args:
        logger_factory: Callable that returns a LoggerAdapter, signature:
                       (name: str, **context) -> LoggerAdapter.
                       Pass None to restore the stdlib default.
    """
    global _logger_factory
    _logger_factory = logger_factory


def get_httpview_logger(
    name: str,
    url: Optional[str] = None,
    content_type: Optional[str] = None,
    **extra_context: Any
) -> HttpviewLoggerAdapter:
    """
    Get an httpview logger with message context.

    Uses the configured logger factory if set, otherwise falls back to stdlib logging.

    Args:
        name: Logger name (typically __name__)
        url: Request URL of the message being processed
        content_type: Raw Content-Type header value
        **extra_context: Additional context to bind

    Returns:
        HttpviewLoggerAdapter with bound context
    """
    context: Dict[str, Any] = {**extra_context}

    if url is not None:
        context["url"] = url
    if content_type is not None:
        context["content_type"] = content_type

    factory = _logger_factory or _default_logger_factory
    base_logger = factory(name, **context)

    return HttpviewLoggerAdapter(base_logger, context)


def log_exception(
    logger: HttpviewLoggerAdapter,
    exc: BaseException,
    event: str,
    **context: Any
) -> None:
    """
    Log a recovered failure as a warning with httpview context.

    Nothing in httpview is fatal, so recovered failures are warnings rather
    than errors.

    Usage:
        result = format_xml(body)
        if result.error is not None:
            log_exception(logger, result.error, "content.pretty_print.failed", category="xml")
    """
    error_context = {
        **context,
        "error_type": exc.__class__.__name__,
        "error_message": str(exc),
    }

    logger.warning(event, exc_info=exc, **error_context)


def log_content_processing(
    logger: HttpviewLoggerAdapter,
    operation: str,
    content_type: Optional[str] = None,
    category: Optional[str] = None,
    size_chars: Optional[int] = None,
    **context: Any
) -> None:
    """
    Log content processing operations (classify, pretty_print, extension).

    Usage:
        log_content_processing(
            logger,
            operation="classify",
            content_type="application/json",
            category="json",
        )
    """
    logger.debug(
        f"content.{operation}",
        content_type=content_type,
        category=category,
        size_chars=size_chars,
        **context
    )
