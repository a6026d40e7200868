"""
Tests for the httpview logging adapter.
"""

import logging
from unittest.mock import MagicMock

from httpview.logging import (
    HttpviewLoggerAdapter,
    configure_logging,
    get_httpview_logger,
    log_content_processing,
    log_exception,
)


class TestLoggerFactory:
    """Test logger factory injection."""

    def test_default_factory_uses_stdlib(self, caplog):
        """Test the default logger writes through stdlib logging."""
        logger = get_httpview_logger("httpview.test", url="https://example.com")

        with caplog.at_level(logging.WARNING, logger="httpview.test"):
            logger.warning("content.test")

        assert [r.getMessage() for r in caplog.records] == ["content.test"]

    def test_custom_factory_is_used(self):
        """Test configure_logging swaps the factory."""
        inner = MagicMock()
        factory = MagicMock(return_value=inner)
        configure_logging(factory)

        logger = get_httpview_logger("httpview.test", url="https://example.com", content_type="text/html")
        logger.info("content.classify", category="html")

        factory.assert_called_once_with(
            "httpview.test", url="https://example.com", content_type="text/html"
        )
        inner.info.assert_called_once_with(
            "content.classify",
            extra={"url": "https://example.com", "content_type": "text/html", "category": "html"},
        )


class TestAdapter:
    """Test HttpviewLoggerAdapter helpers."""

    def test_bind_adds_context(self):
        """Test bound context is merged into every call."""
        inner = MagicMock()
        logger = HttpviewLoggerAdapter(inner, {"url": "u"}).bind(category="xml")

        logger.debug("content.pretty_print")

        inner.debug.assert_called_once_with("content.pretty_print", extra={"url": "u", "category": "xml"})

    def test_log_exception_is_a_warning(self):
        """Test recovered failures are logged at warning level."""
        inner = MagicMock()
        exc = ValueError("bad")

        log_exception(HttpviewLoggerAdapter(inner), exc, "content.pretty_print.failed", category="json")

        inner.warning.assert_called_once_with(
            "content.pretty_print.failed",
            extra={"category": "json", "error_type": "ValueError", "error_message": "bad"},
            exc_info=exc,
        )

    def test_log_content_processing(self):
        """Test content events are debug level with a dotted name."""
        inner = MagicMock()

        log_content_processing(HttpviewLoggerAdapter(inner), "classify", content_type="text/html", category="html")

        inner.debug.assert_called_once_with(
            "content.classify",
            extra={"content_type": "text/html", "category": "html", "size_chars": None},
        )
