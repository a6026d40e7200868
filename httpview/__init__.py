from .media_types import (
    DEFAULT_MEDIA_TYPE,
    MediaTypeCategory,
    ContentType,
    classify,
    get_media_type_category,
)
from .pretty import pretty_print
from .extensions import (
    infer_extension,
    extension_from_uri,
    extension_for,
)
from .render import (
    RenderedBody,
    render_response,
    save_body,
)
from .config import (
    PrettyPrintSettings,
    TidyOptions,
)
from .exceptions import (
    HttpviewError,
    ContentTypeParseError,
    FormattingError,
    XmlFormatError,
    JsonFormatError,
    HtmlTidyError,
)
from .logging import (
    HttpviewLoggerAdapter,
    configure_logging,
    get_httpview_logger,
)


__all__ = [
    # Classification
    "DEFAULT_MEDIA_TYPE",
    "MediaTypeCategory",
    "ContentType",
    "classify",
    "get_media_type_category",

    # Pretty-printing
    "pretty_print",

    # Extension inference
    "infer_extension",
    "extension_from_uri",
    "extension_for",

    # httpx responses
    "RenderedBody",
    "render_response",
    "save_body",

    # Configuration
    "PrettyPrintSettings",
    "TidyOptions",

    # Exceptions
    "HttpviewError",
    "ContentTypeParseError",
    "FormattingError",
    "XmlFormatError",
    "JsonFormatError",
    "HtmlTidyError",

    # Logging
    "HttpviewLoggerAdapter",
    "configure_logging",
    "get_httpview_logger",
]
