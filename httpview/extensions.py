from __future__ import annotations
import posixpath
from typing import Optional, Union

import httpx

from .media_types import ContentType, MediaTypeCategory

__all__ = [
    "infer_extension",
    "extension_from_uri",
    "extension_for",
]

_CATEGORY_EXTENSIONS = {
    MediaTypeCategory.HTML: "html",
    MediaTypeCategory.JSON: "json",
    MediaTypeCategory.TEXT: "txt",
    MediaTypeCategory.XML: "xml",
}

_MEDIA_TYPE_EXTENSIONS = {
    "text/csv": "csv",
    "text/css": "css",
    "text/ecmascript": "js",
    "text/javascript": "js",
    "application/javascript": "js",
    "application/x-javascript": "js",
}

def extension_from_uri(request_uri: Union[str, httpx.URL, None]) -> str:
    """Extension of the last path segment of ``request_uri``, or ``""``."""
    if request_uri is None:
        return ""
    try:
        path = httpx.URL(request_uri).path
    except (httpx.InvalidURL, TypeError, ValueError):
        return ""
    # "/.bashrc" has extension "bashrc"; "file." has none
    name = posixpath.basename(path)
    _, dot, ext = name.rpartition(".")
    return ext if dot else ""

def infer_extension(
    category: MediaTypeCategory,
    media_type: str,
    request_uri: Union[str, httpx.URL, None] = None,
) -> str:
    """
    Choose a file extension (without the leading dot) for a message body.

    Known text categories map to fixed extensions, binary-ish media use their
    subtype, and anything uninformative falls back to the request path.
    """
    try:
        category = MediaTypeCategory(category)
    except ValueError:
        category = MediaTypeCategory.OTHER

    if category in _CATEGORY_EXTENSIONS:
        return _CATEGORY_EXTENSIONS[category]

    if category is MediaTypeCategory.APPLICATION:
        subtype = media_type.split("/", 1)[1] if "/" in media_type else ""
        if subtype and subtype != "octet-stream":
            return subtype
        return extension_from_uri(request_uri)

    return _MEDIA_TYPE_EXTENSIONS.get(media_type) or extension_from_uri(request_uri)

def extension_for(content_type: ContentType, request_uri: Optional[Union[str, httpx.URL]] = None) -> str:
    """Shortcut taking a ``ContentType`` instead of its parts."""
    return infer_extension(content_type.category, content_type.media_type, request_uri)
