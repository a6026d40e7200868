"""
Rendering captured httpx responses for display and storage.

Glues the pieces together for traffic inspectors: classify the response's
Content-Type, pretty-print its decoded text, pick a file extension from the
media type (or the request path), and optionally write the result to disk.

Example:
    rendered = render_response(response)
    print(rendered.text)
    path = await save_body(rendered, Path("captures"), "0001-response")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles
import httpx

from .config import PrettyPrintSettings
from .extensions import extension_for
from .logging import HttpviewLoggerAdapter, get_httpview_logger, log_content_processing
from .media_types import ContentType
from .pretty import pretty_print

__all__ = [
    "RenderedBody",
    "render_response",
    "filename_for",
    "save_body",
]


@dataclass(frozen=True)
class RenderedBody:
    """A body ready to be shown or saved."""

    content_type: ContentType
    text: str
    extension: str              # no leading dot, may be empty
    url: Optional[str] = None   # request URL, when known


def _request_url(response: httpx.Response) -> Optional[httpx.URL]:
    try:
        return response.request.url
    except RuntimeError:
        # response built without a request
        return None


def render_response(
    response: httpx.Response,
    logger: Optional[HttpviewLoggerAdapter] = None,
    settings: Optional[PrettyPrintSettings] = None,
) -> RenderedBody:
    """
    Classify and pretty-print an already-read httpx response.

    ``response.text`` is used as the body, so transfer decompression
    (gzip, deflate, br) and charset decoding are left to httpx.
    """
    content_type = ContentType.from_headers(response.headers)
    url = _request_url(response)
    logger = logger or get_httpview_logger(
        __name__,
        url=str(url) if url is not None else None,
        content_type=response.headers.get("Content-Type"),
    )

    log_content_processing(
        logger,
        operation="classify",
        content_type=content_type.media_type,
        category=content_type.category.value,
    )

    text = pretty_print(content_type.category, response.text, logger=logger, settings=settings)
    return RenderedBody(
        content_type=content_type,
        text=text,
        extension=extension_for(content_type, url),
        url=str(url) if url is not None else None,
    )


def filename_for(stem: str, extension: str) -> str:
    """``stem.extension``, or just ``stem`` when there is no extension."""
    return f"{stem}.{extension}" if extension else stem


async def save_body(
    rendered: RenderedBody,
    directory: Union[str, Path],
    stem: str,
    encoding: str = "utf-8",
) -> Path:
    """
    Write a rendered body to ``directory/stem.<extension>``.

    Creates ``directory`` if needed and overwrites an existing file.

    Returns:
        Path of the written file
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    file_path = directory / filename_for(stem, rendered.extension)

    async with aiofiles.open(file_path, "w", encoding=encoding) as f:
        await f.write(rendered.text)

    return file_path
