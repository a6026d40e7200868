"""
Formatting capabilities used by the pretty-print dispatcher.

Each formatter takes a decoded body and returns a ``FormatResult``: either the
reformatted text or the ``FormattingError`` that explains why the body was
rejected. Formatters never raise for bad input; the dispatcher decides what to
do with a failure.

- XML:  ``xml.dom.minidom`` parse + pretty serialization, declaration kept verbatim
- JSON: ``json`` into a generic ``JsonValue`` tree, re-dumped with indentation
- HTML: BeautifulSoup (``html.parser``) tidy with ``TidyOptions``
"""

from __future__ import annotations

import io
import json
import re
import textwrap
import warnings
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union
from xml.dom import Node, minidom
from xml.parsers.expat import ExpatError

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.formatter import HTMLFormatter

from .config import DEFAULT_SETTINGS, PrettyPrintSettings, TidyOptions
from .exceptions import FormattingError, HtmlTidyError, JsonFormatError, XmlFormatError

__all__ = [
    "FormatResult",
    "JsonValue",
    "format_xml",
    "format_json",
    "tidy_html",
]

JsonValue = Union[Dict[str, Any], List[Any], str, int, float, bool, None]

_XML_DECLARATION = re.compile(r"<\?xml\s[^>]*?\?>")

# BeautifulSoup never merges or re-flows these; only the tidy default is accepted.
_UNSUPPORTED_TIDY_OPTIONS = (
    "output_xhtml",
    "output_xml",
    "indent_attributes",
    "merge_divs",
    "merge_spans",
    "join_styles",
)

# Bodies of these tags are never re-flowed or padded
_PRESERVED_OPEN = re.compile(r"<(?:pre|textarea|script|style)\b", re.IGNORECASE)
_PRESERVED_CLOSE = re.compile(r"</(?:pre|textarea|script|style)\s*>", re.IGNORECASE)


@dataclass(frozen=True)
class FormatResult:
    """Outcome of a formatter call: ``text`` on success, ``error`` on failure."""

    text: Optional[str] = None
    error: Optional[FormattingError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, text: str) -> "FormatResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: FormattingError) -> "FormatResult":
        return cls(error=error)


# ============================================================================
# XML
# ============================================================================


def _has_text(node: Node) -> bool:
    return any(
        child.nodeType == Node.CDATA_SECTION_NODE
        or (child.nodeType == Node.TEXT_NODE and child.data.strip())
        for child in node.childNodes
    )


def _strip_blank_text(node: Node) -> None:
    """Drop whitespace-only text nodes from element-only content."""
    if _has_text(node):
        # mixed content is written inline, whitespace included
        return
    for child in list(node.childNodes):
        if child.nodeType == Node.TEXT_NODE:
            node.removeChild(child)
            child.unlink()
        elif child.hasChildNodes():
            _strip_blank_text(child)


def _serialize_xml(node: Node, indent: str, level: int = 0) -> List[str]:
    """
    Indent element-only content; write anything holding text inline.

    Text is never padded, so mixed content comes out exactly as parsed and a
    second pass reproduces the first.
    """
    pad = indent * level
    children = node.childNodes
    if node.nodeType != Node.ELEMENT_NODE or not children or _has_text(node):
        return [pad + node.toxml()]

    # shallow clone renders "<tag attrs/>"
    start_tag = node.cloneNode(False).toxml()[:-2] + ">"
    lines = [pad + start_tag]
    for child in children:
        lines.extend(_serialize_xml(child, indent, level + 1))
    lines.append(f"{pad}</{node.tagName}>")
    return lines


def format_xml(content: str, settings: Optional[PrettyPrintSettings] = None) -> FormatResult:
    """
    Parse ``content`` as XML and re-serialize it with indentation.

    When the body starts with an XML declaration, that declaration is emitted
    exactly as received, followed by ``settings.line_separator`` and the body.
    A leading byte order mark is dropped.
    """
    settings = settings or DEFAULT_SETTINGS
    text = content.lstrip().lstrip("\ufeff").lstrip()

    declaration: Optional[str] = None
    match = _XML_DECLARATION.match(text)
    if match:
        declaration = match.group(0)
        # re-emitted verbatim, so the parser only needs the document itself
        text = text[match.end():].lstrip()

    try:
        doc = minidom.parseString(text)
    except (ExpatError, ValueError) as exc:
        return FormatResult.failure(XmlFormatError("Failed to parse XML body", cause=exc))

    try:
        _strip_blank_text(doc)
        lines: List[str] = []
        for child in doc.childNodes:
            lines.extend(_serialize_xml(child, settings.xml_indent))
    finally:
        doc.unlink()

    body = "\n".join(lines)
    if declaration is not None:
        return FormatResult.success(declaration + settings.line_separator + body)
    return FormatResult.success(body)


# ============================================================================
# JSON
# ============================================================================


def parse_json(content: str) -> JsonValue:
    """Parse into a schema-less tree of dicts, lists and scalars."""
    return json.loads(content)


def format_json(content: str, settings: Optional[PrettyPrintSettings] = None) -> FormatResult:
    """Re-serialize a JSON body with ``settings.json_indent`` spaces per level."""
    settings = settings or DEFAULT_SETTINGS
    try:
        value = parse_json(content)
        return FormatResult.success(
            json.dumps(value, indent=settings.json_indent, ensure_ascii=settings.json_ensure_ascii)
        )
    except (ValueError, RecursionError) as exc:
        # json.JSONDecodeError is a ValueError
        return FormatResult.failure(JsonFormatError("Failed to parse JSON body", cause=exc))


# ============================================================================
# HTML
# ============================================================================


def _preserved_lines(lines: List[str]) -> List[bool]:
    """Flag lines that sit inside a ``<pre>``/``<textarea>``/``<script>``/``<style>`` body."""
    flags: List[bool] = []
    depth = 0
    for line in lines:
        stripped = line.lstrip()
        flags.append(depth > 0)
        if _PRESERVED_OPEN.match(stripped):
            depth += 1
        depth = max(depth - len(_PRESERVED_CLOSE.findall(stripped)), 0)
    return flags


def _wrap_lines(lines: List[str], width: int) -> List[str]:
    wrapped: List[str] = []
    for line, preserved in zip(lines, _preserved_lines(lines)):
        stripped = line.lstrip()
        if preserved or len(line) <= width or stripped.startswith("<"):
            wrapped.append(line)
            continue

        indent = line[: len(line) - len(stripped)]
        wrapped.extend(
            textwrap.wrap(
                stripped,
                width=width,
                initial_indent=indent,
                subsequent_indent=indent,
                break_long_words=False,
                break_on_hyphens=False,
            )
        )
    return wrapped


def _add_vertical_space(lines: List[str]) -> List[str]:
    """Separate top-level nodes with a blank line."""
    spaced: List[str] = []
    for line, preserved in zip(lines, _preserved_lines(lines)):
        top_level_open = line[:1] == "<" and not line.startswith("</")
        if spaced and spaced[-1] and top_level_open and not preserved:
            spaced.append("")
        spaced.append(line)
    return spaced


def tidy_html(content: str, options: Optional[TidyOptions] = None) -> FormatResult:
    """
    Clean up and re-indent an HTML body.

    The body is encoded with ``options.transport_encoding`` into an in-memory
    buffer and BeautifulSoup is told that encoding explicitly, so the decoded
    tree matches the caller's text whatever the body originally declared.
    """
    options = options or TidyOptions()

    unsupported = [name for name in _UNSUPPORTED_TIDY_OPTIONS if getattr(options, name)]
    if unsupported:
        return FormatResult.failure(
            HtmlTidyError(f"Unsupported tidy options enabled: {', '.join(unsupported)}")
        )

    try:
        with io.BytesIO(content.encode(options.transport_encoding)) as buffer:
            with warnings.catch_warnings():
                if options.quiet or not options.show_warnings:
                    warnings.simplefilter("ignore")
                soup = BeautifulSoup(
                    buffer,
                    "html.parser",
                    from_encoding=options.transport_encoding,
                )
    except (UnicodeError, LookupError, ValueError, ParserRejectedMarkup) as exc:
        return FormatResult.failure(HtmlTidyError("Failed to parse HTML body", cause=exc))

    if not options.force_output and soup.find() is None:
        return FormatResult.failure(HtmlTidyError("No markup found in HTML body"))

    formatter = HTMLFormatter(indent=options.indent_spaces)
    if options.indent_block_elements:
        rendered = soup.prettify(formatter=formatter)
    else:
        rendered = soup.decode(formatter=formatter)

    lines = rendered.rstrip("\n").split("\n")
    if options.wrap_at > 0:
        lines = _wrap_lines(lines, options.wrap_at)
    if options.add_vertical_space:
        lines = _add_vertical_space(lines)
    return FormatResult.success("\n".join(lines))
