from __future__ import annotations
import os
from dataclasses import dataclass, field

@dataclass(frozen=True)
class TidyOptions:
    # Diagnostics
    quiet: bool = True
    show_warnings: bool = False

    # Output flavour (plain HTML, never forced to XHTML/XML)
    output_xhtml: bool = False
    output_xml: bool = False

    # Layout
    indent_block_elements: bool = True
    indent_spaces: int = 2
    indent_attributes: bool = False
    add_vertical_space: bool = True
    wrap_at: int = 120    # 0 disables wrapping

    # Cleanup
    merge_divs: bool = False
    merge_spans: bool = False
    join_styles: bool = False
    force_output: bool = True  # emit something even for broken markup

    # Body is round-tripped through this encoding before parsing
    transport_encoding: str = "utf-16-le"

@dataclass(frozen=True)
class PrettyPrintSettings:
    json_indent: int = 2
    json_ensure_ascii: bool = False
    xml_indent: str = "  "
    line_separator: str = os.linesep  # between a preserved XML declaration and the body
    tidy: TidyOptions = field(default_factory=TidyOptions)

DEFAULT_SETTINGS = PrettyPrintSettings()
