"""md2rtf - render Markdown documents as embeddable RTF.

md2rtf parses Markdown into a small document tree and renders that tree as a
Rich Text Format control-word stream. The RTF is plain ASCII and is meant to
be placed inside a host document (an XML attribute or CDATA section, an HTML
fragment) that expects formatted text.

Examples
--------
Convert Markdown text:

    >>> from md2rtf import markdown_to_rtf
    >>> markdown_to_rtf("Hello **world**")
    '{\\rtf1\\ansi\\fs24Hello \\b world\\b0 \\line\\line }'

Render a tree built elsewhere:

    >>> from md2rtf import ast_to_rtf
    >>> from md2rtf.ast import json_to_ast
    >>> rtf = ast_to_rtf(json_to_ast(payload), base_url="https://example.com/docs/")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "md2rtf requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from md2rtf.api import ast_to_rtf, from_ast, markdown_to_rtf
from md2rtf.ast import Document, Element, Node
from md2rtf.exceptions import (
    DependencyError,
    InvalidOptionsError,
    Md2RtfError,
    MissingAttributeError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from md2rtf.options import MarkdownParserOptions, RtfRendererOptions
from md2rtf.parsers.markdown import markdown_to_ast
from md2rtf.renderers.rtf import RtfRenderer
from md2rtf.utils.escape import escape_rtf
from md2rtf.utils.urls import resolve_url

__all__ = [
    "__version__",
    # Conversion API
    "ast_to_rtf",
    "from_ast",
    "markdown_to_ast",
    "markdown_to_rtf",
    # Core types
    "Document",
    "Element",
    "Node",
    "RtfRenderer",
    # Options
    "MarkdownParserOptions",
    "RtfRendererOptions",
    # Pure helpers
    "escape_rtf",
    "resolve_url",
    # Exceptions
    "Md2RtfError",
    "DependencyError",
    "InvalidOptionsError",
    "MissingAttributeError",
    "ParsingError",
    "RenderingError",
    "ValidationError",
]
