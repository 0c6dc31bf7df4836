#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/api.py
"""Public conversion API for md2rtf.

These functions wrap the Markdown parser and the RTF renderer. Options may be
given as option objects, as keyword arguments, or both; keyword arguments
override fields of the option objects.

Examples
--------
    >>> from md2rtf import markdown_to_rtf
    >>> rtf = markdown_to_rtf("# Title\n\nSee [docs](guide.html)", base_url="https://example.com/")

"""

from __future__ import annotations

import logging
from dataclasses import fields
from pathlib import Path
from typing import IO, Any, Optional, TypeVar, Union

from md2rtf.ast import Node
from md2rtf.options.base import CloneFrozenMixin
from md2rtf.options.markdown import MarkdownParserOptions
from md2rtf.options.rtf import RtfRendererOptions
from md2rtf.parsers.base import ParserInput
from md2rtf.parsers.markdown import MarkdownToAstConverter
from md2rtf.renderers.rtf import RtfRenderer
from md2rtf.utils.io_utils import write_content

logger = logging.getLogger(__name__)

OptionsT = TypeVar("OptionsT", bound=CloneFrozenMixin)


def _field_names(options_class: type) -> set[str]:
    return {f.name for f in fields(options_class)}


def _merge_options(
    options_class: type[OptionsT], options: Optional[OptionsT], options_type_name: str, **kwargs: Any
) -> OptionsT:
    """Build or update an options object from keyword arguments.

    Keyword arguments that are not fields of ``options_class`` are skipped.

    """
    option_names = _field_names(options_class)
    valid_kwargs = {k: v for k, v in kwargs.items() if k in option_names}
    unknown = [k for k in kwargs if k not in option_names]
    if unknown:
        logger.debug(f"Skipping unknown {options_type_name} options: {unknown}")

    if options is None:
        return options_class(**valid_kwargs)
    if valid_kwargs:
        return options.create_updated(**valid_kwargs)
    return options


def ast_to_rtf(doc: Node, options: Optional[RtfRendererOptions] = None, **kwargs: Any) -> str:
    r"""Render an AST document to an RTF string.

    Parameters
    ----------
    doc : Node
        Document to render
    options : RtfRendererOptions or None, default None
        Renderer options
    kwargs : Any
        Renderer option fields that override ``options``

    Returns
    -------
    str
        ASCII RTF text

    Examples
    --------
        >>> from md2rtf.ast import Document, Heading, Text
        >>> ast_to_rtf(Document(children=[Heading(level=1, content=[Text("Title")])]))
        '{\\rtf1\\ansi\\fs24{\\fs48\\b Title\\b}\\line\\line }'

    """
    final_options = _merge_options(RtfRendererOptions, options, "renderer", **kwargs)
    return RtfRenderer(final_options).render_to_string(doc)


def markdown_to_rtf(
    markdown: ParserInput,
    options: Optional[RtfRendererOptions] = None,
    parser_options: Optional[MarkdownParserOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert Markdown to an RTF string.

    Parameters
    ----------
    markdown : str, Path, IO[bytes], IO[str], or bytes
        Markdown text, or a path or stream to read it from
    options : RtfRendererOptions or None, default None
        Renderer options
    parser_options : MarkdownParserOptions or None, default None
        Parser options
    kwargs : Any
        Renderer or parser option fields; each is routed to whichever options
        class defines it

    Returns
    -------
    str
        ASCII RTF text

    """
    parser_names = _field_names(MarkdownParserOptions)
    parser_kwargs = {k: v for k, v in kwargs.items() if k in parser_names}
    renderer_kwargs = {k: v for k, v in kwargs.items() if k not in parser_names}

    final_parser_options = _merge_options(MarkdownParserOptions, parser_options, "parser", **parser_kwargs)
    doc = MarkdownToAstConverter(final_parser_options).parse(markdown)
    return ast_to_rtf(doc, options, **renderer_kwargs)


def from_ast(
    doc: Node,
    output: Union[str, Path, IO[bytes], IO[str], None] = None,
    options: Optional[RtfRendererOptions] = None,
    **kwargs: Any,
) -> Optional[str]:
    """Render an AST document to RTF and write it to ``output``.

    Parameters
    ----------
    doc : Node
        Document to render
    output : str, Path, IO[bytes], IO[str], or None, default None
        Destination. When None the RTF text is returned instead.
    options : RtfRendererOptions or None, default None
        Renderer options
    kwargs : Any
        Renderer option fields that override ``options``

    Returns
    -------
    str or None
        The RTF text when ``output`` is None, otherwise None

    """
    result = write_content(ast_to_rtf(doc, options, **kwargs), output)
    if result is not None:
        return result.getvalue()
    return None


__all__ = ["ast_to_rtf", "markdown_to_rtf", "from_ast"]
