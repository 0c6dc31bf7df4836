#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2rtf/options/markdown.py
"""Configuration options for parsing Markdown into the AST."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2rtf.constants import DEFAULT_PARSE_FRONTMATTER, DEFAULT_PARSE_STRIKETHROUGH, DEFAULT_PARSE_TABLES
from md2rtf.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Syntax enabled here but without an RTF rendering rule (tables,
    strikethrough) reaches the renderer as generic elements and is emitted
    through its fallback.

    Parameters
    ----------
    parse_strikethrough : bool, default False
        Whether to parse strikethrough syntax (~~text~~).
    parse_tables : bool, default False
        Whether to parse table syntax (GFM pipe tables).
    parse_frontmatter : bool, default True
        Whether to strip a leading YAML front matter block and store it as
        document metadata.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse strikethrough syntax (~~text~~)", "importance": "core"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Parse table syntax (GFM pipe tables)", "importance": "core"},
    )
    parse_frontmatter: bool = field(
        default=DEFAULT_PARSE_FRONTMATTER,
        metadata={"help": "Parse YAML frontmatter at document start", "importance": "core"},
    )
