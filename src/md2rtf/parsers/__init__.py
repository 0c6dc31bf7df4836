#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/parsers/__init__.py
"""Parsers that build the md2rtf AST from source documents."""

from md2rtf.parsers.base import BaseParser
from md2rtf.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = ["BaseParser", "MarkdownToAstConverter", "markdown_to_ast"]
