#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/ast/__init__.py
"""Abstract Syntax Tree (AST) module for document representation.

The renderer consumes a tree of these nodes rather than Markdown text, so any
front end (the bundled Markdown parser, a JSON payload, or hand-built nodes)
can feed it.

The module consists of several components:

- nodes: AST node classes representing document structure
- visitors: Visitor pattern implementation for AST traversal
- serialization: JSON serialization and deserialization of AST structures

Examples
--------
Basic usage:

    >>> from md2rtf.ast import Document, Heading, Paragraph, Text
    >>> from md2rtf.renderers.rtf import RtfRenderer
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")]),
    ...     Paragraph(content=[Text(content="Hello world")])
    ... ])
    >>> rtf = RtfRenderer().render_to_string(doc)

"""

from __future__ import annotations

from md2rtf.ast.nodes import (
    BulletList,
    Document,
    Element,
    Emphasis,
    Heading,
    Image,
    InlineCode,
    Link,
    ListItem,
    Node,
    NodeKind,
    Paragraph,
    Strong,
    Text,
    get_node_children,
)
from md2rtf.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from md2rtf.ast.visitors import NodeVisitor

__all__ = [
    # Base classes
    "Node",
    "NodeKind",
    "NodeVisitor",
    # Block nodes
    "Document",
    "Heading",
    "Paragraph",
    "BulletList",
    "ListItem",
    # Inline nodes
    "Text",
    "Strong",
    "Emphasis",
    "InlineCode",
    "Link",
    "Image",
    # Open node
    "Element",
    # Helpers
    "get_node_children",
    # Serialization
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
