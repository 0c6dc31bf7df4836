#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class used to process AST nodes.
Visitors keep algorithms such as rendering separate from the node classes.

Every visit method receives the node followed by whatever extra positional
arguments the caller passed to ``Node.accept``. The RTF renderer uses this to
hand each rule the already-rendered children and the render context.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

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
    Paragraph,
    Strong,
    Text,
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement a visit_* method for each node kind with a dedicated
    class. ``Element`` nodes are routed to ``generic_visit`` unless
    ``visit_element`` is overridden.

    Examples
    --------
    Visitor that collects text:

        >>> class TextCollector(NodeVisitor):
        ...     def visit_text(self, node):
        ...         return node.content
        ...     # remaining visit_* methods omitted
        >>> Text("hi").accept(TextCollector())
        'hi'

    """

    @abstractmethod
    def visit_document(self, node: Document, *args: Any) -> Any:
        """Visit a Document node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading, *args: Any) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, *args: Any) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_bullet_list(self, node: BulletList, *args: Any) -> Any:
        """Visit a BulletList node."""
        pass

    @abstractmethod
    def visit_list_item(self, node: ListItem, *args: Any) -> Any:
        """Visit a ListItem node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text, *args: Any) -> Any:
        """Visit a Text node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong, *args: Any) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, *args: Any) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_inline_code(self, node: InlineCode, *args: Any) -> Any:
        """Visit an InlineCode node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link, *args: Any) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_image(self, node: Image, *args: Any) -> Any:
        """Visit an Image node."""
        pass

    def visit_element(self, node: Element, *args: Any) -> Any:
        """Visit an Element node.

        Elements have no dedicated rule by default and go to
        ``generic_visit``.

        """
        return self.generic_visit(node, *args)

    def generic_visit(self, node: Node, *args: Any) -> Any:
        """Fallback visitor for unhandled node types.

        The default implementation does nothing but can be overridden.

        Parameters
        ----------
        node : Node
            The node to visit
        *args : Any
            Extra arguments passed to ``Node.accept``

        Returns
        -------
        Any
            Result of processing (default: None)

        """
        return None
