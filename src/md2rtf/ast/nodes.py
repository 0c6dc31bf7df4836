#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy handed to the RTF renderer. Each node
represents a structural or inline element of a Markdown document.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes:
    - Document, Heading, Paragraph, BulletList, ListItem

Inline nodes:
    - Text, Strong, Emphasis, InlineCode, Link, Image

Any other kind of element (ordered lists, code blocks, block quotes, or
caller-defined kinds) is carried by the open ``Element`` node, whose ``tag``
names the kind.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Optional


class NodeKind(str, Enum):
    """Kinds of node with a dedicated class and rendering rule."""

    DOCUMENT = "document"
    HEADING = "heading"
    PARAGRAPH = "paragraph"
    BULLET_LIST = "bullet_list"
    LIST_ITEM = "list_item"
    STRONG = "strong"
    EMPHASIS = "emphasis"
    INLINE_CODE = "inline_code"
    LINK = "link"
    IMAGE = "image"
    TEXT = "text"


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    kind: ClassVar[Optional[NodeKind]] = None
    metadata: dict[str, Any]

    @property
    def kind_name(self) -> str:
        """Name of this node's kind, as used in fallback rendering and serialization."""
        if self.kind is None:
            return type(self).__name__.lower()
        return self.kind.value

    @abstractmethod
    def accept(self, visitor: Any, *args: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        *args : Any
            Extra arguments forwarded to the visit method unchanged

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (front matter, title, author, etc.)

    """

    kind: ClassVar[NodeKind] = NodeKind.DOCUMENT

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, *args)


@dataclass
class Heading(Node):
    """Heading node (h1-h6).

    ``level`` may be left as None by loosely-built trees; renderers reject
    such a heading when they reach it.

    Parameters
    ----------
    level : int or None
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.HEADING

    level: Optional[int]
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if self.level is not None and not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, *args)


@dataclass
class Paragraph(Node):
    """Paragraph node containing inline content."""

    kind: ClassVar[NodeKind] = NodeKind.PARAGRAPH

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, *args)


@dataclass
class BulletList(Node):
    """Unordered list node.

    Parameters
    ----------
    items : list of ListItem, default = empty list
        List items, in order
    metadata : dict, default = empty dict
        List metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.BULLET_LIST

    items: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_bullet_list``."""
        return visitor.visit_bullet_list(self, *args)


@dataclass
class ListItem(Node):
    """List item node.

    Parameters
    ----------
    children : list of Node, default = empty list
        Content of the item: inline nodes for tight lists, block nodes
        (paragraphs, nested lists) otherwise
    metadata : dict, default = empty dict
        Item metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LIST_ITEM

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, *args)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    Parameters
    ----------
    content : str
        Literal text, unescaped
    metadata : dict, default = empty dict
        Text metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.TEXT

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, *args)


@dataclass
class Strong(Node):
    """Strong (bold) inline node."""

    kind: ClassVar[NodeKind] = NodeKind.STRONG

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, *args)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) inline node."""

    kind: ClassVar[NodeKind] = NodeKind.EMPHASIS

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, *args)


@dataclass
class InlineCode(Node):
    """Inline code span.

    Unlike a plain string code span, the content is a list of child nodes,
    normally a single Text node holding the literal code.

    Parameters
    ----------
    content : list of Node, default = empty list
        Code span content
    metadata : dict, default = empty dict
        Code metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.INLINE_CODE

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_inline_code``."""
        return visitor.visit_inline_code(self, *args)


@dataclass
class Link(Node):
    """Hyperlink node.

    Parameters
    ----------
    url : str or None
        Link target, absolute or relative
    content : list of Node, default = empty list
        Inline nodes forming the link text
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.LINK

    url: Optional[str]
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, *args)


@dataclass
class Image(Node):
    """Image node.

    Parameters
    ----------
    url : str or None
        Image source: a path relative to the source directory, an absolute
        URL, or a ``data:`` URI
    alt_text : str, default = ""
        Alternative text, shown when the image is not embedded
    title : str or None, default = None
        Optional image title
    width : int or None, default = None
        Display width in pixels
    height : int or None, default = None
        Display height in pixels
    metadata : dict, default = empty dict
        Image metadata

    """

    kind: ClassVar[NodeKind] = NodeKind.IMAGE

    url: Optional[str]
    alt_text: str = ""
    title: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, *args)


# ============================================================================
# Open Node
# ============================================================================


@dataclass
class Element(Node):
    """Element of a kind without a dedicated node class.

    Parsers emit Element for constructs such as ordered lists, code blocks and
    block quotes; callers may build Elements with any tag of their own.

    Parameters
    ----------
    tag : str
        Name of the element kind (e.g. "ordered_list", "custom")
    children : list of Node, default = empty list
        Child nodes, in order
    attributes : dict, default = empty dict
        Kind-specific attributes
    metadata : dict, default = empty dict
        Element metadata

    """

    tag: str
    children: list[Node] = field(default_factory=list)
    attributes: dict[str, Any] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def kind_name(self) -> str:
        """Return the element tag."""
        return self.tag

    def accept(self, visitor: Any, *args: Any) -> Any:
        """Dispatch to ``visitor.visit_element``."""
        return visitor.visit_element(self, *args)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> heading = Heading(level=1, content=[Text("Hello"), Strong(content=[Text("world")])])
    >>> len(get_node_children(heading))
    2

    """
    if isinstance(node, (Document, ListItem, Element)):
        return list(node.children)

    if isinstance(node, (Heading, Paragraph, Strong, Emphasis, InlineCode, Link)):
        return list(node.content)

    if isinstance(node, BulletList):
        return list(node.items)

    return []
