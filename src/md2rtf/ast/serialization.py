#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts AST structures to and from plain dictionaries and JSON,
so that a tree built in one process can be handed to the renderer in another.

Each node becomes a dictionary whose ``node_type`` key holds the node kind
(``"heading"``, ``"text"``, ...). ``Element`` nodes use ``"element"`` and keep
their own kind in ``tag``.

Examples
--------
Serialize AST to JSON:

    >>> from md2rtf.ast import Document, Heading, Text
    >>> from md2rtf.ast.serialization import ast_to_json
    >>>
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Title")])
    ... ])
    >>> json_str = ast_to_json(doc, indent=2)

Deserialize JSON back to AST:

    >>> from md2rtf.ast.serialization import json_to_ast
    >>> doc = json_to_ast(json_str)
    >>> print(doc.children[0].level)
    1

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

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
)
from md2rtf.exceptions import MissingAttributeError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1
ELEMENT_NODE_TYPE = "element"


def _serialize_list(nodes: list[Node]) -> list[dict[str, Any]]:
    return [ast_to_dict(child) for child in nodes]


def _serialize_node(node: Node) -> dict[str, Any]:
    if not isinstance(node, Node):
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")

    result: dict[str, Any] = {"node_type": node.kind_name}

    if isinstance(node, Document):
        result["children"] = _serialize_list(node.children)
    elif isinstance(node, Heading):
        result["level"] = node.level
        result["content"] = _serialize_list(node.content)
    elif isinstance(node, (Paragraph, Strong, Emphasis, InlineCode)):
        result["content"] = _serialize_list(node.content)
    elif isinstance(node, BulletList):
        result["items"] = _serialize_list(node.items)
    elif isinstance(node, ListItem):
        result["children"] = _serialize_list(node.children)
    elif isinstance(node, Text):
        result["content"] = node.content
    elif isinstance(node, Link):
        result["url"] = node.url
        result["title"] = node.title
        result["content"] = _serialize_list(node.content)
    elif isinstance(node, Image):
        result["url"] = node.url
        result["alt_text"] = node.alt_text
        result["title"] = node.title
        result["width"] = node.width
        result["height"] = node.height
    elif isinstance(node, Element):
        result["node_type"] = ELEMENT_NODE_TYPE
        result["tag"] = node.tag
        result["attributes"] = dict(node.attributes)
        result["children"] = _serialize_list(node.children)
    else:
        raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")

    result["metadata"] = dict(node.metadata)
    return result


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If the node is not one of the md2rtf node classes

    Examples
    --------
    >>> ast_to_dict(Text(content="Hello"))
    {'node_type': 'text', 'content': 'Hello', 'metadata': {}}

    """
    return _serialize_node(node)


def _require(data: dict[str, Any], node_type: str, attribute_name: str) -> Any:
    # An explicit null counts as missing
    value = data.get(attribute_name)
    if value is None:
        raise MissingAttributeError(node_type, attribute_name)
    return value


def _deserialize_children(children_data: list[dict[str, Any]], strict_mode: bool) -> list[Node]:
    return [dict_to_ast(child, strict_mode=strict_mode) for child in children_data]


def _deserialize_document(data: dict[str, Any], strict_mode: bool) -> Document:
    return Document(
        children=_deserialize_children(data.get("children", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_heading(data: dict[str, Any], strict_mode: bool) -> Heading:
    return Heading(
        level=_require(data, NodeKind.HEADING.value, "level"),
        content=_deserialize_children(data.get("content", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_paragraph(data: dict[str, Any], strict_mode: bool) -> Paragraph:
    return Paragraph(
        content=_deserialize_children(data.get("content", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_bullet_list(data: dict[str, Any], strict_mode: bool) -> BulletList:
    return BulletList(
        items=_deserialize_children(data.get("items", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_list_item(data: dict[str, Any], strict_mode: bool) -> ListItem:
    return ListItem(
        children=_deserialize_children(data.get("children", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_text(data: dict[str, Any], strict_mode: bool) -> Text:
    return Text(content=_require(data, NodeKind.TEXT.value, "content"), metadata=data.get("metadata", {}))


def _deserialize_strong(data: dict[str, Any], strict_mode: bool) -> Strong:
    return Strong(
        content=_deserialize_children(data.get("content", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_emphasis(data: dict[str, Any], strict_mode: bool) -> Emphasis:
    return Emphasis(
        content=_deserialize_children(data.get("content", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_inline_code(data: dict[str, Any], strict_mode: bool) -> InlineCode:
    return InlineCode(
        content=_deserialize_children(data.get("content", []), strict_mode),
        metadata=data.get("metadata", {}),
    )


def _deserialize_link(data: dict[str, Any], strict_mode: bool) -> Link:
    return Link(
        url=_require(data, NodeKind.LINK.value, "url"),
        content=_deserialize_children(data.get("content", []), strict_mode),
        title=data.get("title"),
        metadata=data.get("metadata", {}),
    )


def _deserialize_image(data: dict[str, Any], strict_mode: bool) -> Image:
    return Image(
        url=_require(data, NodeKind.IMAGE.value, "url"),
        alt_text=data.get("alt_text") or "",
        title=data.get("title"),
        width=data.get("width"),
        height=data.get("height"),
        metadata=data.get("metadata", {}),
    )


def _deserialize_element(data: dict[str, Any], strict_mode: bool) -> Element:
    return Element(
        tag=_require(data, ELEMENT_NODE_TYPE, "tag"),
        children=_deserialize_children(data.get("children", []), strict_mode),
        attributes=data.get("attributes", {}),
        metadata=data.get("metadata", {}),
    )


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    NodeKind.DOCUMENT.value: _deserialize_document,
    NodeKind.HEADING.value: _deserialize_heading,
    NodeKind.PARAGRAPH.value: _deserialize_paragraph,
    NodeKind.BULLET_LIST.value: _deserialize_bullet_list,
    NodeKind.LIST_ITEM.value: _deserialize_list_item,
    NodeKind.TEXT.value: _deserialize_text,
    NodeKind.STRONG.value: _deserialize_strong,
    NodeKind.EMPHASIS.value: _deserialize_emphasis,
    NodeKind.INLINE_CODE.value: _deserialize_inline_code,
    NodeKind.LINK.value: _deserialize_link,
    NodeKind.IMAGE.value: _deserialize_image,
    ELEMENT_NODE_TYPE: _deserialize_element,
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types.
        If False, load an unknown node type as an Element whose tag is the
        node type, keeping its children and remaining keys as attributes.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary has no node type, or an unknown one in strict mode
    MissingAttributeError
        If a required attribute (heading level, link or image url, text
        content, element tag) is absent

    Examples
    --------
    >>> node = dict_to_ast({"node_type": "text", "content": "Hello"})
    >>> print(node.content)
    Hello

    """
    node_type = data.get("node_type")
    if not node_type:
        raise ValueError("Dictionary must contain 'node_type' field")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if deserializer is not None:
        return deserializer(data, strict_mode)

    if strict_mode:
        raise ValueError(f"Unknown node type: {node_type}")

    logger.warning(f"Unknown node type '{node_type}', loading as element")
    attributes = {key: value for key, value in data.items() if key not in ("node_type", "children", "metadata")}
    return Element(
        tag=node_type,
        children=_deserialize_children(data.get("children", []), strict_mode),
        attributes=attributes,
        metadata=data.get("metadata", {}),
    )


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string of the form ``{"schema_version": 1, "node_type": ...}``

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    JSON without a ``schema_version`` field is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, raise ValueError on unsupported schema versions.
        If False, log a warning and attempt to load anyway.
    strict_mode : bool, default True
        Passed through to :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the JSON has an unsupported schema version or unknown node types
    json.JSONDecodeError
        If JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", None)

    if validate_schema:
        if schema_version is None:
            schema_version = SCHEMA_VERSION
        if not isinstance(schema_version, int):
            raise ValueError(f"Schema version must be an integer, got {type(schema_version).__name__}")
        if schema_version != SCHEMA_VERSION:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of md2rtf supports schema version {SCHEMA_VERSION} only."
            )
    elif schema_version is not None and schema_version != SCHEMA_VERSION:
        logger.warning(
            f"Schema version {schema_version} differs from supported version {SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
