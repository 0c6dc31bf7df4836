#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/parsers/markdown.py
"""Markdown to AST converter.

This module parses Markdown with mistune and maps its token stream onto the
md2rtf AST. Constructs with a dedicated node class (headings, paragraphs,
bullet lists, emphasis, code spans, links, images) get that class; everything
else is kept as an ``Element`` tagged with the mistune token type, so the
renderer decides how to present it.

"""

from __future__ import annotations

import logging
from typing import Any, Callable

import yaml

from md2rtf.ast import (
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
from md2rtf.constants import DEPS_MARKDOWN
from md2rtf.options.markdown import MarkdownParserOptions
from md2rtf.parsers.base import BaseParser, ParserInput
from md2rtf.utils.decorators import debug_timer, requires_dependencies

logger = logging.getLogger(__name__)

# Tokens that carry no content of their own
_SKIPPED_TOKENS = frozenset({"blank_line"})

ORDERED_LIST_TAG = "ordered_list"

# Inline tokens whose raw text is kept when flattening to plain text
_RAW_TEXT_TOKENS = frozenset({"text", "codespan"})
_BREAK_TOKENS = frozenset({"softbreak", "linebreak"})


def _collect_plain_text(tokens: Any) -> str:
    """Flatten inline tokens to their plain text, descending into nested formatting."""
    if not isinstance(tokens, list):
        return ""

    parts: list[str] = []
    stack = list(reversed(tokens))
    while stack:
        token = stack.pop()
        if not isinstance(token, dict):
            continue
        token_type = token.get("type")
        if token_type in _RAW_TEXT_TOKENS:
            parts.append(token.get("raw", ""))
        elif token_type in _BREAK_TOKENS:
            parts.append(" ")
        elif isinstance(token.get("children"), list):
            stack.extend(reversed(token["children"]))
    return "".join(parts)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")

    With options:

        >>> options = MarkdownParserOptions(parse_tables=True)
        >>> doc = MarkdownToAstConverter(options).parse(markdown_text)

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

        self._handlers: dict[str, Callable[[dict[str, Any]], Node | list[Node] | None]] = {
            "heading": self._process_heading,
            "paragraph": self._process_paragraph,
            "block_text": self._process_block_text,
            "list": self._process_list,
            "list_item": self._process_list_item,
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "softbreak": self._handle_softbreak_token,
        }

    @requires_dependencies("markdown", DEPS_MARKDOWN)
    def parse(self, input_data: ParserInput) -> Document:
        """Parse Markdown input into AST Document.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            Markdown text, or a path or stream to read it from

        Returns
        -------
        Document
            AST document node; front matter, when present and enabled, is
            stored in its metadata

        """
        import mistune

        markdown_content = self._load_text_content(input_data)
        markdown_content, frontmatter = self._extract_frontmatter(markdown_content)

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")
        if self.options.parse_tables:
            plugins.append("table")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)

        with debug_timer(logger, "Parsing (markdown)"):
            tokens, _state = markdown.parse(markdown_content)
            children = self._process_tokens(tokens) if isinstance(tokens, list) else []

        return Document(children=children, metadata=frontmatter)

    def _extract_frontmatter(self, content: str) -> tuple[str, dict[str, Any]]:
        """Strip a leading YAML front matter block (``---`` ... ``---``).

        Returns
        -------
        tuple[str, dict]
            Content with front matter removed and the parsed mapping. The
            mapping is empty when there is no front matter, when it does not
            parse, or when it is not a mapping.

        """
        if not self.options.parse_frontmatter:
            return content, {}
        if not (content.startswith("---\n") or content.startswith("---\r\n")):
            return content, {}

        lines = content.splitlines(keepends=True)
        end_index = next((i for i in range(1, len(lines)) if lines[i].strip() == "---"), -1)
        if end_index <= 0:
            return content, {}

        yaml_content = "".join(lines[1:end_index])
        remaining_content = "".join(lines[end_index + 1 :])

        try:
            data = yaml.safe_load(yaml_content)
        except yaml.YAMLError as e:
            logger.warning(f"Ignoring malformed YAML front matter: {e}")
            return remaining_content, {}

        if not isinstance(data, dict):
            logger.debug(f"Front matter is a {type(data).__name__}, not a mapping; ignoring it")
            return remaining_content, {}
        return remaining_content, data

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune tokens into AST nodes."""
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_token(token)
            if node is None:
                continue
            if isinstance(node, list):
                nodes.extend(node)
            else:
                nodes.append(node)

        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | list[Node] | None:
        """Process a single mistune token into an AST node.

        Token types without a handler become an ``Element`` tagged with the
        token type.

        """
        token_type = token.get("type", "")
        if token_type in _SKIPPED_TOKENS:
            return None

        handler = self._handlers.get(token_type)
        if handler is not None:
            return handler(token)
        return self._process_generic(token)

    def _children_of(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children", [])
        if not isinstance(children, list):
            return []
        return self._process_tokens(children)

    def _process_generic(self, token: dict[str, Any]) -> Element:
        """Keep an unmapped token as an Element.

        The element's children are the token's processed children or, for
        leaf tokens with raw text (code blocks, HTML), a single Text node.

        """
        token_type = token.get("type", "")
        attrs = token.get("attrs", {})
        attributes = dict(attrs) if isinstance(attrs, dict) else {}

        if "children" in token:
            children = self._children_of(token)
        elif token.get("raw"):
            children = [Text(content=token["raw"])]
        else:
            children = []

        logger.debug(f"Mapping mistune token '{token_type}' to a generic element")
        return Element(tag=token_type, children=children, attributes=attributes)

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1

        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._children_of(token))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph:
        """Process paragraph token."""
        return Paragraph(content=self._children_of(token))

    def _process_block_text(self, token: dict[str, Any]) -> list[Node]:
        """Inline the content of a tight list item."""
        return self._children_of(token)

    def _process_list(self, token: dict[str, Any]) -> Node:
        """Process list token.

        Unordered lists map to BulletList. Ordered lists have no dedicated
        node and become an ``ordered_list`` Element carrying the start number.

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        items = self._children_of(token)

        if attrs.get("ordered", False):
            return Element(tag=ORDERED_LIST_TAG, children=items, attributes={"start": attrs.get("start", 1)})
        return BulletList(items=items)

    def _process_list_item(self, token: dict[str, Any]) -> ListItem:
        """Process list item token."""
        return ListItem(children=self._children_of(token))

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=token.get("raw", ""))

    def _handle_softbreak_token(self, token: dict[str, Any]) -> Text:
        """Soft line breaks collapse to a single space."""
        return Text(content=" ")

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._children_of(token))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._children_of(token))

    def _handle_codespan_token(self, token: dict[str, Any]) -> InlineCode:
        """Handle codespan token."""
        return InlineCode(content=[Text(content=token.get("raw", ""))])

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        return Link(url=attrs.get("url", ""), content=self._children_of(token), title=attrs.get("title"))

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        # Alt text is in children, not attrs
        alt_text = _collect_plain_text(token.get("children", []))
        return Image(url=attrs.get("url", ""), alt_text=alt_text, title=attrs.get("title"))


def markdown_to_ast(markdown_content: ParserInput, options: MarkdownParserOptions | None = None) -> Document:
    r"""Convert Markdown to AST.

    Parameters
    ----------
    markdown_content : str, Path, IO[bytes], IO[str], or bytes
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\n\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content)
