#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for the Markdown to AST converter."""

from io import BytesIO, StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

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
    Paragraph,
    Strong,
    Text,
)
from md2rtf.exceptions import DependencyError, InvalidOptionsError, ParsingError
from md2rtf.options import MarkdownParserOptions, RtfRendererOptions
from md2rtf.parsers.markdown import MarkdownToAstConverter, markdown_to_ast


@pytest.mark.unit
class TestMarkdownBasics:
    """Test basic markdown parsing."""

    def test_simple_paragraph(self) -> None:
        """Test parsing a simple paragraph."""
        doc = markdown_to_ast("This is a paragraph.")

        assert isinstance(doc, Document)
        assert len(doc.children) == 1
        para = doc.children[0]
        assert isinstance(para, Paragraph)
        assert para.content == [Text(content="This is a paragraph.")]

    def test_multiple_paragraphs(self) -> None:
        """Blank lines between blocks do not produce nodes."""
        doc = markdown_to_ast("First paragraph.\n\nSecond paragraph.")

        assert len(doc.children) == 2
        assert all(isinstance(child, Paragraph) for child in doc.children)

    def test_heading_levels(self) -> None:
        """Test parsing different heading levels."""
        doc = markdown_to_ast("# H1\n## H2\n### H3\n#### H4\n##### H5\n###### H6")

        assert [child.level for child in doc.children] == [1, 2, 3, 4, 5, 6]
        assert all(isinstance(child, Heading) for child in doc.children)
        assert doc.children[0].content == [Text(content="H1")]

    def test_inline_formatting(self) -> None:
        """Strong, emphasis and code spans map to their node classes."""
        doc = markdown_to_ast("Some **bold**, *italic* and `code`.")
        content = doc.children[0].content

        strong = next(node for node in content if isinstance(node, Strong))
        emphasis = next(node for node in content if isinstance(node, Emphasis))
        code = next(node for node in content if isinstance(node, InlineCode))
        assert strong.content == [Text(content="bold")]
        assert emphasis.content == [Text(content="italic")]
        assert code.content == [Text(content="code")]

    def test_link(self) -> None:
        """Links keep their target and text."""
        doc = markdown_to_ast("[docs](guide.html)")
        link = doc.children[0].content[0]

        assert isinstance(link, Link)
        assert link.url == "guide.html"
        assert link.content == [Text(content="docs")]

    def test_image(self) -> None:
        """Image alt text is collected from the token's children."""
        doc = markdown_to_ast("![A diagram](img/diagram.png)")
        image = doc.children[0].content[0]

        assert isinstance(image, Image)
        assert image.url == "img/diagram.png"
        assert image.alt_text == "A diagram"

    def test_image_alt_text_keeps_nested_formatting_text(self) -> None:
        """Words inside emphasis, strong or code in alt text are kept."""
        doc = markdown_to_ast("![a *b* **c** `d` e](x.png)")
        image = doc.children[0].content[0]

        assert isinstance(image, Image)
        assert image.alt_text == "a b c d e"

    def test_softbreak_becomes_space(self) -> None:
        """A single newline inside a paragraph becomes a space."""
        doc = markdown_to_ast("one\ntwo")
        content = doc.children[0].content

        assert Text(content=" ") in content
        assert "".join(node.content for node in content if isinstance(node, Text)) == "one two"


@pytest.mark.unit
class TestMarkdownLists:
    """Test list parsing."""

    def test_tight_bullet_list(self) -> None:
        """Tight list items hold their inline content directly."""
        doc = markdown_to_ast("- one\n- **two**")
        bullet_list = doc.children[0]

        assert isinstance(bullet_list, BulletList)
        assert len(bullet_list.items) == 2
        assert all(isinstance(item, ListItem) for item in bullet_list.items)
        assert bullet_list.items[0].children == [Text(content="one")]
        assert isinstance(bullet_list.items[1].children[0], Strong)

    def test_loose_bullet_list(self) -> None:
        """Loose list items hold paragraphs."""
        doc = markdown_to_ast("- one\n\n- two")
        bullet_list = doc.children[0]

        assert isinstance(bullet_list, BulletList)
        assert isinstance(bullet_list.items[0].children[0], Paragraph)

    def test_nested_bullet_list(self) -> None:
        """Nested lists appear inside the parent item."""
        doc = markdown_to_ast("- outer\n  - inner")
        outer_item = doc.children[0].items[0]

        assert any(isinstance(child, BulletList) for child in outer_item.children)

    def test_ordered_list_is_element(self) -> None:
        """Ordered lists become ordered_list elements with list items."""
        doc = markdown_to_ast("3. three\n4. four")
        ordered = doc.children[0]

        assert isinstance(ordered, Element)
        assert ordered.tag == "ordered_list"
        assert ordered.attributes["start"] == 3
        assert all(isinstance(item, ListItem) for item in ordered.children)

    def test_ordered_list_default_start(self) -> None:
        """Ordered lists starting at one record start 1."""
        doc = markdown_to_ast("1. one\n2. two")
        assert doc.children[0].attributes["start"] == 1


@pytest.mark.unit
class TestMarkdownGenericElements:
    """Constructs without a dedicated node become elements."""

    def test_code_block(self) -> None:
        """Fenced code keeps its text and info string."""
        doc = markdown_to_ast("```python\nprint(1)\n```")
        block = doc.children[0]

        assert isinstance(block, Element)
        assert block.tag == "block_code"
        assert block.attributes.get("info") == "python"
        assert block.children == [Text(content="print(1)\n")]

    def test_block_quote(self) -> None:
        """Block quotes keep their block children."""
        doc = markdown_to_ast("> quoted")
        quote = doc.children[0]

        assert isinstance(quote, Element)
        assert quote.tag == "block_quote"
        assert isinstance(quote.children[0], Paragraph)

    def test_thematic_break(self) -> None:
        """Thematic breaks become empty elements."""
        doc = markdown_to_ast("a\n\n---\n\nb")
        assert Element(tag="thematic_break") in doc.children

    def test_hard_line_break(self) -> None:
        """Hard line breaks become linebreak elements."""
        doc = markdown_to_ast("one  \ntwo")
        content = doc.children[0].content
        assert any(isinstance(node, Element) and node.tag == "linebreak" for node in content)

    def test_strikethrough_plugin(self) -> None:
        """Strikethrough is parsed only when enabled."""
        options = MarkdownParserOptions(parse_strikethrough=True)
        doc = markdown_to_ast("~~gone~~", options)
        node = doc.children[0].content[0]

        assert isinstance(node, Element)
        assert node.tag == "strikethrough"
        assert node.children == [Text(content="gone")]

    def test_strikethrough_disabled_by_default(self) -> None:
        """Without the plugin the markers stay in the text."""
        doc = markdown_to_ast("~~gone~~")
        text = "".join(node.content for node in doc.children[0].content if isinstance(node, Text))
        assert "~~" in text


@pytest.mark.unit
class TestFrontmatter:
    """Test YAML front matter handling."""

    def test_frontmatter_stored_as_metadata(self) -> None:
        """Front matter is removed from the body and kept as metadata."""
        doc = markdown_to_ast("---\ntitle: Notes\ntags: [a, b]\n---\n# Body")

        assert doc.metadata == {"title": "Notes", "tags": ["a", "b"]}
        assert len(doc.children) == 1
        assert isinstance(doc.children[0], Heading)

    def test_frontmatter_disabled(self) -> None:
        """With front matter parsing off the block stays in the document."""
        options = MarkdownParserOptions(parse_frontmatter=False)
        doc = markdown_to_ast("---\ntitle: Notes\n---\n# Body", options)

        assert doc.metadata == {}
        assert len(doc.children) > 1

    def test_malformed_frontmatter_dropped(self) -> None:
        """Unparseable front matter is stripped and leaves metadata empty."""
        doc = markdown_to_ast("---\ntitle: [unclosed\n---\nBody")

        assert doc.metadata == {}
        assert doc.children[0].content == [Text(content="Body")]

    def test_unterminated_frontmatter_ignored(self) -> None:
        """An opening fence without a closing one is ordinary content."""
        doc = markdown_to_ast("---\ntitle: Notes\n")
        assert doc.metadata == {}


@pytest.mark.unit
class TestInputsAndOptions:
    """Test input types, option validation and dependency checks."""

    def test_bytes_input(self) -> None:
        """UTF-8 bytes are decoded, including a leading BOM."""
        doc = markdown_to_ast("\ufeffcafé".encode("utf-8"))
        assert doc.children[0].content == [Text(content="café")]

    def test_invalid_bytes(self) -> None:
        """Bytes that are not UTF-8 raise ParsingError."""
        with pytest.raises(ParsingError):
            markdown_to_ast(b"\xff\xfe\xfa")

    def test_path_input(self, tmp_path: Path) -> None:
        """A Path is read from disk."""
        source = tmp_path / "doc.md"
        source.write_text("# From file", encoding="utf-8")

        doc = markdown_to_ast(source)
        assert doc.children[0].content == [Text(content="From file")]

    def test_missing_path(self, tmp_path: Path) -> None:
        """A missing file raises ParsingError."""
        with pytest.raises(ParsingError):
            markdown_to_ast(tmp_path / "missing.md")

    def test_string_is_content_not_path(self) -> None:
        """A str is always parsed as Markdown text."""
        doc = markdown_to_ast("README.md")
        assert doc.children[0].content == [Text(content="README.md")]

    def test_stream_inputs(self) -> None:
        """Binary and text streams are both accepted."""
        assert markdown_to_ast(BytesIO(b"bin")).children[0].content == [Text(content="bin")]
        assert markdown_to_ast(StringIO("txt")).children[0].content == [Text(content="txt")]

    def test_wrong_options_type(self) -> None:
        """Renderer options are rejected by the parser."""
        with pytest.raises(InvalidOptionsError):
            MarkdownToAstConverter(RtfRendererOptions())  # type: ignore[arg-type]

    def test_missing_mistune(self) -> None:
        """A missing parser dependency raises DependencyError with an install hint."""
        with patch("md2rtf.utils.decorators.importlib.import_module", side_effect=ImportError("No module")):
            with pytest.raises(DependencyError) as exc_info:
                MarkdownToAstConverter().parse("text")
        assert "mistune" in str(exc_info.value)
        assert "pip install" in str(exc_info.value)

    def test_old_mistune_version(self) -> None:
        """An installed mistune older than required is reported as a mismatch."""
        with patch("md2rtf.utils.decorators.check_version_requirement", return_value=(False, "2.0.5")):
            with pytest.raises(DependencyError) as exc_info:
                MarkdownToAstConverter().parse("text")
        assert exc_info.value.version_mismatches == [("mistune", ">=3.0.0", "2.0.5")]
