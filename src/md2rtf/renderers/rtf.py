#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/renderers/rtf.py
"""RTF rendering from AST.

The renderer is a post-order tree transducer: every node's children are
rendered first, their RTF fragments are concatenated, and the rule for the
node's kind wraps the result. The walk keeps its own stack, so arbitrarily
deep trees render without touching the interpreter's recursion limit.

Output is plain 7-bit text. It is meant to be embedded verbatim in a host
document (an XML attribute, a CDATA section, an HTML fragment), and the host
applies its own escaping on top.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, Optional, Union

from md2rtf.ast.nodes import (
    BulletList,
    Document,
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
    get_node_children,
)
from md2rtf.ast.visitors import NodeVisitor
from md2rtf.constants import (
    HEADING_BASE_SIZE,
    RTF_BLIP_TYPES,
    RTF_BULLET,
    RTF_DOCUMENT_PREFIX,
    RTF_DOCUMENT_SUFFIX,
    RTF_LINE_BREAK,
    RTF_PARAGRAPH_BREAK,
    TWIPS_PER_PIXEL,
    UnicodeEscapeMode,
)
from md2rtf.exceptions import MissingAttributeError, RenderingError
from md2rtf.options.rtf import RtfRendererOptions
from md2rtf.renderers.base import BaseRenderer
from md2rtf.utils.decorators import debug_timer
from md2rtf.utils.escape import escape_rtf
from md2rtf.utils.images import decode_base64_image, get_image_format_from_path, is_data_uri
from md2rtf.utils.urls import quote_field_argument, resolve_url

logger = logging.getLogger(__name__)


def heading_font_size(level: int) -> int:
    """Return the RTF font size (half-points) for a heading level.

    The size is ``48 / level`` rounded half up, giving 48, 24, 16, 12, 10
    and 8 for levels 1 through 6.

    """
    return (2 * HEADING_BASE_SIZE + level) // (2 * level)


@dataclass(frozen=True)
class EmbeddedImage:
    """Raw bytes of an image that can be written as a picture blip."""

    data: bytes
    image_format: str


class ImageLoader:
    """Read image bytes for embedding.

    This is the renderer's only I/O. It is handed to the render context only
    when embedding is enabled, so a renderer built with default options never
    touches the filesystem.

    Parameters
    ----------
    source_directory : str or Path or None
        Directory that relative paths are resolved against. Defaults to the
        current working directory. Local files outside it, whether reached
        through ``..`` or an absolute path, are refused.
    max_asset_size_bytes : int
        Largest image accepted, in bytes

    """

    def __init__(self, source_directory: Union[str, Path, None], max_asset_size_bytes: int):
        self.source_directory = Path(source_directory) if source_directory else Path.cwd()
        self.max_asset_size_bytes = max_asset_size_bytes

    def load(self, url: str) -> Optional[EmbeddedImage]:
        """Load an image for embedding.

        Parameters
        ----------
        url : str
            Image source as written in the document

        Returns
        -------
        EmbeddedImage or None
            The image, or None when the source is remote and therefore not
            embeddable

        Raises
        ------
        OSError
            If a local file cannot be read
        ValueError
            If the image has an unsupported format, is too large, lies
            outside the source directory or is a malformed data URI

        """
        if is_data_uri(url):
            return self._load_data_uri(url)
        if "://" in url:
            logger.debug(f"Not embedding remote image: {url}")
            return None
        return self._load_file(url)

    def _load_data_uri(self, url: str) -> EmbeddedImage:
        data, image_format = decode_base64_image(url)
        if data is None or image_format is None:
            raise ValueError("Malformed or unsupported image data URI")
        if image_format not in RTF_BLIP_TYPES:
            raise ValueError(f"Unsupported image format for embedding: {image_format}")
        self._check_size(len(data), "data URI")
        return EmbeddedImage(data=data, image_format=image_format)

    def _load_file(self, url: str) -> EmbeddedImage:
        image_format = get_image_format_from_path(url)
        if image_format not in RTF_BLIP_TYPES:
            raise ValueError(f"Unsupported image format for embedding: {url}")

        path = (self.source_directory / url).resolve()
        if not path.is_relative_to(self.source_directory.resolve()):
            raise ValueError(f"Image path {url} is outside the source directory {self.source_directory}")
        self._check_size(path.stat().st_size, str(path))
        return EmbeddedImage(data=path.read_bytes(), image_format=image_format)

    def _check_size(self, size: int, source: str) -> None:
        if size > self.max_asset_size_bytes:
            raise ValueError(
                f"Image {source} is {size} bytes, larger than the {self.max_asset_size_bytes} byte limit"
            )


@dataclass(frozen=True)
class RenderContext:
    """Per-call rendering state, passed explicitly to every rule.

    Parameters
    ----------
    base_url : str or None
        Base URL for relative link and image targets
    unicode_mode : {"utf16", "codepoint"}
        Escaping mode for characters above U+FFFF
    image_loader : ImageLoader or None
        Image embedding capability; None disables embedding
    fail_on_resource_errors : bool
        Raise instead of falling back when an image cannot be embedded

    """

    base_url: Optional[str] = None
    unicode_mode: UnicodeEscapeMode = "utf16"
    image_loader: Optional[ImageLoader] = None
    fail_on_resource_errors: bool = False

    @classmethod
    def from_options(cls, options: RtfRendererOptions) -> RenderContext:
        """Build the context for one render call."""
        image_loader = None
        if options.embed_images:
            image_loader = ImageLoader(options.source_directory, options.max_asset_size_bytes)
        return cls(
            base_url=options.base_url,
            unicode_mode=options.unicode_mode,
            image_loader=image_loader,
            fail_on_resource_errors=options.fail_on_resource_errors,
        )


class RtfRenderer(NodeVisitor, BaseRenderer):
    r"""Render AST nodes into an RTF control-word stream.

    Each ``visit_*`` method is the rule for one node kind. It receives the
    node, the concatenated RTF of the node's children and the render context,
    and returns the node's RTF. Kinds without a rule (``Element`` nodes)
    render as their escaped kind name in parentheses followed by their
    children.

    Parameters
    ----------
    options : RtfRendererOptions or None, default = None
        Rendering options

    Examples
    --------
        >>> doc = Document(children=[Paragraph(content=[Text("Hi")])])
        >>> RtfRenderer().render_to_string(doc)
        '{\\rtf1\\ansi\\fs24Hi\\line\\line }'

    """

    def __init__(self, options: RtfRendererOptions | None = None) -> None:
        """Initialize the renderer with format-specific options."""
        BaseRenderer._validate_options_type(options, RtfRendererOptions, "rtf")
        options = options or RtfRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: RtfRendererOptions = options

    def render(self, doc: Node, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render a document to an RTF file or stream."""
        self.write_text_output(self.render_to_string(doc), output)

    def render_to_string(self, doc: Node) -> str:
        """Render a document to an in-memory RTF string.

        Raises
        ------
        MissingAttributeError
            If a heading has no level or a link or image has no URL
        RenderingError
            If an image cannot be embedded and ``fail_on_resource_errors`` is set

        """
        context = RenderContext.from_options(self.options)
        with debug_timer(logger, "Rendering (rtf)"):
            return self._transduce(doc, context)

    def _transduce(self, root: Node, context: RenderContext) -> str:
        """Render ``root`` bottom-up with an explicit stack.

        Each frame holds a node, an iterator over its remaining children and
        the fragments rendered so far for the children already visited.

        """
        stack: list[tuple[Node, Iterator[Node], list[str]]] = [(root, iter(get_node_children(root)), [])]

        while True:
            node, children, parts = stack[-1]
            child = next(children, None)
            if child is not None:
                stack.append((child, iter(get_node_children(child)), []))
                continue

            stack.pop()
            rendered = node.accept(self, "".join(parts), context)
            if not stack:
                return rendered
            stack[-1][2].append(rendered)

    # ------------------------------------------------------------------
    # Rules
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, children: str, context: RenderContext) -> str:
        """Wrap the document body in the RTF header group."""
        return f"{RTF_DOCUMENT_PREFIX}{children}{RTF_DOCUMENT_SUFFIX}"

    def visit_heading(self, node: Heading, children: str, context: RenderContext) -> str:
        """Render a bold heading sized by its level."""
        if node.level is None:
            raise MissingAttributeError(node.kind_name, "level")
        return "{\\fs%02d\\b %s\\b}%s" % (heading_font_size(node.level), children, RTF_PARAGRAPH_BREAK)

    def visit_paragraph(self, node: Paragraph, children: str, context: RenderContext) -> str:
        """Render a paragraph followed by a blank line."""
        return children + RTF_PARAGRAPH_BREAK

    def visit_bullet_list(self, node: BulletList, children: str, context: RenderContext) -> str:
        """Render a bullet list as its own group."""
        return "{\\par " + children + "}" + RTF_LINE_BREAK

    def visit_list_item(self, node: ListItem, children: str, context: RenderContext) -> str:
        """Render one bulleted line."""
        return RTF_BULLET + children + RTF_LINE_BREAK

    def visit_strong(self, node: Strong, children: str, context: RenderContext) -> str:
        """Render bold text."""
        return "\\b " + children + "\\b0 "

    def visit_emphasis(self, node: Emphasis, children: str, context: RenderContext) -> str:
        """Render italic text."""
        return "\\i " + children + "\\i0 "

    def visit_inline_code(self, node: InlineCode, children: str, context: RenderContext) -> str:
        """Render code spans as italic underlined text."""
        return "\\i\\ul " + children + "\\ul0\\i0 "

    def visit_text(self, node: Text, children: str, context: RenderContext) -> str:
        """Render escaped literal text."""
        if node.content is None:
            raise MissingAttributeError(node.kind_name, "content")
        return escape_rtf(node.content, context.unicode_mode)

    def visit_link(self, node: Link, children: str, context: RenderContext) -> str:
        """Render a HYPERLINK field whose result is the link text."""
        if node.url is None:
            raise MissingAttributeError(node.kind_name, "url")
        return self._hyperlink(node.url, children, context)

    def visit_image(self, node: Image, children: str, context: RenderContext) -> str:
        """Render an embedded picture, or a hyperlink labelled with the alt text."""
        if node.url is None:
            raise MissingAttributeError(node.kind_name, "url")

        if context.image_loader is not None:
            picture = self._embed_image(node, context)
            if picture is not None:
                return picture

        return self._hyperlink(node.url, escape_rtf(node.alt_text or "", context.unicode_mode), context)

    def generic_visit(self, node: Node, children: str, context: RenderContext) -> str:  # type: ignore[override]
        """Render a kind without a rule as ``(kind)`` followed by its children."""
        logger.debug(f"No RTF rule for node kind '{node.kind_name}', using fallback rendering")
        return escape_rtf(f"({node.kind_name})", context.unicode_mode) + children

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _hyperlink(url: str, display: str, context: RenderContext) -> str:
        target = quote_field_argument(resolve_url(url, context.base_url))
        return "{\\field{\\*\\fldinst{HYPERLINK " + target + "}}{\\fldrslt " + display + "}}"

    def _embed_image(self, node: Image, context: RenderContext) -> Optional[str]:
        """Return the picture group for ``node``, or None to fall back to a link."""
        assert context.image_loader is not None
        assert node.url is not None

        try:
            image = context.image_loader.load(node.url)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to embed image {node.url[:100]}: {e}")
            if context.fail_on_resource_errors:
                raise RenderingError(
                    f"Failed to embed image {node.url[:100]}: {e!r}",
                    rendering_stage="image_processing",
                    original_error=e,
                ) from e
            return None

        if image is None:
            return None
        return self._picture_group(image, node.width, node.height)

    @staticmethod
    def _picture_group(image: EmbeddedImage, width: Optional[int], height: Optional[int]) -> str:
        size = ""
        if width:
            size += "\\picwgoal%d" % (width * TWIPS_PER_PIXEL)
        if height:
            size += "\\pichgoal%d" % (height * TWIPS_PER_PIXEL)
        blip = RTF_BLIP_TYPES[image.image_format]
        return "{\\*\\shppict{\\pict" + blip + size + " " + image.data.hex() + "}}"
