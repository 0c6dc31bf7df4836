#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2rtf/options/rtf.py
"""Configuration options for rendering the AST into RTF.

The options object is immutable; the renderer derives a fresh render
context from it on every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from md2rtf.constants import DEFAULT_RTF_EMBED_IMAGES, DEFAULT_RTF_UNICODE_MODE, UnicodeEscapeMode
from md2rtf.options.base import BaseRendererOptions


@dataclass(frozen=True)
class RtfRendererOptions(BaseRendererOptions):
    """Configuration options for rendering AST documents to RTF.

    Parameters
    ----------
    base_url : str or None, default None
        Base URL that relative link and image targets are resolved against.
        Targets that already contain a scheme separator are left untouched.
    embed_images : bool, default False
        When True, local PNG/JPEG images (and ``data:`` URIs of those types)
        are embedded as picture blips. Otherwise every image is rendered as a
        hyperlink labelled with its alt text.
    source_directory : str or None, default None
        Directory that relative image paths are resolved against when
        embedding. Defaults to the current working directory.
    unicode_mode : {"utf16", "codepoint"}, default "utf16"
        How characters above U+FFFF are escaped:
        - "utf16": one escape per UTF-16 surrogate unit (matches previously
          generated RTF)
        - "codepoint": one escape holding the full code point

    """

    base_url: str | None = field(
        default=None,
        metadata={"help": "Base URL for resolving relative link and image targets", "importance": "core"},
    )
    embed_images: bool = field(
        default=DEFAULT_RTF_EMBED_IMAGES,
        metadata={"help": "Embed local PNG/JPEG images as picture blips", "importance": "core"},
    )
    source_directory: str | None = field(
        default=None,
        metadata={"help": "Directory used to resolve relative image paths when embedding", "importance": "core"},
    )
    unicode_mode: UnicodeEscapeMode = field(
        default=DEFAULT_RTF_UNICODE_MODE,
        metadata={
            "help": "Escape astral characters as UTF-16 surrogate units or as full code points",
            "choices": ["utf16", "codepoint"],
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate options by calling parent validation."""
        super().__post_init__()
        if self.unicode_mode not in ("utf16", "codepoint"):
            raise ValueError(f"unicode_mode must be 'utf16' or 'codepoint', got {self.unicode_mode!r}")
