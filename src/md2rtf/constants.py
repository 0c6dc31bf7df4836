#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for md2rtf.

This module centralizes the control-word fragments, magic numbers and default
configuration values used across the md2rtf library.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Dependencies - Third-party packages required per feature
3. RTF Output - Control-word fragments emitted by the renderer
4. Rendering Defaults - Default values for renderer options
5. Parsing Defaults - Default values for Markdown parser options
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

# How characters outside the BMP are written by the escaper:
# "utf16" splits them into surrogate units (legacy output), "codepoint" writes one escape
UnicodeEscapeMode = Literal["utf16", "codepoint"]

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_MARKDOWN = [("mistune", "mistune", ">=3.0.0")]

# =============================================================================
# RTF Output
# =============================================================================

RTF_DOCUMENT_PREFIX = r"{\rtf1\ansi\fs24"
RTF_DOCUMENT_SUFFIX = "}"
RTF_PARAGRAPH_BREAK = r"\line\line "
RTF_LINE_BREAK = r"\line "
RTF_BULLET = r"\bullet\tab "
RTF_TAB = r"\tab"

# Heading font size is HEADING_BASE_SIZE / level (half-points)
HEADING_BASE_SIZE = 48

# Unicode escape wrapper: \ud{\uc6\u<6 digits>}
RTF_UNICODE_ESCAPE_TEMPLATE = r"\ud{\uc6\u%06d}"

# Image file extension -> picture blip control word
RTF_BLIP_TYPES: dict[str, str] = {
    "png": r"\pngblip",
    "jpg": r"\jpegblip",
    "jpeg": r"\jpegblip",
}

# 1 pixel = 15 twips at 96 DPI
TWIPS_PER_PIXEL = 15

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_RTF_EMBED_IMAGES = False
DEFAULT_RTF_UNICODE_MODE: UnicodeEscapeMode = "utf16"
DEFAULT_MAX_ASSET_SIZE_BYTES = 50 * 1024 * 1024  # 50MB maximum per asset
DEFAULT_FAIL_ON_RESOURCE_ERRORS = False

# =============================================================================
# Parsing Defaults
# =============================================================================

DEFAULT_PARSE_STRIKETHROUGH = False
DEFAULT_PARSE_TABLES = False
DEFAULT_PARSE_FRONTMATTER = True
