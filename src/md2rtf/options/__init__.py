#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2rtf parsing and rendering.

Options are frozen dataclasses: create a modified copy with
``create_updated()`` rather than mutating an instance.
"""

from __future__ import annotations

from md2rtf.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2rtf.options.markdown import MarkdownParserOptions
from md2rtf.options.rtf import RtfRendererOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "RtfRendererOptions",
]
