#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/renderers/__init__.py
"""Renderers that turn the md2rtf AST into output formats."""

from md2rtf.renderers.base import BaseRenderer
from md2rtf.renderers.rtf import EmbeddedImage, ImageLoader, RenderContext, RtfRenderer, heading_font_size

__all__ = [
    "BaseRenderer",
    "EmbeddedImage",
    "ImageLoader",
    "RenderContext",
    "RtfRenderer",
    "heading_font_size",
]
