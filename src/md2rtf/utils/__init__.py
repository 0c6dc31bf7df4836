#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/__init__.py
"""Utility modules for md2rtf package.

This package contains text escaping, URL resolution, image decoding and
output helpers shared by the parser and renderer.
"""

from md2rtf.utils.escape import escape_rtf, unescape_rtf
from md2rtf.utils.images import decode_base64_image, get_image_format_from_path, is_data_uri
from md2rtf.utils.urls import quote_field_argument, resolve_url

__all__ = [
    "decode_base64_image",
    "escape_rtf",
    "get_image_format_from_path",
    "is_data_uri",
    "quote_field_argument",
    "resolve_url",
    "unescape_rtf",
]
