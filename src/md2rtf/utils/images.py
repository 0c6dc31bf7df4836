#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/images.py
"""Image handling utilities for the renderer.

This module identifies image formats from paths and data URIs and decodes
base64 data URIs into raw bytes.

"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

_DATA_URI_RE = re.compile(r"^data:(?P<mime>[^;,]+);base64,(?P<data>.+)", re.DOTALL)

_MIME_TO_EXT = {
    "image/png": "png",
    "image/jpeg": "jpg",
    "image/jpg": "jpg",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/svg+xml": "svg",
    "image/bmp": "bmp",
    "image/tiff": "tiff",
}

_IMAGE_FORMATS = {"png", "jpeg", "jpg", "gif", "webp", "svg", "bmp", "tiff", "tif", "ico"}


def is_data_uri(uri: str) -> bool:
    """Check if a string is a data URI.

    Examples
    --------
        >>> is_data_uri("data:image/png;base64,...")
        True
        >>> is_data_uri("https://example.com/image.png")
        False

    """
    if not uri or not isinstance(uri, str):
        return False

    return uri.startswith("data:")


def decode_base64_image(data_uri: str) -> tuple[bytes | None, str | None]:
    """Decode a base64-encoded data URI to image bytes.

    Parameters
    ----------
    data_uri : str
        Data URI string in format: data:image/{format};base64,{data}

    Returns
    -------
    tuple[bytes or None, str or None]
        Tuple of (image_data, image_format) or (None, None) if decoding fails.
        image_format is the file extension without dot (e.g., "png", "jpg")

    """
    if not is_data_uri(data_uri):
        logger.debug("Invalid input to decode_base64_image: not a data URI")
        return None, None

    match = _DATA_URI_RE.match(data_uri)
    if not match:
        logger.debug(f"Invalid data URI format for URI starting with '{data_uri[:50]}...'")
        return None, None

    mime_type = match.group("mime").strip().lower()
    image_format = _MIME_TO_EXT.get(mime_type)
    if image_format is None:
        logger.debug(f"Unknown or unsupported MIME type: {mime_type}")
        return None, None

    try:
        image_data = base64.b64decode(match.group("data").strip(), validate=True)
    except (ValueError, binascii.Error) as e:
        logger.debug(f"Invalid base64 encoding: failed to decode ({type(e).__name__}: {e})")
        return None, None
    return image_data, image_format


def get_image_format_from_path(path: str | Path) -> str | None:
    """Extract image format from file path.

    Parameters
    ----------
    path : str or Path
        File path

    Returns
    -------
    str or None
        Image format (lowercase extension without dot) or None if not an image

    Examples
    --------
        >>> get_image_format_from_path("photo.JPG")
        'jpg'
        >>> get_image_format_from_path("document.pdf")
        None

    """
    if not path:
        return None

    suffix = Path(path).suffix.lower().lstrip(".")
    return suffix if suffix in _IMAGE_FORMATS else None
