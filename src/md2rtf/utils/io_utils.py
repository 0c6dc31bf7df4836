#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/io_utils.py
"""Helpers for writing rendered documents to their destination."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_content(content: str, output: Union[str, Path, IO[bytes], IO[str], None]) -> Union[StringIO, None]:
    """Write text content to an output destination or return it as a buffer.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes], IO[str], or None
        Output destination. Can be:
        - None: content is returned as a StringIO positioned at the start
        - str or Path: content is written to the file at that path
        - IO[bytes]: content is UTF-8 encoded and written
        - IO[str]: content is written as-is

    Returns
    -------
    StringIO or None
        A StringIO when ``output`` is None, otherwise None

    Raises
    ------
    TypeError
        If content is not a string or the output type is not supported

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content)}")

    if output is None:
        return StringIO(content)

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding="utf-8")
        return None

    if hasattr(output, "write"):
        if _is_binary_stream(output):
            cast(IO[bytes], output).write(content.encode("utf-8"))
        else:
            cast(IO[str], output).write(content)
        return None

    raise TypeError(f"Unsupported output type: {type(output)}")


__all__ = ["write_content"]
