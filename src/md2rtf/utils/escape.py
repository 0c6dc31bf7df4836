#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/escape.py
"""RTF text escaping utilities.

This module turns arbitrary document text into RTF-safe ASCII text and back.
The escape sequences are the ones RTF consumers of this library already
receive, so their exact shape is part of the output contract.

"""

from __future__ import annotations

import re

from md2rtf.constants import RTF_TAB, RTF_UNICODE_ESCAPE_TEMPLATE, UnicodeEscapeMode

_NON_ASCII_RE = re.compile(r"[^\x00-\x7f]")
_ESCAPE_TOKEN_RE = re.compile(r"\\ud\{\\uc6\\u(?P<code>\d{6,7})\}|\\tab|\\(?P<literal>[\\{}])")


def _escape_non_ascii(char: str, unicode_mode: UnicodeEscapeMode) -> str:
    code = ord(char)
    if code > 0xFFFF and unicode_mode == "utf16":
        code -= 0x10000
        high = 0xD800 + (code >> 10)
        low = 0xDC00 + (code & 0x3FF)
        return RTF_UNICODE_ESCAPE_TEMPLATE % high + RTF_UNICODE_ESCAPE_TEMPLATE % low
    return RTF_UNICODE_ESCAPE_TEMPLATE % code


def escape_rtf(text: str, unicode_mode: UnicodeEscapeMode = "utf16") -> str:
    r"""Escape text for inclusion in an RTF stream.

    Rules are applied in order, so later rules never re-escape the output of
    earlier ones:

    1. ``\`` becomes ``\\``
    2. ``{`` and ``}`` become ``\{`` and ``\}``
    3. every character above U+007F becomes ``\ud{\uc6\uNNNNNN}`` with the
       decimal value zero-padded to six digits
    4. tab becomes ``\tab``

    Parameters
    ----------
    text : str
        Text to escape
    unicode_mode : {"utf16", "codepoint"}, default "utf16"
        Characters above U+FFFF are written as two surrogate-unit escapes in
        "utf16" mode and as a single escape in "codepoint" mode

    Returns
    -------
    str
        ASCII-only escaped text

    Examples
    --------
        >>> escape_rtf("café")
        'caf\\ud{\\uc6\\u000233}'
        >>> escape_rtf("{x}")
        '\\{x\\}'

    """
    if not text:
        return text

    result = text.replace("\\", "\\\\").replace("{", "\\{").replace("}", "\\}")
    result = _NON_ASCII_RE.sub(lambda match: _escape_non_ascii(match.group(0), unicode_mode), result)
    return result.replace("\t", RTF_TAB)


def unescape_rtf(text: str) -> str:
    r"""Reverse :func:`escape_rtf`.

    Surrogate-unit escapes produced in "utf16" mode are recombined into the
    original code point.

    Parameters
    ----------
    text : str
        Text previously produced by :func:`escape_rtf`

    Returns
    -------
    str
        The original text

    """
    if not text:
        return text

    def _replace(match: re.Match[str]) -> str:
        if match.group("code") is not None:
            return chr(int(match.group("code")))
        if match.group("literal") is not None:
            return match.group("literal")
        return "\t"

    decoded = _ESCAPE_TOKEN_RE.sub(_replace, text)
    # Recombine surrogate pairs; lone surrogates pass through unchanged
    return decoded.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")
