#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/urls.py
"""URL helpers for link and image targets."""

from __future__ import annotations

from urllib.parse import quote, urljoin

# Reserved and unreserved characters that may stay literal inside a quoted field argument.
# '%' is kept so existing percent-escapes are not double-encoded.
_FIELD_SAFE_CHARS = "/:?#[]@!$&'()*+,;=%~"


def resolve_url(href: str, base_url: str | None = None) -> str:
    """Resolve a possibly-relative link target.

    Parameters
    ----------
    href : str
        Link or image target as written in the document
    base_url : str or None, default None
        Base URL that relative targets are resolved against

    Returns
    -------
    str
        ``href`` unchanged when it already contains a scheme separator or no
        base URL is given, otherwise ``href`` resolved against ``base_url``
        using standard URL resolution rules.

    Examples
    --------
        >>> resolve_url("img/a.png", "http://example.com/repo/")
        'http://example.com/repo/img/a.png'
        >>> resolve_url("http://other.com/a.png", "http://example.com/repo/")
        'http://other.com/a.png'

    """
    if "://" in href:
        return href
    if base_url:
        return urljoin(base_url, href)
    return href


def quote_field_argument(url: str) -> str:
    """Quote a URL for use as a HYPERLINK field-instruction argument.

    Characters that could terminate the quoted argument or be read as RTF
    syntax (quotes, backslashes, braces, whitespace, non-ASCII) are
    percent-encoded.

    Parameters
    ----------
    url : str
        Resolved URL

    Returns
    -------
    str
        The URL wrapped in double quotes

    Examples
    --------
        >>> quote_field_argument('http://example.com/a b"{c}')
        '"http://example.com/a%20b%22%7Bc%7D"'

    """
    return '"' + quote(url, safe=_FIELD_SAFE_CHARS) + '"'
