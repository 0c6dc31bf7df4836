#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for link target resolution and quoting."""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from md2rtf.utils.urls import quote_field_argument, resolve_url


@pytest.mark.unit
class TestResolveUrl:
    """Tests for resolve_url."""

    def test_relative_with_base(self) -> None:
        """Relative targets are joined onto the base URL."""
        assert resolve_url("img/a.png", "http://example.com/repo/") == "http://example.com/repo/img/a.png"

    def test_absolute_unchanged(self) -> None:
        """Targets with a scheme separator are returned as-is."""
        assert resolve_url("http://other.com/a.png", "http://example.com/repo/") == "http://other.com/a.png"

    def test_no_base_unchanged(self) -> None:
        """Without a base URL the target is returned as-is."""
        assert resolve_url("img/a.png") == "img/a.png"

    def test_empty_base_unchanged(self) -> None:
        """An empty base URL is treated like no base URL."""
        assert resolve_url("img/a.png", "") == "img/a.png"

    def test_parent_directory(self) -> None:
        """Standard resolution rules apply to dot segments."""
        assert resolve_url("../b.html", "http://example.com/repo/docs/") == "http://example.com/repo/b.html"

    def test_root_relative(self) -> None:
        """Root-relative targets replace the base path."""
        assert resolve_url("/top.html", "http://example.com/repo/") == "http://example.com/top.html"

    def test_base_without_trailing_slash(self) -> None:
        """The last segment of a base without a trailing slash is replaced."""
        assert resolve_url("b.html", "http://example.com/repo/a.html") == "http://example.com/repo/b.html"

    @given(st.text(), st.text())
    def test_scheme_separator_always_wins(self, prefix: str, suffix: str) -> None:
        """Any target containing '://' is never altered."""
        href = prefix + "://" + suffix
        assert resolve_url(href, "http://example.com/") == href


@pytest.mark.unit
class TestQuoteFieldArgument:
    """Tests for quote_field_argument."""

    def test_simple_url(self) -> None:
        """Ordinary URLs are wrapped in quotes unchanged."""
        assert quote_field_argument("http://example.com/a?b=1#c") == '"http://example.com/a?b=1#c"'

    def test_unsafe_characters_encoded(self) -> None:
        """Quotes, spaces and braces are percent-encoded."""
        assert quote_field_argument('http://example.com/a b"{c}') == '"http://example.com/a%20b%22%7Bc%7D"'

    def test_backslash_encoded(self) -> None:
        """Backslashes cannot reach the RTF stream."""
        assert quote_field_argument("a\\b") == '"a%5Cb"'

    def test_existing_percent_escape_kept(self) -> None:
        """Percent-escapes already present are not double-encoded."""
        assert quote_field_argument("a%20b") == '"a%20b"'

    @given(st.text())
    def test_result_is_safe(self, url: str) -> None:
        """The quoted argument is ASCII with no inner quotes, braces or backslashes."""
        result = quote_field_argument(url)
        inner = result[1:-1]
        assert result.isascii()
        assert result.startswith('"') and result.endswith('"')
        assert not any(ch in inner for ch in '"{}\\ ')
