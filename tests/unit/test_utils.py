#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Unit tests for md2rtf utility helpers."""

import base64
import logging
from io import BytesIO, StringIO
from pathlib import Path
from unittest.mock import patch

import pytest

from md2rtf.exceptions import DependencyError
from md2rtf.utils.decorators import debug_timer, requires_dependencies
from md2rtf.utils.images import decode_base64_image, get_image_format_from_path, is_data_uri
from md2rtf.utils.io_utils import write_content
from md2rtf.utils.packages import check_version_requirement, get_package_version


@pytest.mark.unit
class TestImageHelpers:
    """Tests for image format and data URI helpers."""

    def test_is_data_uri(self) -> None:
        """Test data URI detection."""
        assert is_data_uri("data:image/png;base64,AAAA")
        assert not is_data_uri("https://example.com/a.png")
        assert not is_data_uri("")

    def test_decode_png(self, minimal_png: bytes) -> None:
        """Test decoding a PNG data URI."""
        uri = "data:image/png;base64," + base64.b64encode(minimal_png).decode("ascii")
        assert decode_base64_image(uri) == (minimal_png, "png")

    def test_decode_jpeg_normalizes_format(self) -> None:
        """JPEG MIME types map to the jpg extension."""
        uri = "data:image/jpeg;base64," + base64.b64encode(b"\xff\xd8").decode("ascii")
        assert decode_base64_image(uri) == (b"\xff\xd8", "jpg")

    def test_decode_invalid_base64(self) -> None:
        """Test that invalid base64 gives (None, None)."""
        assert decode_base64_image("data:image/png;base64,***") == (None, None)

    def test_decode_unknown_mime(self) -> None:
        """Test that non-image MIME types give (None, None)."""
        assert decode_base64_image("data:text/plain;base64,aGk=") == (None, None)

    def test_decode_not_base64(self) -> None:
        """Test that data URIs without a base64 marker give (None, None)."""
        assert decode_base64_image("data:image/png,raw") == (None, None)

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("photo.JPG", "jpg"),
            ("img/diagram.png", "png"),
            (Path("a/b.jpeg"), "jpeg"),
            ("anim.gif", "gif"),
            ("document.pdf", None),
            ("noext", None),
            ("", None),
        ],
    )
    def test_get_image_format_from_path(self, path, expected) -> None:
        """Test extracting the image format from a path."""
        assert get_image_format_from_path(path) == expected


@pytest.mark.unit
class TestWriteContent:
    """Tests for write_content."""

    def test_none_returns_buffer(self) -> None:
        """Test that a None output returns a readable buffer."""
        result = write_content("{\\rtf1}", None)
        assert isinstance(result, StringIO)
        assert result.getvalue() == "{\\rtf1}"

    def test_write_to_path(self, tmp_path: Path) -> None:
        """Test writing to a Path."""
        target = tmp_path / "out.rtf"
        assert write_content("text", target) is None
        assert target.read_text(encoding="utf-8") == "text"

    def test_write_to_str_path(self, tmp_path: Path) -> None:
        """Test writing to a path given as a string."""
        target = tmp_path / "out.rtf"
        write_content("text", str(target))
        assert target.read_text(encoding="utf-8") == "text"

    def test_write_to_binary_stream(self) -> None:
        """Test that binary streams receive encoded bytes."""
        buffer = BytesIO()
        write_content("text", buffer)
        assert buffer.getvalue() == b"text"

    def test_write_to_text_stream(self) -> None:
        """Test that text streams receive the string."""
        buffer = StringIO()
        write_content("text", buffer)
        assert buffer.getvalue() == "text"

    def test_write_to_binary_file(self, tmp_path: Path) -> None:
        """Test writing to a file opened in binary mode."""
        target = tmp_path / "out.rtf"
        with open(target, "wb") as f:
            write_content("text", f)
        assert target.read_bytes() == b"text"

    def test_non_string_content(self) -> None:
        """Test that non-string content is rejected."""
        with pytest.raises(TypeError):
            write_content(b"bytes", None)  # type: ignore[arg-type]

    def test_unsupported_output(self) -> None:
        """Test that unsupported output types are rejected."""
        with pytest.raises(TypeError):
            write_content("text", 42)  # type: ignore[arg-type]


@pytest.mark.unit
class TestRequiresDependencies:
    """Tests for the requires_dependencies decorator."""

    def test_available_dependency(self) -> None:
        """Test that the wrapped function runs when dependencies are present."""

        @requires_dependencies("test", [("pytest", "pytest", "")])
        def run() -> str:
            return "ran"

        assert run() == "ran"

    def test_missing_dependency(self) -> None:
        """Test that a missing package raises DependencyError."""

        @requires_dependencies("test", [("not-a-real-package", "not_a_real_package_md2rtf", "")])
        def run() -> str:
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        assert exc_info.value.missing_packages == [("not-a-real-package", "")]
        assert "not-a-real-package" in str(exc_info.value)
        assert isinstance(exc_info.value.original_import_error, ImportError)

    def test_version_mismatch(self) -> None:
        """Test that an unsatisfied version specifier raises DependencyError."""

        @requires_dependencies("test", [("pytest", "pytest", ">=9999.0")])
        def run() -> str:
            return "ran"

        with pytest.raises(DependencyError) as exc_info:
            run()

        assert exc_info.value.version_mismatches[0][:2] == ("pytest", ">=9999.0")

    def test_wraps_preserves_name(self) -> None:
        """Test that the wrapper keeps the function metadata."""

        @requires_dependencies("test", [])
        def parse_thing() -> None:
            """Parse a thing."""

        assert parse_thing.__name__ == "parse_thing"
        assert parse_thing.__doc__ == "Parse a thing."


@pytest.mark.unit
class TestDebugTimer:
    """Tests for debug_timer."""

    def test_logs_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that the elapsed time is logged when DEBUG is enabled."""
        logger = logging.getLogger("md2rtf.tests.timer")
        with caplog.at_level(logging.DEBUG, logger="md2rtf.tests.timer"):
            with debug_timer(logger, "Rendering (rtf)"):
                pass

        assert any("Rendering (rtf) completed in" in record.getMessage() for record in caplog.records)

    def test_silent_above_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test that nothing is logged when DEBUG is disabled."""
        logger = logging.getLogger("md2rtf.tests.timer_quiet")
        with caplog.at_level(logging.INFO, logger="md2rtf.tests.timer_quiet"):
            with debug_timer(logger, "Parsing (markdown)"):
                pass

        assert not caplog.records

    def test_exceptions_propagate(self) -> None:
        """Test that errors inside the block are not swallowed."""
        logger = logging.getLogger("md2rtf.tests.timer_error")
        with pytest.raises(RuntimeError):
            with debug_timer(logger, "op"):
                raise RuntimeError("boom")


@pytest.mark.unit
class TestPackages:
    """Tests for installed package checks."""

    def test_installed_package_version(self) -> None:
        """Test that an installed package reports a version."""
        assert get_package_version("pytest") is not None

    def test_missing_package_version(self) -> None:
        """Test that an absent package reports None."""
        assert get_package_version("not-a-real-package-md2rtf") is None

    def test_requirement_met(self) -> None:
        """Test a satisfied specifier."""
        with patch("md2rtf.utils.packages.get_package_version", return_value="3.1.0"):
            assert check_version_requirement("mistune", ">=3.0.0") == (True, "3.1.0")

    def test_requirement_not_met(self) -> None:
        """Test an unsatisfied specifier."""
        with patch("md2rtf.utils.packages.get_package_version", return_value="2.0.5"):
            assert check_version_requirement("mistune", ">=3.0.0") == (False, "2.0.5")

    def test_requirement_not_installed(self) -> None:
        """Test a package that is not installed."""
        with patch("md2rtf.utils.packages.get_package_version", return_value=None):
            assert check_version_requirement("mistune", ">=3.0.0") == (False, None)

    def test_invalid_specifier(self) -> None:
        """Test that an invalid specifier is treated as unmet."""
        with patch("md2rtf.utils.packages.get_package_version", return_value="1.0"):
            assert check_version_requirement("mistune", "not a spec") == (False, "1.0")
