#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Exceptions raised by md2rtf.

Everything md2rtf raises on purpose derives from ``Md2RtfError``, so callers
can catch the whole family with one clause.

Exception Hierarchy
-------------------
- Md2RtfError

  - ValidationError: a parameter or option has an unusable value
    - InvalidOptionsError: a parser or renderer got the wrong options class

  - ParsingError: Markdown input could not be read or decoded

  - RenderingError: the tree could not be turned into RTF
    - MissingAttributeError: a node lacks data its kind requires

  - DependencyError: an optional package is missing or too old

"""

from typing import Any


class Md2RtfError(Exception):
    """Root of the md2rtf exception tree.

    Parameters
    ----------
    message : str
        Text shown to the user
    original_error : Exception, optional
        Lower-level exception that triggered this one

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Md2RtfError):
    """An argument or option value was rejected.

    Parameters
    ----------
    message : str
        What was wrong
    parameter_name : str, optional
        The offending parameter
    parameter_value : any, optional
        The value it was given
    original_error : Exception, optional
        Underlying exception, if any

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """A parser or renderer was handed another component's options class.

    Parameters
    ----------
    converter_name : str
        Component that rejected the options (e.g. "rtf", "markdown")
    expected_type : type
        Options class the component accepts
    received_type : type
        Options class it was given
    message : str, optional
        Overrides the generated message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        if message is None:
            message = (
                f"{converter_name} needs {expected_type.__name__}, "
                f"got {received_type.__name__} instead."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class ParsingError(Md2RtfError):
    """Markdown input could not be turned into a document tree.

    Parameters
    ----------
    message : str
        What failed
    parsing_stage : str, optional
        Where it failed, e.g. "input_processing"
    original_error : Exception, optional
        Underlying exception

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class RenderingError(Md2RtfError):
    """The document tree could not be rendered.

    Raised for malformed nodes, and for images that cannot be embedded when
    ``fail_on_resource_errors`` is set.

    Parameters
    ----------
    message : str
        What failed
    rendering_stage : str, optional
        Where it failed, e.g. "image_processing" or "validation"
    original_error : Exception, optional
        Underlying exception

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class MissingAttributeError(RenderingError):
    """A node lacks an attribute its kind cannot do without.

    Raised for a heading with no level or a link or image with no URL. The
    renderer never substitutes a default for these.

    Attributes
    ----------
    node_kind : str
        Kind name of the node, e.g. "heading"
    attribute_name : str
        The missing attribute, e.g. "level"

    """

    def __init__(self, node_kind: str, attribute_name: str, message: str | None = None):
        if message is None:
            message = f"{node_kind} node is missing required attribute '{attribute_name}'"
        super().__init__(message, rendering_stage="validation")
        self.node_kind = node_kind
        self.attribute_name = attribute_name


def _format_requirement(name: str, spec: str) -> str:
    return f"{name}{spec}" if spec else name


class DependencyError(Md2RtfError):
    """An optional package needed by a component is missing or too old.

    Parameters
    ----------
    converter_name : str
        Component that needs the packages
    missing_packages : list of (name, version_spec)
        Packages that could not be imported
    version_mismatches : list of (name, required, installed), optional
        Packages whose installed version does not satisfy the requirement
    install_command : str, optional
        Command suggested to the user; a ``pip install`` line is generated
        when omitted
    message : str, optional
        Overrides the generated message
    original_import_error : ImportError, optional
        First ImportError seen while checking

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        install_command: str = "",
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        version_mismatches = version_mismatches or []
        if message is None:
            message = self._build_message(converter_name, missing_packages, version_mismatches, install_command)

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
        self.install_command = install_command
        self.original_import_error = original_import_error

    @staticmethod
    def _build_message(
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]],
        install_command: str,
    ) -> str:
        label = converter_name.upper()
        lines = []
        if missing_packages:
            names = ", ".join(f"'{_format_requirement(name, spec)}'" for name, spec in missing_packages)
            lines.append(f"{label} support needs packages that are not installed: {names}")
        for name, required, installed in version_mismatches:
            lines.append(f"{label} support needs '{name}{required}', but {installed} is installed")

        if not install_command:
            wanted = missing_packages + [(name, required) for name, required, _ in version_mismatches]
            if wanted:
                install_command = "pip install --upgrade " + " ".join(
                    f'"{_format_requirement(name, spec)}"' for name, spec in wanted
                )
        if install_command:
            lines.append(f"Install with: {install_command}")
        return "\n".join(lines)
