#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/parsers/base.py
"""Base classes for document parsers.

A parser turns source text into the md2rtf AST that the renderer consumes.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from md2rtf.ast import Document
from md2rtf.exceptions import InvalidOptionsError, ParsingError
from md2rtf.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, Path, IO[bytes], IO[str], bytes]


class BaseParser(ABC):
    """Abstract base class for all document parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Document:
        """Parse the input document into an AST.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str], or bytes
            The input document to parse

        Returns
        -------
        Document
            AST Document node representing the parsed document structure

        Raises
        ------
        ParsingError
            If the input cannot be read or decoded
        DependencyError
            If required dependencies are not installed

        """
        raise NotImplementedError

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load text from the supported input types.

        A ``str`` is always treated as document content; pass a ``Path`` to
        read from a file. Bytes are decoded as UTF-8 with an optional BOM.

        Raises
        ------
        ParsingError
            If bytes are not valid UTF-8 or the file cannot be read

        """
        if isinstance(input_data, str):
            return input_data

        try:
            if isinstance(input_data, Path):
                raw: Union[str, bytes] = input_data.read_bytes()
            elif isinstance(input_data, bytes):
                raw = input_data
            else:
                raw = input_data.read()
        except OSError as e:
            raise ParsingError(f"Could not read input: {e}", parsing_stage="input_processing", original_error=e) from e

        if isinstance(raw, str):
            return raw

        try:
            return raw.decode("utf-8-sig")
        except UnicodeDecodeError as e:
            raise ParsingError(
                "Input is not valid UTF-8 text", parsing_stage="input_processing", original_error=e
            ) from e
