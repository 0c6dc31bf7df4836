"""Shared option dataclasses for md2rtf.

Every options class is a frozen dataclass. Callers never mutate an options
object; they derive a new one with ``create_updated``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from md2rtf.constants import DEFAULT_FAIL_ON_RESOURCE_ERRORS, DEFAULT_MAX_ASSET_SIZE_BYTES


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Copy-with-changes support for frozen option dataclasses."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy of these options with ``kwargs`` fields replaced.

        ``__post_init__`` validation runs again on the copy.

        Raises
        ------
        TypeError
            If a keyword is not a field of this options class

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Options every renderer understands.

    Parameters
    ----------
    fail_on_resource_errors : bool, default False
        Raise ``RenderingError`` when an external resource such as an image
        cannot be used. When False the failure is logged as a warning and the
        renderer falls back to a textual rendering.
    max_asset_size_bytes : int, default 50 MiB
        Upper bound on the size of any single asset read while rendering

    """

    fail_on_resource_errors: bool = field(
        default=DEFAULT_FAIL_ON_RESOURCE_ERRORS,
        metadata={
            "help": "Raise RenderingError when an image cannot be embedded instead of falling back",
            "importance": "advanced",
        },
    )
    max_asset_size_bytes: int = field(
        default=DEFAULT_MAX_ASSET_SIZE_BYTES,
        metadata={
            "help": "Largest image, in bytes, that will be embedded",
            "type": int,
            "importance": "security",
        },
    )

    def __post_init__(self) -> None:
        """Reject a non-positive asset size limit."""
        if self.max_asset_size_bytes <= 0:
            raise ValueError(f"max_asset_size_bytes must be positive, got {self.max_asset_size_bytes}")


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Options every parser understands. Currently none."""

    def __post_init__(self) -> None:
        """Validate option values; the base class has none."""
        pass
