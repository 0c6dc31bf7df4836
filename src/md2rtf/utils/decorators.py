#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2rtf/utils/decorators.py
"""Decorators and context managers shared by the parser and the renderer.

``requires_dependencies`` guards entry points that import optional packages;
``debug_timer`` reports how long a parse or render took when DEBUG logging
is on.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, Optional, Sequence

from md2rtf.exceptions import DependencyError
from md2rtf.utils.packages import check_version_requirement

# (install_name, import_name, version_spec)
Requirement = tuple[str, str, str]


def _find_unmet(
    requirements: Sequence[Requirement],
) -> tuple[list[tuple[str, str]], list[tuple[str, str, str]], Optional[ImportError]]:
    """Return missing packages, version mismatches and the first import error."""
    missing: list[tuple[str, str]] = []
    mismatched: list[tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in requirements:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if not version_spec:
            continue
        satisfied, installed = check_version_requirement(install_name, version_spec)
        if not satisfied:
            mismatched.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatched, first_error


def requires_dependencies(converter_name: str, packages: Sequence[Requirement]) -> Callable:
    """Refuse to run the decorated callable until its packages are importable.

    The check runs on every call, so installing a package mid-session is
    picked up without re-importing md2rtf.

    Parameters
    ----------
    converter_name : str
        Component named in the error message (e.g. "markdown")
    packages : sequence of (install_name, import_name, version_spec)
        ``install_name`` is what ``pip install`` takes, ``import_name`` what
        ``import`` takes, and ``version_spec`` a PEP 440 specifier or ``""``.

    Raises
    ------
    DependencyError
        If a package cannot be imported or its installed version does not
        satisfy the specifier

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def parse(self, input_data):
        ...     import mistune

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def checked(*args: Any, **kwargs: Any) -> Any:
            missing, mismatched, first_error = _find_unmet(packages)
            if missing or mismatched:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=mismatched,
                    original_import_error=first_error,
                ) from first_error
            return func(*args, **kwargs)

        return checked

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log the wall time of the enclosed block at DEBUG level.

    Timing is skipped entirely when ``logger`` is not enabled for DEBUG.
    Exceptions raised in the block propagate unchanged and are not timed.

    Examples
    --------
        >>> with debug_timer(logger, "Rendering (rtf)"):
        ...     rtf = renderer.render_to_string(doc)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug(f"{operation} completed in {time.perf_counter() - started:.2f}s")
