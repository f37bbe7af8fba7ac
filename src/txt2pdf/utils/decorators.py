#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/decorators.py
"""Utility decorators for txt2pdf renderers.

Rendering libraries are imported lazily inside the methods that need them;
these decorators check for them up front so that a missing or outdated
package surfaces as a DependencyError with install instructions instead of a
bare ImportError halfway through a conversion.
"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Generator, List, Tuple

from txt2pdf.exceptions import DependencyError
from txt2pdf.utils.packages import check_version_requirement


def requires_dependencies(converter_name: str, packages: List[Tuple[str, str, str]]) -> Callable:
    """Check required dependencies and versions before method execution.

    Parameters
    ----------
    converter_name : str
        Name of the component (e.g. ``"pdf"``), used in error messages
    packages : list of tuple
        Required packages as (install_name, import_name, version_spec) tuples

    Returns
    -------
    Callable
        Decorated method that checks dependencies before execution

    Raises
    ------
    DependencyError
        If any required package is missing or has an incompatible version

    Examples
    --------
        >>> @requires_dependencies("pdf", [("reportlab", "reportlab", ">=4.0.0")])
        ... def render(self, text, output):
        ...     from reportlab.platypus import SimpleDocTemplate

    """

    def decorator(method: Callable) -> Callable:
        @wraps(method)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing = []
            version_mismatches = []
            original_error = None

            for install_name, import_name, version_spec in packages:
                try:
                    importlib.import_module(import_name)
                except ImportError as e:
                    missing.append((install_name, version_spec))
                    if original_error is None:
                        original_error = e
                    continue

                if version_spec:
                    meets_requirement, installed_version = check_version_requirement(install_name, version_spec)
                    if not meets_requirement:
                        version_mismatches.append((install_name, version_spec, installed_version or "unknown"))

            if missing or version_mismatches:
                raise DependencyError(
                    converter_name=converter_name,
                    missing_packages=missing,
                    version_mismatches=version_mismatches,
                    original_import_error=original_error,
                ) from original_error

            return method(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Generator[None, None, None]:
    """Log the elapsed time of the wrapped block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Rendering PDF"):
        ...     renderer.render(text, "out.pdf")
        ... # Logs: "Rendering PDF completed in 0.12s"

    """
    if logger.isEnabledFor(logging.DEBUG):
        start_time = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start_time
        logger.debug(f"{operation} completed in {elapsed:.2f}s")
    else:
        yield
