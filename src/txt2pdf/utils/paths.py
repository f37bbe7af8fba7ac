#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/paths.py
"""File system helpers for input and output paths."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Union

from txt2pdf.exceptions import FileSystemError, MissingInputError

logger = logging.getLogger(__name__)


def require_input_file(path: Union[str, Path]) -> Path:
    """Return ``path`` as a Path, raising MissingInputError if it is not an existing file."""
    input_path = Path(path)
    if not input_path.is_file():
        raise MissingInputError(str(input_path))
    return input_path


def ensure_parent_dir(path: Union[str, Path]) -> Path:
    """Create every missing parent directory of ``path``.

    Parameters
    ----------
    path : str or Path
        Output file path

    Returns
    -------
    Path
        The parent directory

    Raises
    ------
    FileSystemError
        If a directory cannot be created (e.g. permission denied, or a
        component of the path is an existing file)

    """
    parent = Path(path).parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise FileSystemError(
            f"Cannot create output directory {parent}: {e.strerror or e}",
            file_path=str(parent),
            original_error=e,
        ) from e
    return parent


def remove_stale_output(path: Union[str, Path]) -> bool:
    """Remove a previous output file, best-effort.

    A missing file is not an error. Any other ``OSError`` (locked file,
    permission denied) is logged and ignored, since the following write
    reports the same condition when it opens the destination.

    Parameters
    ----------
    path : str or Path
        Output file path

    Returns
    -------
    bool
        True if a file was removed

    """
    output_path = Path(path)
    try:
        output_path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        logger.warning(f"Could not remove existing output {output_path}: {e}")
        return False

    logger.debug(f"Removed stale output: {output_path}")
    return True
