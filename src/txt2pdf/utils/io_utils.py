#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/io_utils.py
"""I/O utilities for writing output files.

The output file only appears at its final path once everything has been
written: content goes to a temporary file in the destination directory which
is moved into place when the write finishes. A failed write never leaves a
finished-looking file behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Generator, Union

from txt2pdf.exceptions import OutputWriteError

logger = logging.getLogger(__name__)


@contextmanager
def write_session(path: Union[str, Path]) -> Generator[IO[bytes], None, None]:
    """Open a binary sink that is committed to ``path`` on success.

    Parameters
    ----------
    path : str or Path
        Final destination of the written content. Its directory must exist.

    Yields
    ------
    IO[bytes]
        Writable binary file object

    Raises
    ------
    OutputWriteError
        If the temporary sink cannot be opened, flushed or moved into place.
        Exceptions raised inside the ``with`` block propagate unchanged after
        the temporary file has been removed.

    Examples
    --------
        >>> with write_session("out/report.pdf") as sink:
        ...     sink.write(pdf_bytes)

    """
    output_path = Path(path)
    try:
        fd, temp_name = tempfile.mkstemp(prefix=f".{output_path.name}.", suffix=".part", dir=output_path.parent)
    except OSError as e:
        raise OutputWriteError(str(output_path), original_error=e) from e

    committed = False
    try:
        with os.fdopen(fd, "wb") as sink:
            yield sink
            try:
                sink.flush()
                os.fsync(sink.fileno())
            except OSError as e:
                raise OutputWriteError(str(output_path), original_error=e) from e

        try:
            os.replace(temp_name, output_path)
        except OSError as e:
            raise OutputWriteError(str(output_path), original_error=e) from e
        committed = True
        logger.debug(f"Committed output: {output_path}")
    finally:
        if not committed:
            try:
                os.unlink(temp_name)
            except FileNotFoundError:
                pass
            except OSError as e:
                logger.debug(f"Failed to cleanup temp file {temp_name}: {e}")
