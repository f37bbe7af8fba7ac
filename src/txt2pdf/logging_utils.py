#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Logging setup for the txt2pdf command line.

The library itself only creates module loggers; handlers are installed here,
once, by the CLI entry point.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

CONSOLE_FORMAT = "txt2pdf: %(levelname)s: %(message)s"
TRACE_FORMAT = "[%(asctime)s.%(msecs)03d] [%(levelname)s] [%(name)s:%(lineno)d] %(message)s"
TRACE_DATE_FORMAT = "%H:%M:%S"


def _build_formatter(trace_mode: bool) -> logging.Formatter:
    if trace_mode:
        return logging.Formatter(TRACE_FORMAT, datefmt=TRACE_DATE_FORMAT)
    return logging.Formatter(CONSOLE_FORMAT)


def configure_logging(log_level: int | str, log_file: Optional[str] = None, trace_mode: bool = False) -> None:
    """Replace the root logger's handlers with a stderr handler and an optional file handler.

    Parameters
    ----------
    log_level : int | str
        Numeric logging level or level name (e.g. ``"INFO"``). Unknown
        names fall back to WARNING.
    log_file : str, optional
        File that receives a copy of every record. If it cannot be opened a
        warning is logged and only stderr is used.
    trace_mode : bool, default False
        Use the trace format: timestamps plus logger name and line number.

    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = logging.getLevelName(str(log_level).upper())
        if not isinstance(level, int):
            level = logging.WARNING

    formatter = _build_formatter(trace_mode)
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    file_error: OSError | None = None
    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
        except OSError as exc:
            file_error = exc

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    if file_error is not None:
        root_logger.warning(f"Could not open log file {log_file}: {file_error}")
