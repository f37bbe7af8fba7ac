"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/txt2pdf/cli/output.py
from __future__ import annotations

import argparse
import sys
from typing import TextIO

from rich.console import Console
from rich.markup import escape

from txt2pdf.converter import ConversionResult


def should_use_rich_output(args: argparse.Namespace, stream: TextIO | None = None) -> bool:
    """Determine if Rich output should be used.

    Rich output is used when ``--rich`` is set and either ``--force-rich`` is
    set or the target stream is a TTY.
    """
    if not getattr(args, "rich", False):
        return False
    if getattr(args, "force_rich", False):
        return True

    isatty = getattr(stream or sys.stdout, "isatty", None)
    return bool(callable(isatty) and isatty())


def report_success(result: ConversionResult, use_rich: bool = False, stream: TextIO | None = None) -> None:
    """Print the output path and detected encoding of a finished conversion."""
    stream = stream or sys.stdout
    if use_rich:
        console = Console(file=stream)
        console.print(f"[green][OK][/green] PDF written to: [bold]{escape(str(result.output_path))}[/bold]")
        console.print(f"Encoding detected: [cyan]{result.encoding.value}[/cyan]")
        return

    print(f"PDF written to: {result.output_path}", file=stream)
    print(f"Encoding detected: {result.encoding.value}", file=stream)


def report_error(exc: BaseException, use_rich: bool = False, stream: TextIO | None = None) -> None:
    """Print a failure message."""
    stream = stream or sys.stderr
    message = getattr(exc, "message", None) or str(exc)
    if use_rich:
        Console(file=stream).print(f"[red]Error:[/red] {escape(message)}", highlight=False)
        return
    print(f"Error: {message}", file=stream)
