#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/text.py
"""Text normalization helpers applied between decoding and layout."""

from __future__ import annotations

from txt2pdf.constants import BOM_CHAR


def strip_bom(text: str) -> str:
    """Remove a single U+FEFF at position 0.

    Markers elsewhere in the text are left untouched.

    >>> strip_bom("\\ufeffhello")
    'hello'
    >>> strip_bom("he\\ufeffllo")
    'he\\ufeffllo'

    """
    if text.startswith(BOM_CHAR):
        return text[len(BOM_CHAR) :]
    return text


def normalize_line_endings(text: str) -> str:
    """Collapse CRLF and lone CR line endings to LF.

    CRLF is replaced first so that it becomes one LF, not two.

    >>> normalize_line_endings("a\\r\\nb\\rc\\nd")
    'a\\nb\\nc\\nd'

    """
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_content(text: str) -> str:
    """Strip the leading BOM and unify line endings.

    The result contains no carriage return. Only one leading U+FEFF is
    removed, so text that started with two markers still starts with one.
    """
    return normalize_line_endings(strip_bom(text))


def expand_leading_whitespace(line: str, tab_size: int) -> tuple[int, str]:
    """Expand tabs and split off leading spaces.

    Parameters
    ----------
    line : str
        A single line of normalized text (no line terminators)
    tab_size : int
        Column width of a tab stop

    Returns
    -------
    tuple[int, str]
        Number of leading spaces and the remainder of the line

    """
    expanded = line.expandtabs(tab_size)
    stripped = expanded.lstrip(" ")
    return len(expanded) - len(stripped), stripped
