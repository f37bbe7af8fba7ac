#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for PDF rendering.

This module defines the page layout and typography settings used when laying
out plain text with ReportLab.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from txt2pdf.constants import (
    DEFAULT_CREATOR,
    DEFAULT_PDF_FONT_FAMILY,
    DEFAULT_PDF_FONT_SIZE,
    DEFAULT_PDF_LINE_GAP,
    DEFAULT_PDF_MARGIN,
    DEFAULT_PDF_PAGE_SIZE,
    DEFAULT_TAB_SIZE,
    PageSize,
)
from txt2pdf.options.base import CloneFrozenMixin

_PAGE_SIZES = ("letter", "a4", "legal")


# src/txt2pdf/options/pdf.py
@dataclass(frozen=True)
class PdfRendererOptions(CloneFrozenMixin):
    """Configuration options for rendering plain text to PDF.

    Parameters
    ----------
    page_size : {"letter", "a4", "legal"}, default "letter"
        Page size for the PDF document.
    margin_top : float, default 50.0
        Top margin in points (72 points = 1 inch).
    margin_bottom : float, default 50.0
        Bottom margin in points.
    margin_left : float, default 50.0
        Left margin in points.
    margin_right : float, default 50.0
        Right margin in points.
    font_name : str, default "Times-Roman"
        Body font. Standard PDF fonts: Helvetica, Times-Roman, Courier.
    font_size : int, default 11
        Body font size in points.
    line_gap : float, default 2.0
        Extra space in points between consecutive lines.
    tab_size : int, default 4
        Tab stop width used when expanding tab characters.
    creator : str or None, default "txt2pdf"
        Creator application name written to the PDF metadata.
    title : str or None, default None
        Document title written to the PDF metadata.

    """

    page_size: PageSize = field(
        default=DEFAULT_PDF_PAGE_SIZE,
        metadata={"help": "Page size: letter, a4, or legal", "choices": list(_PAGE_SIZES)},
    )
    margin_top: float = field(default=DEFAULT_PDF_MARGIN, metadata={"help": "Top margin in points"})
    margin_bottom: float = field(default=DEFAULT_PDF_MARGIN, metadata={"help": "Bottom margin in points"})
    margin_left: float = field(default=DEFAULT_PDF_MARGIN, metadata={"help": "Left margin in points"})
    margin_right: float = field(default=DEFAULT_PDF_MARGIN, metadata={"help": "Right margin in points"})
    font_name: str = field(default=DEFAULT_PDF_FONT_FAMILY, metadata={"help": "Body font"})
    font_size: int = field(default=DEFAULT_PDF_FONT_SIZE, metadata={"help": "Body font size in points"})
    line_gap: float = field(default=DEFAULT_PDF_LINE_GAP, metadata={"help": "Gap between lines in points"})
    tab_size: int = field(default=DEFAULT_TAB_SIZE, metadata={"help": "Tab stop width in spaces"})
    creator: str | None = field(default=DEFAULT_CREATOR, metadata={"help": "Creator metadata"})
    title: str | None = field(default=None, metadata={"help": "Title metadata"})

    def __post_init__(self) -> None:
        """Validate numeric ranges for PDF renderer options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.page_size not in _PAGE_SIZES:
            raise ValueError(f"page_size must be one of {', '.join(_PAGE_SIZES)}, got {self.page_size!r}")

        for name in ("margin_top", "margin_bottom", "margin_left", "margin_right"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

        if self.font_size <= 0:
            raise ValueError(f"font_size must be positive, got {self.font_size}")
        if self.line_gap < 0:
            raise ValueError(f"line_gap must be non-negative, got {self.line_gap}")
        if self.tab_size < 1:
            raise ValueError(f"tab_size must be at least 1, got {self.tab_size}")

    @property
    def leading(self) -> float:
        """Baseline-to-baseline distance in points."""
        return self.font_size + self.line_gap
