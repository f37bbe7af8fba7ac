#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for txt2pdf.

This module centralizes the fixed values used across the conversion pipeline.

Constants are organized by category:
1. Type Definitions - Literal types and enumerations
2. Encoding Detection - Byte-order marks and codec names
3. PDF Rendering - Page layout and typography defaults
4. Dependencies - Third-party packages required at render time
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

PageSize = Literal["letter", "a4", "legal"]
DecodeErrorPolicy = Literal["strict", "replace"]


class EncodingTag(str, Enum):
    """Encodings the BOM detector can report."""

    UTF8 = "utf8"
    UTF16_LE = "utf16-le"
    UTF16_BE = "utf16-be"

    @property
    def codec(self) -> str:
        """Python codec name used to decode bytes under this tag."""
        return CODEC_NAMES[self]

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Encoding Detection
# =============================================================================

BOM_UTF8 = b"\xef\xbb\xbf"
BOM_UTF16_LE = b"\xff\xfe"
BOM_UTF16_BE = b"\xfe\xff"

# Checked in order; the three-byte UTF-8 mark goes first.
BOM_SIGNATURES: tuple[tuple[bytes, EncodingTag], ...] = (
    (BOM_UTF8, EncodingTag.UTF8),
    (BOM_UTF16_LE, EncodingTag.UTF16_LE),
    (BOM_UTF16_BE, EncodingTag.UTF16_BE),
)

DEFAULT_ENCODING = EncodingTag.UTF8

CODEC_NAMES: dict[EncodingTag, str] = {
    EncodingTag.UTF8: "utf-8",
    EncodingTag.UTF16_LE: "utf-16-le",
    EncodingTag.UTF16_BE: "utf-16-be",
}

BOM_CHAR = "\ufeff"
REPLACEMENT_CHAR = "\ufffd"

DEFAULT_DECODE_ERRORS: DecodeErrorPolicy = "strict"

# =============================================================================
# PDF Rendering
# =============================================================================

DEFAULT_PDF_PAGE_SIZE: PageSize = "letter"
DEFAULT_PDF_MARGIN = 50.0
DEFAULT_PDF_FONT_FAMILY = "Times-Roman"
DEFAULT_PDF_FONT_SIZE = 11
DEFAULT_PDF_LINE_GAP = 2.0
DEFAULT_TAB_SIZE = 4
DEFAULT_CREATOR = "txt2pdf"  # Creator application name for rendered documents

# Base-14 fonts that ReportLab can use without registering a TTF
STANDARD_PDF_FONTS = frozenset(
    {
        "Courier",
        "Courier-Bold",
        "Courier-BoldOblique",
        "Courier-Oblique",
        "Helvetica",
        "Helvetica-Bold",
        "Helvetica-BoldOblique",
        "Helvetica-Oblique",
        "Times-Roman",
        "Times-Bold",
        "Times-BoldItalic",
        "Times-Italic",
        "Symbol",
        "ZapfDingbats",
    }
)

PDF_FILE_SUFFIX = ".pdf"

# =============================================================================
# Dependencies
# =============================================================================

# (install_name, import_name, version_spec)
DEPS_PDF_RENDER = [("reportlab", "reportlab", ">=4.0.0")]
