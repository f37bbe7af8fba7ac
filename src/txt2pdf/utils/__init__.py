#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/__init__.py
"""Utility modules for the txt2pdf package.

This package contains the encoding detection, text normalization and path
handling helpers used by the conversion pipeline.
"""

from txt2pdf.utils.encoding import decode_bytes, decode_bytes_counted, detect_encoding_from_bom
from txt2pdf.utils.paths import ensure_parent_dir, remove_stale_output
from txt2pdf.utils.text import normalize_content, normalize_line_endings, strip_bom

__all__ = [
    "decode_bytes",
    "decode_bytes_counted",
    "detect_encoding_from_bom",
    "ensure_parent_dir",
    "remove_stale_output",
    "normalize_content",
    "normalize_line_endings",
    "strip_bom",
]
