#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document renderers for txt2pdf."""

from txt2pdf.renderers.pdf import PdfRenderer

__all__ = ["PdfRenderer"]
