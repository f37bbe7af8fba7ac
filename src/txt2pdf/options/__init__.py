"""Configuration options for txt2pdf."""

from txt2pdf.options.base import CloneFrozenMixin
from txt2pdf.options.conversion import ConversionOptions
from txt2pdf.options.pdf import PdfRendererOptions

__all__ = ["CloneFrozenMixin", "ConversionOptions", "PdfRendererOptions"]
