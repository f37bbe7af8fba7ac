"""txt2pdf - convert plain-text files into paginated PDF documents.

The input encoding is detected from its byte-order mark (UTF-8, UTF-16 LE or
UTF-16 BE, defaulting to UTF-8), the text is decoded, the leading BOM is
stripped and line endings are unified before the text is laid out with
ReportLab.

Examples
--------
Basic usage:

    >>> from txt2pdf import txt_to_pdf
    >>> result = txt_to_pdf("notes.txt", "out/notes.pdf")
    >>> print(result.output_path, result.encoding)

Lenient decoding and a different page layout:

    >>> from txt2pdf import ConversionOptions, PdfRendererOptions
    >>> options = ConversionOptions(
    ...     decode_errors="replace",
    ...     renderer=PdfRendererOptions(page_size="a4", font_name="Courier"),
    ... )
    >>> txt_to_pdf("legacy.txt", "legacy.pdf", options)

"""

from txt2pdf.constants import EncodingTag
from txt2pdf.converter import ConversionResult, txt_to_pdf
from txt2pdf.exceptions import (
    DecodeError,
    DependencyError,
    FileAccessError,
    FileSystemError,
    MissingInputError,
    OutputWriteError,
    RenderError,
    Txt2PdfError,
    ValidationError,
)
from txt2pdf.options import ConversionOptions, PdfRendererOptions

__version__ = "0.1.0"

__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "DecodeError",
    "DependencyError",
    "EncodingTag",
    "FileAccessError",
    "FileSystemError",
    "MissingInputError",
    "OutputWriteError",
    "PdfRendererOptions",
    "RenderError",
    "Txt2PdfError",
    "ValidationError",
    "__version__",
    "txt_to_pdf",
]
