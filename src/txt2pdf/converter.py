#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/converter.py
"""Text-to-PDF conversion pipeline.

The pipeline runs a fixed sequence of steps and stops at the first failure:

1. verify the input file exists
2. create the output directory
3. read the input bytes
4. detect the encoding from the byte-order mark
5. decode
6. strip the leading BOM and unify line endings
7. remove a stale output file (best-effort)
8. render the PDF and wait for the write to complete

Nothing is retried. Every fatal error is raised as a
:class:`~txt2pdf.exceptions.Txt2PdfError` subclass.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from txt2pdf.constants import EncodingTag
from txt2pdf.exceptions import FileAccessError
from txt2pdf.options.conversion import ConversionOptions
from txt2pdf.renderers.pdf import PdfRenderer
from txt2pdf.utils.decorators import debug_timer
from txt2pdf.utils.encoding import bom_length, decode_bytes_counted, detect_encoding_from_bom
from txt2pdf.utils.paths import ensure_parent_dir, remove_stale_output, require_input_file
from txt2pdf.utils.text import normalize_content

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful conversion.

    Attributes
    ----------
    output_path : Path
        Where the PDF was written
    encoding : EncodingTag
        Encoding the input was decoded with
    page_count : int
        Number of pages in the generated PDF
    decode_errors : int
        Malformed byte sequences replaced with U+FFFD (lenient decoding only)

    """

    output_path: Path
    encoding: EncodingTag
    page_count: int = 0
    decode_errors: int = 0


def read_input_bytes(path: Path) -> bytes:
    """Read the whole input file, wrapping OS errors as FileAccessError."""
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(str(path), message=f"Cannot read input file {path}: {e}", original_error=e) from e


def txt_to_pdf(
    input_path: Union[str, Path],
    output_path: Union[str, Path],
    options: ConversionOptions | None = None,
) -> ConversionResult:
    """Convert a plain-text file into a paginated PDF.

    Parameters
    ----------
    input_path : str or Path
        Source text file
    output_path : str or Path
        Destination PDF file. Missing parent directories are created and an
        existing file is replaced.
    options : ConversionOptions, optional
        Decoding and layout options. Defaults to strict decoding with the
        standard page layout.

    Returns
    -------
    ConversionResult
        Output path, encoding, page count and replaced-sequence count

    Raises
    ------
    MissingInputError
        If ``input_path`` does not exist; raised before anything is written
    FileSystemError
        If the output directory cannot be created or the input cannot be read
    DecodeError
        If the input bytes are malformed and decoding is strict
    RenderError
        If PDF generation or the output write fails

    Examples
    --------
        >>> result = txt_to_pdf("notes.txt", "out/notes.pdf")
        >>> result.encoding
        <EncodingTag.UTF8: 'utf8'>

    """
    options = options or ConversionOptions()

    source = require_input_file(input_path)
    destination = Path(output_path)
    ensure_parent_dir(destination)

    raw = read_input_bytes(source)
    logger.debug(f"Read {len(raw)} bytes from {source}")

    encoding = detect_encoding_from_bom(raw)
    if bom_length(raw, encoding):
        logger.debug(f"Input starts with a {encoding.value} byte-order mark")

    decoded, replaced = decode_bytes_counted(raw, encoding, errors=options.decode_errors)
    text = normalize_content(decoded)

    if options.remove_stale_output:
        remove_stale_output(destination)

    renderer = PdfRenderer(options.renderer)
    with debug_timer(logger, "Rendering PDF"):
        page_count = renderer.render(text, destination)

    logger.info(f"Converted {source} -> {destination} ({encoding.value}, {page_count} page(s))")
    return ConversionResult(
        output_path=destination, encoding=encoding, page_count=page_count, decode_errors=replaced
    )
