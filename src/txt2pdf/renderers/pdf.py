#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/renderers/pdf.py
"""PDF rendering of plain text.

This module provides the PdfRenderer class which lays out normalized plain
text as a PDF using the ReportLab library. Layout uses the Platypus
framework: every source line becomes a left-aligned paragraph inside a single
frame bounded by the page margins, and Platypus flows the paragraphs across
as many pages as needed.

The text is never interpreted as markup; characters that are significant to
ReportLab's paragraph mini-language are escaped.

"""

from __future__ import annotations

import io
import logging
import re
from pathlib import Path
from typing import IO, TYPE_CHECKING, Any, Union

if TYPE_CHECKING:
    from reportlab.lib.styles import ParagraphStyle
    from reportlab.platypus import Flowable

from txt2pdf.constants import DEPS_PDF_RENDER, STANDARD_PDF_FONTS
from txt2pdf.exceptions import DependencyError, OutputWriteError, RenderError
from txt2pdf.options.pdf import PdfRendererOptions
from txt2pdf.utils.decorators import requires_dependencies
from txt2pdf.utils.io_utils import write_session
from txt2pdf.utils.text import expand_leading_whitespace

logger = logging.getLogger(__name__)

_SPACE_RUN = re.compile(r" {2,}")


def _escape_markup(text: str) -> str:
    """Escape characters that ReportLab's paragraph parser treats as markup."""
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _preserve_space_runs(text: str) -> str:
    """Keep runs of spaces from collapsing by turning all but the first into non-breaking spaces."""
    return _SPACE_RUN.sub(lambda m: " " + "&nbsp;" * (len(m.group()) - 1), text)


class PdfRenderer:
    """Render plain text to PDF format.

    Parameters
    ----------
    options : PdfRendererOptions or None, default = None
        PDF rendering options

    Examples
    --------
    Basic usage:

        >>> from txt2pdf.renderers.pdf import PdfRenderer
        >>> renderer = PdfRenderer()
        >>> renderer.render("First line\\nSecond line", "output.pdf")

    """

    def __init__(self, options: PdfRendererOptions | None = None):
        """Initialize the PDF renderer with options."""
        if options is not None and not isinstance(options, PdfRendererOptions):
            raise TypeError(f"PdfRenderer expected PdfRendererOptions, got {type(options).__name__}")
        self.options: PdfRendererOptions = options or PdfRendererOptions()
        self.page_count: int = 0

    @requires_dependencies("pdf", DEPS_PDF_RENDER)
    def render(self, text: str, output: Union[str, Path, IO[bytes]]) -> int:
        """Render normalized text to a PDF file.

        When ``output`` is a path, the document is written through a
        :func:`~txt2pdf.utils.io_utils.write_session`, so the file only
        appears at ``output`` once it is complete.

        Parameters
        ----------
        text : str
            Normalized text (LF line endings, no carriage returns)
        output : str, Path, or IO[bytes]
            Output destination (file path or binary file-like object)

        Returns
        -------
        int
            Number of pages in the rendered document

        Raises
        ------
        RenderError
            If PDF generation fails
        OutputWriteError
            If the output file cannot be written

        """
        from reportlab.lib.pagesizes import A4, LEGAL, LETTER
        from reportlab.platypus import SimpleDocTemplate

        page_sizes = {"letter": LETTER, "a4": A4, "legal": LEGAL}
        page_size = page_sizes[self.options.page_size]

        if self.options.font_name not in STANDARD_PDF_FONTS:
            logger.warning(f"Font {self.options.font_name!r} is not a standard PDF font; it must be registered")

        doc_kwargs: dict[str, Any] = {
            "pagesize": page_size,
            "rightMargin": self.options.margin_right,
            "leftMargin": self.options.margin_left,
            "topMargin": self.options.margin_top,
            "bottomMargin": self.options.margin_bottom,
        }
        if self.options.creator:
            doc_kwargs["creator"] = self.options.creator
        if self.options.title:
            doc_kwargs["title"] = self.options.title

        try:
            flowables = self._build_flowables(text)
            if isinstance(output, (str, Path)):
                with write_session(output) as sink:
                    pdf_doc = SimpleDocTemplate(sink, **doc_kwargs)
                    pdf_doc.build(flowables)
            else:
                buffer = io.BytesIO()
                pdf_doc = SimpleDocTemplate(buffer, **doc_kwargs)
                pdf_doc.build(flowables)
                output.write(buffer.getvalue())
        except (OutputWriteError, DependencyError):
            raise
        except OSError as e:
            raise OutputWriteError(str(output) if isinstance(output, (str, Path)) else "<stream>", original_error=e) from e
        except Exception as e:
            raise RenderError(f"Failed to render PDF: {e!r}", rendering_stage="rendering", original_error=e) from e

        self.page_count = pdf_doc.page
        logger.debug(f"Rendered {len(flowables)} line(s) onto {self.page_count} page(s)")
        return self.page_count

    def render_to_bytes(self, text: str) -> bytes:
        """Render normalized text to PDF bytes.

        Parameters
        ----------
        text : str
            Normalized text

        Returns
        -------
        bytes
            PDF file content

        """
        buffer = io.BytesIO()
        self.render(text, buffer)
        return buffer.getvalue()

    def _create_style(self) -> ParagraphStyle:
        """Create the body paragraph style.

        Returns
        -------
        ParagraphStyle
            Left-aligned style using the configured font and leading

        """
        from reportlab.lib.enums import TA_LEFT
        from reportlab.lib.styles import ParagraphStyle

        return ParagraphStyle(
            name="Body",
            fontName=self.options.font_name,
            fontSize=self.options.font_size,
            leading=self.options.leading,
            alignment=TA_LEFT,
            spaceBefore=0,
            spaceAfter=0,
        )

    def _build_flowables(self, text: str) -> list[Flowable]:
        """Convert text into one flowable per line.

        Blank lines become spacers one line tall. Long lines wrap within the
        frame width; Platypus splits paragraphs across page boundaries.

        Parameters
        ----------
        text : str
            Normalized text

        Returns
        -------
        list of Flowable
            Flowables in document order

        """
        from reportlab.platypus import Paragraph, Spacer

        style = self._create_style()
        lines = text.split("\n")
        # A final newline terminates the last line rather than starting a new one
        if lines and lines[-1] == "":
            lines.pop()

        flowables: list[Flowable] = []
        for line in lines:
            indent, body = expand_leading_whitespace(line, self.options.tab_size)
            if not body:
                flowables.append(Spacer(1, style.leading))
                continue
            markup = "&nbsp;" * indent + _preserve_space_runs(_escape_markup(body))
            flowables.append(Paragraph(markup, style))

        # Empty input still produces one blank page
        if not flowables:
            flowables.append(Spacer(1, style.leading))

        return flowables
