"""Test utilities for the txt2pdf test suite."""

from pathlib import Path

try:
    import PyPDF2

    PDF_VERIFICATION_AVAILABLE = True
except ImportError:
    PDF_VERIFICATION_AVAILABLE = False

try:
    from reportlab.platypus import SimpleDocTemplate  # noqa: F401

    REPORTLAB_AVAILABLE = True
except ImportError:
    REPORTLAB_AVAILABLE = False


def get_pdf_text(pdf_path: Path) -> str:
    """Extract text from a PDF file for verification."""
    with open(pdf_path, "rb") as f:
        pdf = PyPDF2.PdfReader(f)
        return "".join(page.extract_text() for page in pdf.pages)


def get_pdf_page_count(pdf_path: Path) -> int:
    """Count pages of a PDF file."""
    with open(pdf_path, "rb") as f:
        return len(PyPDF2.PdfReader(f).pages)


def leftover_temp_files(directory: Path) -> list[Path]:
    """Temporary write-session files left in ``directory``."""
    return [p for p in directory.iterdir() if p.name.endswith(".part")]
