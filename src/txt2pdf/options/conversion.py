#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for the text-to-PDF conversion pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field

from txt2pdf.constants import DEFAULT_DECODE_ERRORS, DecodeErrorPolicy
from txt2pdf.options.base import CloneFrozenMixin
from txt2pdf.options.pdf import PdfRendererOptions


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration for :func:`txt2pdf.converter.txt_to_pdf`.

    Parameters
    ----------
    decode_errors : {"strict", "replace"}, default "strict"
        How malformed input bytes are handled. ``"strict"`` aborts with a
        DecodeError, ``"replace"`` substitutes U+FFFD and continues.
    remove_stale_output : bool, default True
        Remove an existing output file before writing the new one.
    renderer : PdfRendererOptions
        Page layout and typography settings.

    """

    decode_errors: DecodeErrorPolicy = field(
        default=DEFAULT_DECODE_ERRORS,
        metadata={"help": "Malformed input handling: strict or replace", "choices": ["strict", "replace"]},
    )
    remove_stale_output: bool = field(
        default=True, metadata={"help": "Remove an existing output file before writing"}
    )
    renderer: PdfRendererOptions = field(default_factory=PdfRendererOptions)

    def __post_init__(self) -> None:
        """Validate the decode error policy.

        Raises
        ------
        ValueError
            If ``decode_errors`` is not a supported policy.

        """
        if self.decode_errors not in ("strict", "replace"):
            raise ValueError(f"decode_errors must be 'strict' or 'replace', got {self.decode_errors!r}")
