#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/txt2pdf/utils/encoding.py
"""Character encoding detection and decoding utilities.

Detection is limited to byte-order mark (BOM) sniffing: the first two or
three bytes of the input decide between UTF-8, UTF-16 LE and UTF-16 BE, and
anything without a recognized mark is treated as UTF-8. No statistical
detection is attempted, so unmarked input in another encoding will either
fail to decode (strict mode) or decode with replacement characters.
"""

from __future__ import annotations

import logging

from txt2pdf.constants import (
    BOM_SIGNATURES,
    DEFAULT_DECODE_ERRORS,
    DEFAULT_ENCODING,
    REPLACEMENT_CHAR,
    DecodeErrorPolicy,
    EncodingTag,
)
from txt2pdf.exceptions import DecodeError, ValidationError

logger = logging.getLogger(__name__)


def detect_encoding_from_bom(data: bytes) -> EncodingTag:
    """Detect the encoding of ``data`` from its byte-order mark.

    Only the first three bytes are inspected, in this priority order:

    - ``EF BB BF`` -> UTF-8
    - ``FF FE`` -> UTF-16 LE
    - ``FE FF`` -> UTF-16 BE
    - anything else -> UTF-8

    Parameters
    ----------
    data : bytes
        Raw input bytes

    Returns
    -------
    EncodingTag
        Detected encoding tag

    Examples
    --------
    >>> detect_encoding_from_bom(b"\\xff\\xfeh\\x00i\\x00")
    <EncodingTag.UTF16_LE: 'utf16-le'>
    >>> detect_encoding_from_bom(b"plain ascii")
    <EncodingTag.UTF8: 'utf8'>

    """
    prefix = data[:3]
    for signature, tag in BOM_SIGNATURES:
        if prefix.startswith(signature):
            logger.debug(f"BOM detected: {signature.hex(' ')} -> {tag.value}")
            return tag

    logger.debug(f"No BOM found, defaulting to {DEFAULT_ENCODING.value}")
    return DEFAULT_ENCODING


def bom_length(data: bytes, encoding: EncodingTag) -> int:
    """Return the length of the BOM at the start of ``data`` for ``encoding``, or 0."""
    for signature, tag in BOM_SIGNATURES:
        if tag is encoding and data[:3].startswith(signature):
            return len(signature)
    return 0


def decode_bytes(
    data: bytes,
    encoding: EncodingTag,
    errors: DecodeErrorPolicy = DEFAULT_DECODE_ERRORS,
) -> str:
    """Decode ``data`` under the codec named by ``encoding``; see :func:`decode_bytes_counted`."""
    text, _ = decode_bytes_counted(data, encoding, errors)
    return text


def decode_bytes_counted(
    data: bytes,
    encoding: EncodingTag,
    errors: DecodeErrorPolicy = DEFAULT_DECODE_ERRORS,
) -> tuple[str, int]:
    """Decode ``data`` and report how many malformed sequences were replaced.

    The BOM, if any, is decoded along with the rest of the bytes and shows up
    as a leading U+FEFF in the result; stripping it is the normalizer's job.

    Parameters
    ----------
    data : bytes
        Raw input bytes
    encoding : EncodingTag
        Encoding reported by :func:`detect_encoding_from_bom`
    errors : {"strict", "replace"}, default "strict"
        ``"strict"`` raises on malformed input, ``"replace"`` substitutes
        U+FFFD for each malformed sequence and logs a warning

    Returns
    -------
    tuple[str, int]
        Decoded text and the number of replaced sequences (always 0 when
        ``errors`` is ``"strict"``)

    Raises
    ------
    DecodeError
        If ``errors`` is ``"strict"`` and the bytes are malformed
    ValidationError
        If ``errors`` is not a supported policy

    """
    if errors not in ("strict", "replace"):
        raise ValidationError(
            f"Unsupported decode error policy: {errors!r} (expected 'strict' or 'replace')",
            parameter_name="decode_errors",
            parameter_value=errors,
        )

    try:
        text = data.decode(encoding.codec, errors=errors)
    except UnicodeDecodeError as e:
        raise DecodeError(
            encoding=encoding.value,
            position=e.start,
            reason=e.reason,
            original_error=e,
        ) from e

    replaced = 0
    if errors == "replace":
        replaced = count_replacements(data, encoding, text)
        if replaced:
            logger.warning(f"Replaced {replaced} malformed sequence(s) while decoding as {encoding.value}")

    return text, replaced


def count_replacements(data: bytes, encoding: EncodingTag, text: str) -> int:
    """Count replacement characters introduced by lenient decoding.

    Replacement characters that were genuinely present in the input are not
    counted.
    """
    if REPLACEMENT_CHAR not in text:
        return 0
    genuine = data.decode(encoding.codec, errors="ignore").count(REPLACEMENT_CHAR)
    return text.count(REPLACEMENT_CHAR) - genuine
