"""Unit tests for BOM-based encoding detection and decoding.

Tests cover:
- Detection priority of UTF-8, UTF-16 LE and UTF-16 BE byte-order marks
- The UTF-8 default for unmarked input
- Strict and lenient decoding
"""

import logging

import pytest
from hypothesis import given
from hypothesis import strategies as st

from txt2pdf.constants import BOM_UTF8, BOM_UTF16_BE, BOM_UTF16_LE, EncodingTag
from txt2pdf.exceptions import DecodeError, ValidationError
from txt2pdf.utils.encoding import (
    bom_length,
    count_replacements,
    decode_bytes,
    decode_bytes_counted,
    detect_encoding_from_bom,
)
from txt2pdf.utils.text import normalize_content, normalize_line_endings

_ALL_BOMS = (BOM_UTF8, BOM_UTF16_LE, BOM_UTF16_BE)


@pytest.mark.unit
class TestDetectEncodingFromBom:
    """Tests for detect_encoding_from_bom."""

    @pytest.mark.parametrize(
        "data,expected",
        [
            (b"\xef\xbb\xbfhello", EncodingTag.UTF8),
            (b"\xff\xfeh\x00i\x00", EncodingTag.UTF16_LE),
            (b"\xfe\xff\x00h\x00i", EncodingTag.UTF16_BE),
            (b"hello", EncodingTag.UTF8),
            (b"", EncodingTag.UTF8),
            (b"\xef\xbb", EncodingTag.UTF8),
            (b"\xff", EncodingTag.UTF8),
            (b"\xfe", EncodingTag.UTF8),
            (b"\xff\xfe", EncodingTag.UTF16_LE),
            (b"\xfe\xff", EncodingTag.UTF16_BE),
        ],
    )
    def test_known_prefixes(self, data, expected):
        """Test detection on fixed byte prefixes, including truncated marks."""
        assert detect_encoding_from_bom(data) is expected

    def test_utf32_le_bom_reads_as_utf16_le(self):
        """Test that a UTF-32 LE mark (FF FE 00 00) is reported as UTF-16 LE."""
        assert detect_encoding_from_bom(b"\xff\xfe\x00\x00h\x00\x00\x00") is EncodingTag.UTF16_LE

    @given(st.binary())
    def test_utf8_bom_always_utf8(self, rest):
        """Test that any input starting with EF BB BF is UTF-8."""
        assert detect_encoding_from_bom(BOM_UTF8 + rest) is EncodingTag.UTF8

    @given(st.binary())
    def test_ff_fe_always_utf16_le(self, rest):
        """Test that any input starting with FF FE is UTF-16 LE."""
        assert detect_encoding_from_bom(BOM_UTF16_LE + rest) is EncodingTag.UTF16_LE

    @given(st.binary())
    def test_fe_ff_always_utf16_be(self, rest):
        """Test that any input starting with FE FF is UTF-16 BE."""
        assert detect_encoding_from_bom(BOM_UTF16_BE + rest) is EncodingTag.UTF16_BE

    @given(st.binary().filter(lambda b: not b.startswith(_ALL_BOMS)))
    def test_unmarked_defaults_to_utf8(self, data):
        """Test that input without a recognized mark defaults to UTF-8."""
        assert detect_encoding_from_bom(data) is EncodingTag.UTF8

    @given(st.binary(min_size=3, max_size=3), st.binary(), st.binary())
    def test_only_first_three_bytes_matter(self, prefix, tail_a, tail_b):
        """Test that bytes after the first three never change the result."""
        assert detect_encoding_from_bom(prefix + tail_a) is detect_encoding_from_bom(prefix + tail_b)


@pytest.mark.unit
class TestBomLength:
    """Tests for bom_length."""

    def test_lengths(self):
        """Test the reported mark lengths."""
        assert bom_length(b"\xef\xbb\xbfx", EncodingTag.UTF8) == 3
        assert bom_length(b"\xff\xfex\x00", EncodingTag.UTF16_LE) == 2
        assert bom_length(b"\xfe\xff\x00x", EncodingTag.UTF16_BE) == 2
        assert bom_length(b"plain", EncodingTag.UTF8) == 0


@pytest.mark.unit
class TestDecodeBytes:
    """Tests for decode_bytes."""

    def test_utf8_keeps_bom_character(self):
        """Test that the BOM is decoded to a leading U+FEFF."""
        assert decode_bytes(BOM_UTF8 + b"hi", EncodingTag.UTF8) == "\ufeffhi"

    def test_utf16_le(self):
        """Test UTF-16 LE decoding including a surrogate pair."""
        text = "Línea 😀"
        data = BOM_UTF16_LE + text.encode("utf-16-le")
        assert decode_bytes(data, EncodingTag.UTF16_LE) == "\ufeff" + text

    def test_utf16_be(self):
        """Test UTF-16 BE decoding."""
        data = BOM_UTF16_BE + "añb".encode("utf-16-be")
        assert decode_bytes(data, EncodingTag.UTF16_BE) == "\ufeffañb"

    def test_strict_rejects_malformed_utf8(self):
        """Test that malformed UTF-8 raises DecodeError with details."""
        with pytest.raises(DecodeError) as exc_info:
            decode_bytes(b"abc\xffdef", EncodingTag.UTF8)

        error = exc_info.value
        assert error.encoding == "utf8"
        assert error.position == 3
        assert isinstance(error.original_error, UnicodeDecodeError)
        assert "utf8" in error.message
        assert "byte offset 3" in error.message

    def test_latin1_without_bom_is_rejected(self):
        """Test that unmarked Latin-1 input is not silently accepted."""
        with pytest.raises(DecodeError):
            decode_bytes("Montréal".encode("latin-1"), EncodingTag.UTF8)

    def test_odd_length_utf16_is_malformed(self):
        """Test that a truncated UTF-16 code unit fails strict decoding."""
        with pytest.raises(DecodeError):
            decode_bytes(BOM_UTF16_LE + b"h\x00i", EncodingTag.UTF16_LE)

    def test_replace_substitutes_and_warns(self, caplog):
        """Test lenient decoding substitutes U+FFFD and logs the count."""
        with caplog.at_level(logging.WARNING, logger="txt2pdf.utils.encoding"):
            text = decode_bytes(b"a\xffb\xfec", EncodingTag.UTF8, errors="replace")

        assert text == "a\ufffdb\ufffdc"
        assert "Replaced 2 malformed sequence(s)" in caplog.text

    def test_replace_on_valid_input_does_not_warn(self, caplog):
        """Test that lenient decoding of valid input is silent."""
        with caplog.at_level(logging.WARNING, logger="txt2pdf.utils.encoding"):
            assert decode_bytes("ok \ufffd".encode("utf-8"), EncodingTag.UTF8, errors="replace") == "ok \ufffd"
        assert caplog.text == ""

    def test_counted_reports_replacements(self):
        """Test that the counted variant returns the number of replaced sequences."""
        text, replaced = decode_bytes_counted(b"ok\n\xff\xff bad", EncodingTag.UTF8, errors="replace")
        assert text == "ok\n\ufffd\ufffd bad"
        assert replaced == 2
        assert decode_bytes_counted(b"fine", EncodingTag.UTF8) == ("fine", 0)

    def test_unknown_policy_rejected(self):
        """Test that an unsupported error policy is a ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            decode_bytes(b"x", EncodingTag.UTF8, errors="ignore")
        assert exc_info.value.parameter_name == "decode_errors"


@pytest.mark.unit
class TestCountReplacements:
    """Tests for count_replacements."""

    def test_genuine_replacement_characters_not_counted(self):
        """Test that U+FFFD present in valid input is not counted."""
        data = "x\ufffd".encode("utf-8") + b"\xff"
        text = data.decode("utf-8", errors="replace")
        assert count_replacements(data, EncodingTag.UTF8, text) == 1


@pytest.mark.unit
@pytest.mark.fuzzing
class TestDetectDecodeNormalizeRoundTrip:
    """Round trips through detection, decoding and normalization."""

    @given(st.text())
    def test_utf16_le_with_bom(self, text):
        """Test that BOM + UTF-16 LE bytes reproduce the text after line-ending unification."""
        data = BOM_UTF16_LE + text.encode("utf-16-le")

        encoding = detect_encoding_from_bom(data)
        result = normalize_content(decode_bytes(data, encoding))

        assert encoding is EncodingTag.UTF16_LE
        assert result == normalize_line_endings(text)

    @given(st.text())
    def test_utf16_be_with_bom(self, text):
        """Test the same round trip for big-endian input."""
        data = BOM_UTF16_BE + text.encode("utf-16-be")
        result = normalize_content(decode_bytes(data, detect_encoding_from_bom(data)))
        assert result == normalize_line_endings(text)

    def test_known_text_exact(self):
        """Test an exact round trip of text that needs no line-ending changes."""
        text = "Primera línea\nSegunda línea\n"
        data = BOM_UTF16_LE + text.encode("utf-16-le")
        assert normalize_content(decode_bytes(data, detect_encoding_from_bom(data))) == text
