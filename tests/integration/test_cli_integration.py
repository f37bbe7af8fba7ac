"""Integration tests for the txt2pdf command."""

import os

import pytest
from utils import REPORTLAB_AVAILABLE

from txt2pdf.cli import (
    EXIT_DECODE_ERROR,
    EXIT_INPUT_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    main,
)

pytestmark = [
    pytest.mark.skipif(not REPORTLAB_AVAILABLE, reason="reportlab not installed"),
    pytest.mark.usefixtures("restore_root_logger"),
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove TXT2PDF_* variables from the environment."""
    for key in list(os.environ):
        if key.startswith("TXT2PDF_"):
            monkeypatch.delenv(key)


@pytest.mark.integration
@pytest.mark.cli
class TestCliSuccess:
    """Tests for successful command runs."""

    def test_explicit_output(self, write_input, tmp_path, capsys):
        """Test conversion with -o."""
        source = write_input("Línea uno\r\nLínea dos".encode("utf-8"))
        output = tmp_path / "out" / "doc.pdf"

        exit_code = main([str(source), "-o", str(output), "--no-config"])

        assert exit_code == EXIT_SUCCESS
        assert output.read_bytes().startswith(b"%PDF")
        captured = capsys.readouterr()
        assert f"PDF written to: {output}" in captured.out
        assert "Encoding detected: utf8" in captured.out

    def test_default_output_path(self, write_input, tmp_path, capsys):
        """Test that the output defaults to the input with a .pdf suffix."""
        source = write_input(b"\xff\xfe" + "hi".encode("utf-16-le"), "notes.txt")

        exit_code = main([str(source), "--no-config"])

        assert exit_code == EXIT_SUCCESS
        assert (tmp_path / "notes.pdf").is_file()
        assert "Encoding detected: utf16-le" in capsys.readouterr().out

    def test_lenient_flag(self, write_input, tmp_path):
        """Test that --lenient accepts malformed input."""
        source = write_input(b"bad \xc3\x28 byte")
        output = tmp_path / "out.pdf"
        assert main([str(source), "-o", str(output), "--lenient", "--no-config"]) == EXIT_SUCCESS
        assert output.is_file()

    def test_config_file(self, write_input, tmp_path):
        """Test that a config file supplies option values."""
        source = write_input(b"bad \xc3\x28 byte")
        config = tmp_path / "conf.yaml"
        config.write_text("lenient: true\npage_size: a4\n", encoding="utf-8")
        output = tmp_path / "out.pdf"

        assert main([str(source), "-o", str(output), "--config", str(config)]) == EXIT_SUCCESS
        assert output.is_file()

    def test_env_var(self, write_input, tmp_path, monkeypatch):
        """Test that TXT2PDF_* variables supply option values."""
        monkeypatch.setenv("TXT2PDF_LENIENT", "true")
        source = write_input(b"bad \xc3\x28 byte")
        output = tmp_path / "out.pdf"
        assert main([str(source), "-o", str(output), "--no-config"]) == EXIT_SUCCESS

    def test_rich_output(self, write_input, tmp_path, capsys):
        """Test forced rich output."""
        source = write_input(b"hello")
        output = tmp_path / "out.pdf"

        exit_code = main([str(source), "-o", str(output), "--no-config", "--rich", "--force-rich"])

        assert exit_code == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "PDF written to:" in out
        assert "utf8" in out

    def test_log_file(self, write_input, tmp_path):
        """Test that --log-file receives log records."""
        source = write_input(b"hello")
        log_file = tmp_path / "run.log"

        args = [str(source), "-o", str(tmp_path / "out.pdf"), "--no-config"]
        exit_code = main(args + ["--log-level", "INFO", "--log-file", str(log_file)])

        assert exit_code == EXIT_SUCCESS
        assert "Converted" in log_file.read_text(encoding="utf-8")


@pytest.mark.integration
@pytest.mark.cli
class TestCliFailures:
    """Tests for exit codes on failure."""

    def test_missing_input(self, tmp_path, capsys):
        """Test the exit code for a missing input file."""
        output = tmp_path / "sub" / "out.pdf"

        exit_code = main([str(tmp_path / "nope.txt"), "-o", str(output), "--no-config"])

        assert exit_code == EXIT_INPUT_ERROR
        assert "Error: Input file not found" in capsys.readouterr().err
        assert not output.parent.exists()

    def test_decode_error(self, write_input, tmp_path, capsys):
        """Test the exit code for malformed input."""
        source = write_input(b"bad \xc3\x28 byte")
        output = tmp_path / "out.pdf"

        exit_code = main([str(source), "-o", str(output), "--no-config"])

        assert exit_code == EXIT_DECODE_ERROR
        assert "Input is not valid utf8 (byte offset 4)" in capsys.readouterr().err
        assert not output.exists()

    def test_invalid_option_value(self, write_input, tmp_path, capsys):
        """Test the exit code for an out-of-range option."""
        source = write_input(b"hello")

        exit_code = main([str(source), "-o", str(tmp_path / "out.pdf"), "--no-config", "--font-size", "0"])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert "font_size" in capsys.readouterr().err

    def test_unknown_config_key(self, write_input, tmp_path, capsys):
        """Test the exit code for an invalid config file."""
        config = tmp_path / "conf.toml"
        config.write_text('colour = "red"\n', encoding="utf-8")

        exit_code = main([str(write_input(b"hello")), "--config", str(config)])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert "Unknown configuration key" in capsys.readouterr().err

    def test_discovered_config_with_bad_type(self, write_input, tmp_path, monkeypatch, capsys):
        """Test that a mistyped value in a discovered config file is a validation error."""
        source = write_input(b"hello")
        (tmp_path / ".txt2pdf.toml").write_text('font_size = "big"\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        exit_code = main([str(source)])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert "font_size" in capsys.readouterr().err
        assert not (tmp_path / "input.pdf").exists()

    def test_config_string_false_keeps_strict_decoding(self, write_input, tmp_path, monkeypatch):
        """Test that lenient: "false" in YAML does not enable lenient decoding."""
        source = write_input(b"\xff")
        (tmp_path / ".txt2pdf.yaml").write_text('lenient: "false"\n', encoding="utf-8")
        monkeypatch.chdir(tmp_path)

        assert main([str(source)]) == EXIT_DECODE_ERROR
        assert not (tmp_path / "input.pdf").exists()

    def test_pdf_input_not_overwritten(self, write_input, tmp_path, capsys):
        """Test that the default output path never replaces the input file."""
        source = write_input(b"hello", "notes.pdf")

        exit_code = main([str(source), "--no-config"])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert source.read_bytes() == b"hello"
        assert "Output path is the input file" in capsys.readouterr().err

    def test_explicit_output_equal_to_input(self, write_input, capsys):
        """Test that -o pointing at the input is refused."""
        source = write_input(b"hello")

        exit_code = main([str(source), "-o", str(source), "--no-config"])

        assert exit_code == EXIT_VALIDATION_ERROR
        assert source.read_bytes() == b"hello"

    def test_bad_choice_exits(self, write_input):
        """Test that argparse rejects unknown page sizes."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(write_input(b"hello")), "--page-size", "tabloid", "--no-config"])
        assert exc_info.value.code == 2
