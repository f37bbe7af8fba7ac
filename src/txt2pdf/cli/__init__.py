#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Command-line interface for txt2pdf.

Examples
--------
Basic conversion (writes notes.pdf next to the input):
    $ txt2pdf notes.txt

Specify output file:
    $ txt2pdf notes.txt -o build/notes.pdf

Replace undecodable bytes instead of failing:
    $ txt2pdf legacy.txt --lenient

Use environment variables for defaults:
    $ export TXT2PDF_PAGE_SIZE=a4
    $ txt2pdf notes.txt
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from txt2pdf.cli.config import apply_config_to_parser, apply_env_vars_to_parser, load_config_file, resolve_config_path
from txt2pdf.cli.output import report_error, report_success, should_use_rich_output
from txt2pdf.constants import (
    DEFAULT_CREATOR,
    DEFAULT_PDF_FONT_FAMILY,
    DEFAULT_PDF_FONT_SIZE,
    DEFAULT_PDF_LINE_GAP,
    DEFAULT_PDF_MARGIN,
    DEFAULT_PDF_PAGE_SIZE,
    DEFAULT_TAB_SIZE,
    PDF_FILE_SUFFIX,
)
from txt2pdf.converter import txt_to_pdf
from txt2pdf.exceptions import (
    DecodeError,
    DependencyError,
    FileSystemError,
    MissingInputError,
    RenderError,
    Txt2PdfError,
    ValidationError,
)
from txt2pdf.logging_utils import configure_logging
from txt2pdf.options import ConversionOptions, PdfRendererOptions

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_DEPENDENCY_ERROR = 2
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_INPUT_ERROR = 5
EXIT_DECODE_ERROR = 6
EXIT_RENDERING_ERROR = 7


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (DependencyError, ImportError)):
        return EXIT_DEPENDENCY_ERROR
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError, ValueError)):
        return EXIT_VALIDATION_ERROR
    # MissingInputError is a FileSystemError, so it must be checked first
    if isinstance(exception, MissingInputError):
        return EXIT_INPUT_ERROR
    if isinstance(exception, FileSystemError):
        return EXIT_FILE_ERROR
    if isinstance(exception, DecodeError):
        return EXIT_DECODE_ERROR
    if isinstance(exception, RenderError):
        return EXIT_RENDERING_ERROR
    return EXIT_ERROR


def _get_version() -> str:
    """Get the version of the txt2pdf package."""
    from txt2pdf import __version__

    return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns
    -------
    argparse.ArgumentParser
        Parser for the txt2pdf command

    """
    parser = argparse.ArgumentParser(
        prog="txt2pdf",
        description="Convert a plain-text file to PDF, detecting UTF-8/UTF-16 byte-order marks.",
    )
    parser.add_argument("input", help="Input text file")
    parser.add_argument("-o", "--out", dest="out", help="Output PDF path (default: input path with .pdf suffix)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_get_version()}")

    layout = parser.add_argument_group("layout options")
    layout.add_argument(
        "--page-size", choices=["letter", "a4", "legal"], default=DEFAULT_PDF_PAGE_SIZE, help="Page size"
    )
    layout.add_argument("--font", dest="font", default=DEFAULT_PDF_FONT_FAMILY, help="Body font name")
    layout.add_argument("--font-size", type=int, default=DEFAULT_PDF_FONT_SIZE, help="Body font size in points")
    layout.add_argument("--line-gap", type=float, default=DEFAULT_PDF_LINE_GAP, help="Gap between lines in points")
    layout.add_argument("--margin", type=float, default=DEFAULT_PDF_MARGIN, help="Margin on all four sides in points")
    layout.add_argument("--tab-size", type=int, default=DEFAULT_TAB_SIZE, help="Tab stop width in spaces")
    layout.add_argument("--title", default=None, help="Document title (default: input file name)")
    layout.add_argument("--creator", default=DEFAULT_CREATOR, help="Creator metadata")

    behavior = parser.add_argument_group("conversion options")
    behavior.add_argument(
        "--lenient", action="store_true", help="Replace malformed byte sequences instead of failing"
    )
    behavior.add_argument(
        "--keep-stale", action="store_true", help="Do not remove an existing output file before writing"
    )
    behavior.add_argument("--config", default=None, help="Configuration file (TOML, YAML or JSON)")
    behavior.add_argument("--no-config", action="store_true", help="Ignore configuration files")

    output = parser.add_argument_group("output options")
    output.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Logging level",
    )
    output.add_argument("--log-file", default=None, help="Also write log output to this file")
    output.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")
    output.add_argument("--rich", action="store_true", help="Rich-formatted terminal output")
    output.add_argument("--force-rich", action="store_true", help="Rich output even when stdout is not a TTY")

    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging based on command-line arguments; ``--trace`` wins over ``--log-level``."""
    log_level = logging.DEBUG if parsed_args.trace else getattr(logging, str(parsed_args.log_level).upper())
    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def build_conversion_options(parsed_args: argparse.Namespace) -> ConversionOptions:
    """Build conversion options from parsed arguments.

    Raises
    ------
    ValidationError
        If an option value is out of range

    """
    try:
        renderer = PdfRendererOptions(
            page_size=parsed_args.page_size,
            margin_top=parsed_args.margin,
            margin_bottom=parsed_args.margin,
            margin_left=parsed_args.margin,
            margin_right=parsed_args.margin,
            font_name=parsed_args.font,
            font_size=parsed_args.font_size,
            line_gap=parsed_args.line_gap,
            tab_size=parsed_args.tab_size,
            creator=parsed_args.creator or None,
            title=parsed_args.title or Path(parsed_args.input).stem,
        )
        return ConversionOptions(
            decode_errors="replace" if parsed_args.lenient else "strict",
            remove_stale_output=not parsed_args.keep_stale,
            renderer=renderer,
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(str(e), original_error=e) from e


def default_output_path(input_path: str) -> Path:
    """Output path used when ``--out`` is not given: the input with a .pdf suffix."""
    return Path(input_path).with_suffix(PDF_FILE_SUFFIX)


def check_output_path(input_path: str, output_path: Path) -> None:
    """Refuse an output path that would overwrite the input file.

    Raises
    ------
    ValidationError
        If both paths resolve to the same file

    """
    if Path(input_path).resolve() == output_path.resolve():
        raise ValidationError(
            f"Output path is the input file: {output_path} (use -o to choose another path)",
            parameter_name="out",
            parameter_value=str(output_path),
        )


def parse_arguments(args: list[str] | None = None) -> argparse.Namespace:
    """Parse arguments after applying config file and environment defaults.

    Raises
    ------
    argparse.ArgumentTypeError
        If the configuration file is invalid

    """
    parser = create_parser()

    preliminary, _ = parser.parse_known_args(args)
    config_path = resolve_config_path(preliminary.config, preliminary.no_config)
    if config_path is not None:
        apply_config_to_parser(parser, load_config_file(config_path))

    apply_env_vars_to_parser(parser)
    return parser.parse_args(args)


def main(args: list[str] | None = None) -> int:
    """Execute the txt2pdf command.

    Returns
    -------
    int
        Process exit status

    """
    try:
        parsed_args = parse_arguments(args)
    except argparse.ArgumentTypeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    _setup_logging_level(parsed_args)
    use_rich = should_use_rich_output(parsed_args)

    output_path = Path(parsed_args.out) if parsed_args.out else default_output_path(parsed_args.input)

    try:
        check_output_path(parsed_args.input, output_path)
        options = build_conversion_options(parsed_args)
        result = txt_to_pdf(parsed_args.input, output_path, options)
    except Txt2PdfError as e:
        logger.debug("Conversion failed", exc_info=True)
        report_error(e, use_rich=use_rich)
        return get_exit_code_for_exception(e)

    report_success(result, use_rich=use_rich)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
