#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the txt2pdf library.

This module defines the exception classes raised by the conversion pipeline.
Every fatal condition is reported through one of these classes so callers can
catch ``Txt2PdfError`` and get a single, human-readable failure.

Exception Hierarchy
-------------------
- Txt2PdfError (base exception)

  - ValidationError (option/configuration validation)

  - FileSystemError (file access and directory handling)
    - MissingInputError (input file doesn't exist)
    - FileAccessError (permissions, locked files)

  - DecodeError (bytes invalid under the detected encoding)

  - RenderError (PDF generation failures)
    - OutputWriteError (file write failures)

  - DependencyError (missing/incompatible packages)

"""

from __future__ import annotations

from typing import Any


class Txt2PdfError(Exception):
    """Base exception class for all txt2pdf-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Txt2PdfError):
    """Exception raised for invalid options or configuration values.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class FileSystemError(Txt2PdfError):
    """Base exception for file access and directory errors.

    Raised directly when the output directory cannot be created.

    Parameters
    ----------
    message : str
        Description of the file system error
    file_path : str, optional
        Path to the problematic file or directory
    original_error : Exception, optional
        The original exception that caused this error

    Attributes
    ----------
    file_path : str or None
        Path that caused the error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file system error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class MissingInputError(FileSystemError):
    """Exception raised when the input text file does not exist.

    Parameters
    ----------
    file_path : str
        Path to the file that was not found
    message : str, optional
        Custom error message. If not provided, uses default message

    """

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the missing input error."""
        if message is None:
            message = f"Input file not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileSystemError):
    """Exception raised when a file exists but cannot be read or removed."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class DecodeError(Txt2PdfError):
    """Exception raised when bytes are malformed under the detected encoding.

    Parameters
    ----------
    encoding : str
        The encoding tag the bytes were decoded with
    position : int, optional
        Byte offset of the first malformed sequence
    reason : str, optional
        Codec-provided reason for the failure
    message : str, optional
        Custom error message
    original_error : Exception, optional
        The underlying ``UnicodeDecodeError``

    """

    def __init__(
        self,
        encoding: str,
        position: int | None = None,
        reason: str | None = None,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the decode error."""
        if message is None:
            message = f"Input is not valid {encoding}"
            if position is not None:
                message += f" (byte offset {position})"
            if reason:
                message += f": {reason}"
        super().__init__(message, original_error=original_error)
        self.encoding = encoding
        self.position = position
        self.reason = reason


class RenderError(Txt2PdfError):
    """Exception raised when PDF generation fails.

    Parameters
    ----------
    message : str
        Description of the rendering failure
    rendering_stage : str, optional
        The stage of rendering where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the rendering failure

    """

    def __init__(self, message: str, rendering_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the rendering error."""
        super().__init__(message, original_error)
        self.rendering_stage = rendering_stage


class OutputWriteError(RenderError):
    """Exception raised when the output stream reports an error."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output file: {file_path}"
            if original_error is not None:
                message += f" ({original_error})"
        super().__init__(message, rendering_stage="file_write", original_error=original_error)
        self.file_path = file_path


class DependencyError(Txt2PdfError):
    """Exception raised when required dependencies are not available.

    Parameters
    ----------
    converter_name : str
        Name of the component requiring dependencies
    missing_packages : list[tuple[str, str]]
        List of (package_name, version_spec) tuples for missing packages
    version_mismatches : list[tuple[str, str, str]], optional
        List of (package_name, required_version, installed_version) tuples
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_import_error : ImportError, optional
        The ImportError raised while probing the packages

    """

    def __init__(
        self,
        converter_name: str,
        missing_packages: list[tuple[str, str]],
        version_mismatches: list[tuple[str, str, str]] | None = None,
        message: str | None = None,
        original_import_error: ImportError | None = None,
    ):
        """Initialize the dependency error with package details."""
        version_mismatches = version_mismatches or []
        if message is None:
            message_parts = []
            if missing_packages:
                pkg_list = ", ".join(f"'{name}{spec}'" for name, spec in missing_packages)
                message_parts.append(f"{converter_name.upper()} rendering requires: {pkg_list}")
            if version_mismatches:
                mismatch_str = ", ".join(
                    f"'{name}' (requires {required}, but {installed} is installed)"
                    for name, required, installed in version_mismatches
                )
                message_parts.append(f"{converter_name.upper()} rendering has version mismatches: {mismatch_str}")

            all_packages = missing_packages + [(name, req) for name, req, _ in version_mismatches]
            packages_str = " ".join(f'"{name}{spec}"' if spec else name for name, spec in all_packages)
            message = "\n".join(message_parts) + f"\nInstall with: pip install --upgrade {packages_str}"

        super().__init__(message, original_error=original_import_error)
        self.converter_name = converter_name
        self.missing_packages = missing_packages
        self.version_mismatches = version_mismatches
