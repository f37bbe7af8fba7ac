"""Pytest configuration and shared fixtures for the txt2pdf test suite."""

import logging
import os
from pathlib import Path
from typing import Generator

import pytest

try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=50)
    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    pass


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "e2e: End-to-end tests - full pipeline tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "pdf: Tests that generate PDF output")
    config.addinivalue_line("markers", "fuzzing: Property-based tests")


@pytest.fixture
def sample_lines() -> list[str]:
    """Lines with accents, indentation and markup-like characters."""
    return [
        "Línea uno",
        "Línea dos",
        "",
        "    indented <not a tag> & more",
        "\ttabbed",
    ]


@pytest.fixture
def write_input(tmp_path: Path):
    """Return a helper that writes bytes to a file under tmp_path."""

    def _write(data: bytes, name: str = "input.txt") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def restore_root_logger() -> Generator[None, None, None]:
    """Restore root logger handlers and level changed by configure_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in root.handlers:
            if handler not in handlers:
                handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
