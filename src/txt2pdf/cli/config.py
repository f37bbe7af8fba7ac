#  Copyright (c) 2025 Tom Villani, Ph.D.

"""Configuration file discovery, loading and environment overrides for the CLI.

Settings are resolved in priority order: command-line flags, then
``TXT2PDF_*`` environment variables, then a configuration file, then the
built-in defaults. Configuration files are TOML, YAML or JSON; a
``pyproject.toml`` contributes its ``[tool.txt2pdf]`` table.
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib  # type: ignore[import-not-found,unused-ignore]

import yaml

logger = logging.getLogger(__name__)

ENV_PREFIX = "TXT2PDF_"
CONFIG_ENV_VAR = "TXT2PDF_CONFIG"
DEDICATED_CONFIG_FILENAMES = [".txt2pdf.toml", ".txt2pdf.yaml", ".txt2pdf.yml", ".txt2pdf.json"]

_TRUE_VALUES = ("true", "1", "yes", "on")
_FALSE_VALUES = ("false", "0", "no", "off")


def _load_pyproject_section(pyproject_path: Path) -> Dict[str, Any]:
    """Load the ``[tool.txt2pdf]`` table from a pyproject.toml, or an empty dict."""
    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    config = data.get("tool", {}).get("txt2pdf", {})
    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"[tool.txt2pdf] section in {pyproject_path} must be a table, got {type(config).__name__}"
        )
    return config


def find_config_in_parents(start_dir: Optional[Path] = None) -> Optional[Path]:
    """Find a configuration file by walking up from ``start_dir`` to the filesystem root.

    In each directory the dedicated ``.txt2pdf.*`` files are checked first,
    then ``pyproject.toml`` (only if it has a ``[tool.txt2pdf]`` table).

    Parameters
    ----------
    start_dir : Path, optional
        Starting directory for search, defaults to current working directory

    Returns
    -------
    Path or None
        Path to first config file found, or None if not found

    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for filename in DEDICATED_CONFIG_FILENAMES:
            config_path = current / filename
            if config_path.is_file():
                return config_path

        pyproject_path = current / "pyproject.toml"
        if pyproject_path.is_file():
            try:
                if _load_pyproject_section(pyproject_path):
                    return pyproject_path
            except (OSError, tomllib.TOMLDecodeError, argparse.ArgumentTypeError) as e:
                logger.debug(f"Skipping unreadable {pyproject_path}: {e}")

        parent = current.parent
        if parent == current:
            return None
        current = parent


def load_config_file(config_path: Path | str) -> Dict[str, Any]:
    """Load configuration from a JSON, TOML, YAML, or pyproject.toml file.

    Parameters
    ----------
    config_path : Path or str
        Path to the configuration file

    Returns
    -------
    dict
        Configuration dictionary loaded from file

    Raises
    ------
    argparse.ArgumentTypeError
        If the file cannot be read, parsed, or has invalid format

    """
    config_path = Path(config_path)

    if not config_path.is_file():
        raise argparse.ArgumentTypeError(f"Configuration file does not exist: {config_path}")

    ext = config_path.suffix.lower()
    try:
        if config_path.name.lower() == "pyproject.toml":
            config = _load_pyproject_section(config_path)
        elif ext == ".toml":
            with open(config_path, "rb") as f:
                config = tomllib.load(f)
        elif ext in (".yaml", ".yml"):
            with open(config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f) or {}
        elif ext == ".json":
            with open(config_path, encoding="utf-8") as f:
                config = json.load(f)
        else:
            raise argparse.ArgumentTypeError(f"Unsupported config file format: {ext}. Use .json, .toml, or .yaml")
    except argparse.ArgumentTypeError:
        raise
    except (OSError, ValueError, yaml.YAMLError) as e:
        # tomllib.TOMLDecodeError and json.JSONDecodeError are ValueErrors
        raise argparse.ArgumentTypeError(f"Error reading config file {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise argparse.ArgumentTypeError(
            f"Config file {config_path} must contain a mapping at root level, got {type(config).__name__}"
        )
    return config


def resolve_config_path(explicit: Optional[str], no_config: bool) -> Optional[Path]:
    """Pick the configuration file to use, if any.

    ``--no-config`` wins, then an explicit ``--config``, then
    ``TXT2PDF_CONFIG``, then discovery from the current directory.
    """
    if no_config:
        return None
    if explicit:
        return Path(explicit)
    env_config = os.environ.get(CONFIG_ENV_VAR)
    if env_config:
        return Path(env_config)
    return find_config_in_parents()


def _coerce_config_value(action: argparse.Action, key: str, value: Any) -> Any:
    """Convert a configuration value to what the option expects.

    Flags accept booleans or the same words as environment variables; typed
    options accept numbers or numeric strings; choices must match exactly.

    Raises
    ------
    argparse.ArgumentTypeError
        If the value cannot be used for the option
    """
    if isinstance(action, argparse._StoreTrueAction):
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in _TRUE_VALUES + _FALSE_VALUES:
            return value.lower() in _TRUE_VALUES
        raise argparse.ArgumentTypeError(f"Invalid value for {key!r}: expected true or false, got {value!r}")

    if value is None and action.default is None:
        return None
    if isinstance(value, (bool, list, dict)) or value is None:
        raise argparse.ArgumentTypeError(f"Invalid value for {key!r}: {value!r}")

    if action.type in (int, float):
        try:
            converted = action.type(value)
        except (TypeError, ValueError) as e:
            raise argparse.ArgumentTypeError(
                f"Invalid value for {key!r}: expected {action.type.__name__}, got {value!r}"
            ) from e
        if action.type is int and isinstance(value, float) and not value.is_integer():
            raise argparse.ArgumentTypeError(f"Invalid value for {key!r}: expected int, got {value!r}")
        value = converted
    else:
        value = str(value)

    if action.choices and value not in action.choices:
        raise argparse.ArgumentTypeError(
            f"Invalid value for {key!r}: {value!r} (choose from {', '.join(map(str, action.choices))})"
        )
    return value


def apply_config_to_parser(parser: argparse.ArgumentParser, config: Dict[str, Any]) -> None:
    """Use configuration values as parser defaults.

    Keys may use dashes or underscores. Unknown keys and values of the wrong
    type are rejected.

    Raises
    ------
    argparse.ArgumentTypeError
        If a key does not correspond to an option or its value is invalid
    """
    known = {action.dest: action for action in parser._actions if action.dest != "help"}
    defaults: Dict[str, Any] = {}
    for key, value in config.items():
        dest = str(key).replace("-", "_")
        if dest not in known:
            raise argparse.ArgumentTypeError(f"Unknown configuration key: {key!r}")
        defaults[dest] = _coerce_config_value(known[dest], key, value)
    parser.set_defaults(**defaults)


def apply_env_vars_to_parser(parser: argparse.ArgumentParser) -> None:
    """Apply ``TXT2PDF_<DEST>`` environment variables as parser defaults.

    Command-line arguments still take precedence.
    """
    for action in parser._actions:
        if not action.dest or action.dest in ("help", "version", "input"):
            continue

        env_key = f"{ENV_PREFIX}{action.dest.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        if isinstance(action, argparse._StoreTrueAction):
            action.default = env_value.lower() in _TRUE_VALUES
        elif action.choices and env_value not in action.choices:
            logger.warning(f"Invalid choice for {env_key}: {env_value}. Choices: {list(action.choices)}")
        elif action.type in (int, float):
            try:
                action.default = action.type(env_value)
            except ValueError:
                logger.warning(f"Invalid {action.type.__name__} value for {env_key}: {env_value}")
        else:
            action.default = env_value
