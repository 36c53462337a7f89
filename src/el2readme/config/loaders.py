# topmark:header:start
#
#   project      : El2Readme
#   file         : loaders.py
#   file_relpath : src/el2readme/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading El2Readme configuration from
on-disk TOML files (``el2readme.toml`` / ``pyproject.toml``) and exposes the
runtime defaults as a plain dict.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from el2readme.config.keys import Toml
from el2readme.config.logging import get_logger
from el2readme.constants import (
    DEFAULT_COMMENT_MARKER,
    DEFAULT_FILE_EXTENSION,
    DEFAULT_OUTPUT_NAME,
    DEFAULT_SRC_LANGUAGE,
    DEFAULT_TOOL_URL,
)

if TYPE_CHECKING:
    from pathlib import Path

    from el2readme.config.logging import El2ReadmeLogger

TomlTable = dict[str, Any]

logger: El2ReadmeLogger = get_logger(__name__)


def load_defaults_dict() -> TomlTable:
    """Return El2Readme's **runtime defaults** as a Python dict.

    This function performs no I/O. The returned value is a new dict so callers
    can mutate it safely.
    """
    return {
        Toml.SECTION_CONVERT: {
            Toml.KEY_COMMENT_MARKER: DEFAULT_COMMENT_MARKER,
            Toml.KEY_FILE_EXTENSION: DEFAULT_FILE_EXTENSION,
            Toml.KEY_SRC_LANGUAGE: DEFAULT_SRC_LANGUAGE,
            Toml.KEY_OUTPUT_NAME: DEFAULT_OUTPUT_NAME,
            Toml.KEY_TOOL_URL: DEFAULT_TOOL_URL,
        },
    }


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``el2readme.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Extract a sub-table from a TOML table, or an empty dict if absent or malformed."""
    value: Any = table.get(key)
    if isinstance(value, dict):
        return cast("TomlTable", value)
    if value is not None:
        logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.

    Returns:
        str | None: The string value, or ``None`` when missing or not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    logger.warning("Expected a string for '%s', got %r; ignoring", key, value)
    return None
