# topmark:header:start
#
#   project      : El2Readme
#   file         : keys.py
#   file_relpath : src/el2readme/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for El2Readme configuration.

These constants define the external configuration schema as it appears in
``el2readme.toml`` and in ``[tool.el2readme]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by El2Readme configuration."""

    # [convert]
    SECTION_CONVERT: Final[str] = "convert"

    KEY_COMMENT_MARKER: Final[str] = "comment_marker"
    KEY_FILE_EXTENSION: Final[str] = "file_extension"
    KEY_SRC_LANGUAGE: Final[str] = "src_language"
    KEY_OUTPUT_NAME: Final[str] = "output_name"
    KEY_TOOL_URL: Final[str] = "tool_url"

    CONVERT_KEYS: Final[frozenset[str]] = frozenset(
        {
            KEY_COMMENT_MARKER,
            KEY_FILE_EXTENSION,
            KEY_SRC_LANGUAGE,
            KEY_OUTPUT_NAME,
            KEY_TOOL_URL,
        }
    )
