# topmark:header:start
#
#   project      : El2Readme
#   file         : __init__.py
#   file_relpath : src/el2readme/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for El2Readme.

Supports runtime defaults, fallback resolution from ``el2readme.toml`` or
``pyproject.toml`` and programmatic overrides.
"""

from __future__ import annotations

from el2readme.config.model import Config, MutableConfig

__all__: list[str] = [
    "Config",
    "MutableConfig",
]
