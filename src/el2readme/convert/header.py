# topmark:header:start
#
#   project      : El2Readme
#   file         : header.py
#   file_relpath : src/el2readme/convert/header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate the leading commentary block of a source file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import DEFAULT_COMMENT_MARKER

if TYPE_CHECKING:
    from collections.abc import Sequence

    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)


def is_header_line(line: str, marker: str = DEFAULT_COMMENT_MARKER) -> bool:
    """Return True if ``line`` is blank or starts with the comment ``marker``."""
    return not line.strip() or line.startswith(marker)


def find_header_end(lines: Sequence[str], marker: str = DEFAULT_COMMENT_MARKER) -> int:
    """Return the index of the first line that is neither blank nor a comment.

    Returns ``len(lines)`` when every line qualifies.
    """
    for index, line in enumerate(lines):
        if not is_header_line(line, marker):
            return index
    return len(lines)


def extract_header(lines: Sequence[str], marker: str = DEFAULT_COMMENT_MARKER) -> list[str]:
    """Return the header: the longest prefix of blank or ``marker`` lines.

    Scanning stops at the first disqualifying line; later comment blocks are
    never considered. When line 1 already disqualifies the header is empty.

    Args:
        lines (Sequence[str]): Document lines without line terminators.
        marker (str): Line comment marker (``;;`` for Emacs Lisp).

    Returns:
        list[str]: A copy of the header lines.
    """
    end: int = find_header_end(lines, marker)
    logger.debug("Header spans %d of %d line(s)", end, len(lines))
    return list(lines[:end])
