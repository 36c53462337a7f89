# topmark:header:start
#
#   project      : El2Readme
#   file         : classifier.py
#   file_relpath : src/el2readme/convert/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assign a structural role to each header line.

Classification is an ordered chain of guarded checks; the first match wins.
The order matters: a heading such as ``;;; Commentary:`` would also satisfy the
list-item pattern, and a four-space code line also starts with one space.

Order (applied to the line with its comment marker removed):

1. first line only: drop the ``-*- ... -*-`` mode cookie,
2. extra marker character + space: code sentinel, title or section heading,
3. ``Label:``: list item,
4. four leading spaces: start of a code block,
5. exactly one leading space: indented plain text,
6. the bare doubled marker: divider,
7. anything else: blank or plain text.
"""

from __future__ import annotations

import re
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import DEFAULT_COMMENT_MARKER, DEFAULT_FILE_EXTENSION

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)

CODE_INDENT: str = " " * 4

_MODE_COOKIE_RE: re.Pattern[str] = re.compile(r"\s*-\*-.*?-\*-")
_CODE_SENTINEL_RE: re.Pattern[str] = re.compile(r" ?Code:?\s*")
_LIST_ITEM_RE: re.Pattern[str] = re.compile(r" ?[A-Za-z0-9-]+:")
_SINGLE_SPACE_RE: re.Pattern[str] = re.compile(r" (?! )")


class LineCategory(Enum):
    """Structural role of a header line."""

    DISCLAIMER = "disclaimer"
    FIRST_LINE_TITLE = "title"
    SECTION_HEADING = "heading"
    CODE_SENTINEL_HEADING = "code sentinel"
    DIVIDER = "divider"
    LIST_ITEM = "list item"
    CODE_BLOCK_START = "code block start"
    CODE_BLOCK_BODY = "code block body"
    INDENTED_PLAIN = "indented plain"
    PLAIN_TEXT = "plain text"
    BLANK = "blank"


@lru_cache(maxsize=8)
def _heading_re(marker: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(marker[:1])}+ (?P<content>.*\S.*)")


@lru_cache(maxsize=8)
def _extension_re(extension: str) -> re.Pattern[str]:
    return re.compile(rf"{re.escape(extension)}\b")


def strip_comment_marker(line: str, marker: str = DEFAULT_COMMENT_MARKER) -> str:
    """Return ``line`` without its leading comment ``marker`` (if present)."""
    return line[len(marker) :] if line.startswith(marker) else line


def strip_mode_cookie(text: str) -> str:
    """Remove a ``-*- ... -*-`` file-local mode cookie and the whitespace before it."""
    return _MODE_COOKIE_RE.sub("", text, count=1)


def prepare_line(line: str, index: int, marker: str = DEFAULT_COMMENT_MARKER) -> str:
    """Return the classifiable text of header line ``index``.

    The comment marker is removed; on the first line the mode cookie goes too.
    """
    text: str = strip_comment_marker(line, marker)
    if index == 0:
        text = strip_mode_cookie(text)
    return text


def heading_content(text: str, marker: str = DEFAULT_COMMENT_MARKER) -> str | None:
    """Return the content of a heading line (extra marker + space), else None."""
    match: re.Match[str] | None = _heading_re(marker).fullmatch(text)
    return match.group("content") if match else None


def has_extension(text: str, extension: str = DEFAULT_FILE_EXTENSION) -> bool:
    """Return True if ``text`` mentions a file name ending in ``extension``."""
    return _extension_re(extension).search(text) is not None


def remove_extension(text: str, extension: str = DEFAULT_FILE_EXTENSION) -> str:
    """Remove every ``extension`` token from ``text``."""
    return _extension_re(extension).sub("", text)


def is_code_line(text: str) -> bool:
    """Return True if ``text`` is indented by (at least) four spaces and not blank."""
    return text.startswith(CODE_INDENT) and bool(text.strip())


def classify_line(
    text: str,
    *,
    marker: str = DEFAULT_COMMENT_MARKER,
    extension: str = DEFAULT_FILE_EXTENSION,
    is_disclaimer: bool = False,
) -> LineCategory:
    """Return the category of a prepared header line.

    Args:
        text (str): Line text as returned by `prepare_line`.
        marker (str): Line comment marker.
        extension (str): File extension token that identifies the title line.
        is_disclaimer (bool): True for the collapsed GPL attribution line.

    Returns:
        LineCategory: The first category whose check matches.
    """
    if is_disclaimer:
        return LineCategory.DISCLAIMER

    content: str | None = heading_content(text, marker)
    if content is not None:
        if _CODE_SENTINEL_RE.fullmatch(content):
            return LineCategory.CODE_SENTINEL_HEADING
        if has_extension(content, extension):
            return LineCategory.FIRST_LINE_TITLE
        return LineCategory.SECTION_HEADING

    if _LIST_ITEM_RE.match(text):
        return LineCategory.LIST_ITEM
    if is_code_line(text):
        return LineCategory.CODE_BLOCK_START
    if _SINGLE_SPACE_RE.match(text):
        return LineCategory.INDENTED_PLAIN
    if text.rstrip() == marker:
        return LineCategory.DIVIDER
    if not text.strip():
        return LineCategory.BLANK
    return LineCategory.PLAIN_TEXT
