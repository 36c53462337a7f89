# topmark:header:start
#
#   project      : El2Readme
#   file         : rewriter.py
#   file_relpath : src/el2readme/convert/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rewrite classified header lines into Org markup.

The pass walks the header with a cursor. Each call to `rewrite_at` consumes
one line (or a whole code run) and returns the emitted lines together with
the index to resume from, so code blocks are never re-classified line by line.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import (
    DEFAULT_COMMENT_MARKER,
    DEFAULT_FILE_EXTENSION,
    DEFAULT_SRC_LANGUAGE,
    ORG_DIVIDER,
    ORG_HEADING_MARKER,
    ORG_LIST_MARKER,
    ORG_TITLE_LABEL,
    TITLE_SEPARATOR,
)
from el2readme.convert.classifier import (
    LineCategory,
    classify_line,
    heading_content,
    prepare_line,
    remove_extension,
)
from el2readme.convert.codeblock import format_code_block

if TYPE_CHECKING:
    from collections.abc import Sequence

    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)


def rewrite_title(content: str, extension: str = DEFAULT_FILE_EXTENSION) -> list[str]:
    """Return the Org title lines for a ``name.el --- summary`` heading.

    Examples:
        ``mylib.el --- does a thing`` gives ``["#+TITLE: mylib", "", "does a thing"]``;
        ``mylib.el`` gives ``["#+TITLE: mylib"]``.
    """
    text: str = remove_extension(content, extension).strip()
    if TITLE_SEPARATOR in text:
        title, subtitle = text.split(TITLE_SEPARATOR, 1)
        return [f"{ORG_TITLE_LABEL} {title.strip()}", "", subtitle.strip()]
    return [f"{ORG_TITLE_LABEL} {text}"]


def rewrite_heading(content: str) -> str:
    """Return ``* content`` without a trailing colon."""
    line: str = f"{ORG_HEADING_MARKER} {content.strip()}"
    return line[:-1] if line.endswith(":") else line


def rewrite_list_item(text: str) -> str:
    """Return ``text`` as an Org list item, keeping its colon."""
    return f"{ORG_LIST_MARKER} {text[1:] if text.startswith(' ') else text}"


def rewrite_line(
    text: str,
    category: LineCategory,
    *,
    marker: str = DEFAULT_COMMENT_MARKER,
    extension: str = DEFAULT_FILE_EXTENSION,
) -> list[str]:
    """Apply the single-line transform of ``category`` to ``text``.

    Code blocks span several lines and are handled by `rewrite_at`.
    """
    if category == LineCategory.CODE_SENTINEL_HEADING:
        return [""]
    if category == LineCategory.FIRST_LINE_TITLE:
        return rewrite_title(heading_content(text, marker) or text, extension)
    if category == LineCategory.SECTION_HEADING:
        return [rewrite_heading(heading_content(text, marker) or text)]
    if category == LineCategory.LIST_ITEM:
        return [rewrite_list_item(text)]
    if category == LineCategory.INDENTED_PLAIN:
        return [text[1:]]
    if category == LineCategory.DIVIDER:
        return [ORG_DIVIDER]
    return [text]


def rewrite_at(
    lines: Sequence[str],
    index: int,
    *,
    disclaimer_index: int | None = None,
    marker: str = DEFAULT_COMMENT_MARKER,
    extension: str = DEFAULT_FILE_EXTENSION,
    language: str = DEFAULT_SRC_LANGUAGE,
) -> tuple[list[str], int]:
    """Classify and rewrite the prepared line at ``index``.

    Args:
        lines (Sequence[str]): Prepared header lines (see `prepare_lines`).
        index (int): Cursor position.
        disclaimer_index (int | None): Index of the collapsed GPL attribution line.
        marker (str): Line comment marker.
        extension (str): File extension token of the title line.
        language (str): Language name for source blocks.

    Returns:
        tuple[list[str], int]: Emitted lines and the next cursor position.
    """
    text: str = lines[index]
    category: LineCategory = classify_line(
        text,
        marker=marker,
        extension=extension,
        is_disclaimer=index == disclaimer_index,
    )
    logger.trace("line %d [%s]: %r", index + 1, category.value, text)

    if category == LineCategory.CODE_BLOCK_START:
        return format_code_block(lines, index, language)
    return rewrite_line(text, category, marker=marker, extension=extension), index + 1


def prepare_lines(header: Sequence[str], marker: str = DEFAULT_COMMENT_MARKER) -> list[str]:
    """Return the header lines with comment markers (and the mode cookie) removed."""
    return [prepare_line(line, index, marker) for index, line in enumerate(header)]


def rewrite_lines(
    header: Sequence[str],
    *,
    disclaimer_index: int | None = None,
    marker: str = DEFAULT_COMMENT_MARKER,
    extension: str = DEFAULT_FILE_EXTENSION,
    language: str = DEFAULT_SRC_LANGUAGE,
) -> list[str]:
    """Rewrite a whole header (comment markers still present) into Org lines.

    Args:
        header (Sequence[str]): Header lines after the disclaimer rewrite.
        disclaimer_index (int | None): Index of the collapsed GPL attribution line.
        marker (str): Line comment marker.
        extension (str): File extension token of the title line.
        language (str): Language name for source blocks.

    Returns:
        list[str]: The converted header.
    """
    lines: list[str] = prepare_lines(header, marker)
    converted: list[str] = []
    index: int = 0
    while index < len(lines):
        emitted, index = rewrite_at(
            lines,
            index,
            disclaimer_index=disclaimer_index,
            marker=marker,
            extension=extension,
            language=language,
        )
        converted.extend(emitted)
    return converted
