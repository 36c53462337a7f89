# topmark:header:start
#
#   project      : El2Readme
#   file         : codeblock.py
#   file_relpath : src/el2readme/convert/codeblock.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Turn a run of four-space-indented lines into an Org source block."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import DEFAULT_SRC_LANGUAGE, ORG_SRC_BEGIN, ORG_SRC_END
from el2readme.convert.classifier import CODE_INDENT, LineCategory, is_code_line

if TYPE_CHECKING:
    from collections.abc import Sequence

    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)


def find_code_block_end(lines: Sequence[str], start: int) -> int:
    """Return the index just past the last indented line of the run at ``start``.

    The run continues over indented and blank lines; blank lines trailing the
    last indented line are not part of it.

    Args:
        lines (Sequence[str]): Prepared header lines (comment markers removed).
        start (int): Index of the first indented line.

    Returns:
        int: Exclusive end index of the run.
    """
    end: int = start + 1
    for index in range(start + 1, len(lines)):
        text: str = lines[index]
        if is_code_line(text):
            end = index + 1
        elif text.strip():
            break
    return end


def format_code_block(
    lines: Sequence[str],
    start: int,
    language: str = DEFAULT_SRC_LANGUAGE,
) -> tuple[list[str], int]:
    """Consume the indented run at ``start`` and wrap it in a source block.

    Args:
        lines (Sequence[str]): Prepared header lines (comment markers removed).
        start (int): Index of the first indented line.
        language (str): Language name for ``#+begin_src``.

    Returns:
        tuple[list[str], int]: The block lines and the index to resume from.
    """
    end: int = find_code_block_end(lines, start)
    for index in range(start + 1, end):
        logger.trace(
            "line %d [%s]: %r", index + 1, LineCategory.CODE_BLOCK_BODY.value, lines[index]
        )
    body: list[str] = [
        line[len(CODE_INDENT) :] if is_code_line(line) else "" for line in lines[start:end]
    ]
    logger.trace("Code block at lines %d-%d (%d body line(s))", start + 1, end, len(body))
    return [f"{ORG_SRC_BEGIN} {language}", *body, ORG_SRC_END], end
