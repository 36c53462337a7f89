# topmark:header:start
#
#   project      : El2Readme
#   file         : disclaimer.py
#   file_relpath : src/el2readme/convert/disclaimer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Collapse the standard GPL disclaimer paragraph into a single line.

The paragraph is recognised by two literal sentinels: the opening phrase
``is free software`` and the closing sentence
``If not, see <http://www.gnu.org/licenses/>.``. Differently worded license
notices are left alone and flow through the generic line pass.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import (
    DEFAULT_COMMENT_MARKER,
    DISCLAIMER_END_SENTINEL,
    DISCLAIMER_OR_LATER_PHRASE,
    DISCLAIMER_START_SENTINEL,
    GPL_LICENSES_URL,
)

if TYPE_CHECKING:
    from collections.abc import Sequence

    from el2readme.config.logging import El2ReadmeLogger

logger: El2ReadmeLogger = get_logger(__name__)

_VERSION_RE: re.Pattern[str] = re.compile(r"version\s*(\d)")


@dataclass(frozen=True)
class DisclaimerSpan:
    """Location and derived facts of a GPL disclaimer inside the header.

    Attributes:
        start (int): Index of the line carrying the opening sentinel.
        end (int): Index just past the line carrying the closing sentinel.
        version (str | None): First digit following ``version`` in the span.
        or_later (bool): True if the span mentions ``any later version``.
    """

    start: int
    end: int
    version: str | None
    or_later: bool


def _span_text(lines: Sequence[str], marker: str) -> str:
    """Join span lines into one string, dropping comment markers and line breaks."""
    parts: list[str] = []
    for line in lines:
        body: str = line[len(marker) :] if line.startswith(marker) else line
        parts.append(body.lstrip(marker[:1]).strip())
    return " ".join(part for part in parts if part)


def find_disclaimer(
    lines: Sequence[str],
    marker: str = DEFAULT_COMMENT_MARKER,
) -> DisclaimerSpan | None:
    """Locate the GPL disclaimer paragraph.

    Args:
        lines (Sequence[str]): Header lines (comment markers still present).
        marker (str): Line comment marker.

    Returns:
        DisclaimerSpan | None: The span, or None when the opening sentinel is
            absent or the closing sentinel cannot be found after it.
    """
    start: int | None = next(
        (i for i, line in enumerate(lines) if DISCLAIMER_START_SENTINEL in line),
        None,
    )
    if start is None:
        return None

    end: int | None = next(
        (i + 1 for i in range(start, len(lines)) if DISCLAIMER_END_SENTINEL in lines[i]),
        None,
    )
    if end is None:
        logger.warning(
            "GPL disclaimer opens at line %d but its closing sentinel is missing; left as-is",
            start + 1,
        )
        return None

    text: str = _span_text(lines[start:end], marker)
    match: re.Match[str] | None = _VERSION_RE.search(text)
    return DisclaimerSpan(
        start=start,
        end=end,
        version=match.group(1) if match else None,
        or_later=DISCLAIMER_OR_LATER_PHRASE in text,
    )


def render_disclaimer(span: DisclaimerSpan) -> str:
    """Return the one-line license attribution for ``span``.

    Example:
        ``This program is licensed under [[https://www.gnu.org/licenses/gpl-3.0.html][GPL 3]] or later.``
    """
    if span.version is None:
        link: str = f"[[{GPL_LICENSES_URL}][GPL]]"
    else:
        link = f"[[{GPL_LICENSES_URL}gpl-{span.version}.0.html][GPL {span.version}]]"
    ending: str = " or later." if span.or_later else "."
    return f"This program is licensed under {link}{ending}"


def rewrite_disclaimer(
    lines: Sequence[str],
    marker: str = DEFAULT_COMMENT_MARKER,
) -> tuple[list[str], int | None]:
    """Replace the disclaimer paragraph with its one-line attribution.

    The replacement is atomic: either the whole span is swapped for one line,
    or (no opening sentinel, or no closing sentinel) the lines come back
    unchanged.

    Args:
        lines (Sequence[str]): Header lines (comment markers still present).
        marker (str): Line comment marker.

    Returns:
        tuple[list[str], int | None]: The new header lines and the index of the
            attribution line (None when nothing was replaced).
    """
    span: DisclaimerSpan | None = find_disclaimer(lines, marker)
    if span is None:
        return list(lines), None

    logger.debug(
        "Collapsing GPL disclaimer (lines %d-%d, version=%s, or_later=%s)",
        span.start + 1,
        span.end,
        span.version,
        span.or_later,
    )
    new_lines: list[str] = [*lines[: span.start], render_disclaimer(span), *lines[span.end :]]
    return new_lines, span.start
