# topmark:header:start
#
#   project      : El2Readme
#   file         : test_disclaimer.py
#   file_relpath : tests/convert/test_disclaimer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for collapsing the GPL disclaimer paragraph."""

from __future__ import annotations

from el2readme.convert.disclaimer import (
    DisclaimerSpan,
    find_disclaimer,
    render_disclaimer,
    rewrite_disclaimer,
)
from tests.conftest import parametrize

GPL3_OR_LATER: list[str] = [
    ";; This program is free software; you can redistribute it and/or modify",
    ";; it under the terms of the GNU General Public License as published by",
    ";; the Free Software Foundation, either version 3 of the License, or",
    ";; (at your option) any later version.",
    ";;",
    ";; You should have received a copy of the GNU General Public License",
    ";; along with this program.  If not, see <http://www.gnu.org/licenses/>.",
]


def test_gpl3_or_later_collapses_to_one_line() -> None:
    """The paragraph is replaced by exactly one attribution line."""
    header: list[str] = [";;; a.el --- x", "", *GPL3_OR_LATER, "", ";;; Commentary:"]
    new_header, index = rewrite_disclaimer(header)

    assert index == 2
    assert new_header == [
        ";;; a.el --- x",
        "",
        "This program is licensed under "
        "[[https://www.gnu.org/licenses/gpl-3.0.html][GPL 3]] or later.",
        "",
        ";;; Commentary:",
    ]
    assert not any(line in new_header for line in GPL3_OR_LATER)


def test_span_facts() -> None:
    """Span bounds, version and qualifier are derived from the paragraph."""
    span: DisclaimerSpan | None = find_disclaimer(["", *GPL3_OR_LATER, ";; after"])
    assert span == DisclaimerSpan(start=1, end=8, version="3", or_later=True)


def test_version_split_across_lines() -> None:
    """The version digit may sit on the line after the ``version`` token."""
    lines: list[str] = [
        ";; This program is free software, under the GPL version",
        ";; 2 of the License.",
        ";; If not, see <http://www.gnu.org/licenses/>.",
    ]
    span: DisclaimerSpan | None = find_disclaimer(lines)
    assert span is not None
    assert span.version == "2"
    assert span.or_later is False
    assert render_disclaimer(span) == (
        "This program is licensed under [[https://www.gnu.org/licenses/gpl-2.0.html][GPL 2]]."
    )


def test_missing_closing_sentinel_leaves_header_unchanged() -> None:
    """Without the closing sentence the header comes back byte-for-byte."""
    header: list[str] = [";;; a.el --- x", *GPL3_OR_LATER[:4], ";; end of notice"]
    new_header, index = rewrite_disclaimer(header)

    assert index is None
    assert new_header == header
    assert new_header is not header


def test_no_opening_sentinel_is_noop() -> None:
    """Headers without a disclaimer pass through untouched."""
    header: list[str] = [";;; a.el --- x", ";; If not, see <http://www.gnu.org/licenses/>."]
    assert rewrite_disclaimer(header) == (header, None)


def test_closing_sentinel_before_opening_is_ignored() -> None:
    """The closing sentinel is only searched after the opening one."""
    header: list[str] = [
        ";; If not, see <http://www.gnu.org/licenses/>.",
        ";; This program is free software.",
    ]
    assert find_disclaimer(header) is None


@parametrize(
    "span, expected",
    [
        (
            DisclaimerSpan(0, 1, "3", True),
            "This program is licensed under "
            "[[https://www.gnu.org/licenses/gpl-3.0.html][GPL 3]] or later.",
        ),
        (
            DisclaimerSpan(0, 1, "3", False),
            "This program is licensed under [[https://www.gnu.org/licenses/gpl-3.0.html][GPL 3]].",
        ),
        (
            DisclaimerSpan(0, 1, None, True),
            "This program is licensed under [[https://www.gnu.org/licenses/][GPL]] or later.",
        ),
    ],
)
def test_render_disclaimer(span: DisclaimerSpan, expected: str) -> None:
    """Version and qualifier select the link and the ending."""
    assert render_disclaimer(span) == expected
