# topmark:header:start
#
#   project      : El2Readme
#   file         : test_header.py
#   file_relpath : tests/convert/test_header.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for header extraction (leading comment block of a document)."""

from __future__ import annotations

from el2readme.convert.header import extract_header, find_header_end, is_header_line
from tests.conftest import SAMPLE_EL, parametrize


@parametrize(
    "line, expected",
    [
        (";; text", True),
        (";;; Commentary:", True),
        (";;", True),
        ("", True),
        ("   \t", True),
        ("; single semicolon", False),
        ("(require 'foo)", False),
        ("  ;; indented comment", False),
    ],
)
def test_is_header_line(line: str, expected: bool) -> None:
    """Blank lines and lines starting with the marker qualify; nothing else does."""
    assert is_header_line(line) is expected


def test_header_stops_at_first_code_line() -> None:
    """Comment lines after the first code line are never part of the header."""
    lines: list[str] = [";;; a.el --- x", "", ";; more", "(defun a ())", ";; later"]
    assert extract_header(lines) == [";;; a.el --- x", "", ";; more"]


def test_header_empty_when_first_line_disqualifies() -> None:
    """A document that opens with code has an empty header."""
    assert extract_header(["(provide 'a)", ";; comment"]) == []


def test_header_whole_document() -> None:
    """When every line qualifies the header is the whole document."""
    lines: list[str] = [";; one", "", ";; two"]
    assert find_header_end(lines) == 3
    assert extract_header(lines) == lines


def test_header_returns_copy() -> None:
    """The returned list is independent from the input."""
    lines: list[str] = [";; one"]
    header: list[str] = extract_header(lines)
    header.append("mutated")
    assert lines == [";; one"]


def test_header_custom_marker() -> None:
    """A configured marker replaces ``;;``."""
    lines: list[str] = ["-- title", "-- body", "code"]
    assert extract_header(lines, "--") == ["-- title", "-- body"]


def test_header_of_sample_ends_before_defun() -> None:
    """The sample package header ends right before its first form."""
    lines: list[str] = SAMPLE_EL.splitlines()
    header: list[str] = extract_header(lines)
    assert header[-2] == ";;; Code:"
    assert lines[len(header)].startswith("(defun")
