# topmark:header:start
#
#   project      : El2Readme
#   file         : status.py
#   file_relpath : src/el2readme/pipeline/status.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Status enums for each axis in the El2Readme pipeline.

Each enum captures a phase (read, convert, write). Steps **must only** write
to the axes listed in their ``axes_written`` contract.

Members carry a human-readable value and a `yachalk` colorizer for CLI
summaries; compare members with ``==``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable


class ColoredStrEnum(str, Enum):
    """``str`` enum whose members also carry a colorizer (``.color``)."""

    _color: Callable[..., str]

    def __new__(cls, text: str, color: Callable[..., str]) -> ColoredStrEnum:
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def color(self) -> Callable[..., str]:
        """Return the colorizer associated with this member."""
        return self._color

    def render(self, *, color: bool = False) -> str:
        """Return the member's text, colorized when ``color`` is True."""
        return self._color(self.value) if color else self.value


class Axis(Enum):
    """Status axes written by pipeline steps."""

    READ = "read"
    CONVERT = "convert"
    WRITE = "write"


class ReadStatus(ColoredStrEnum):
    """Outcome of loading the source file."""

    PENDING = ("read pending", chalk.gray)
    OK = ("ok", chalk.green)
    FROM_MEMORY = ("in-memory text", chalk.green)
    NOT_FOUND = ("not found", chalk.red)
    NO_READ_PERMISSION = ("no read permission", chalk.red_bright)
    UNICODE_DECODE_ERROR = ("Unicode decode error", chalk.yellow)
    UNREADABLE = ("read error", chalk.red_bright)


class ConvertStatus(ColoredStrEnum):
    """Outcome of the header conversion."""

    PENDING = ("conversion pending", chalk.gray)
    CONVERTED = ("converted", chalk.green)
    EMPTY_HEADER = ("no header found", chalk.yellow)
    SKIPPED = ("conversion skipped", chalk.yellow)


class WriteStatus(ColoredStrEnum):
    """Outcome of emitting the converted document."""

    PENDING = ("write pending", chalk.gray)
    WRITTEN = ("written", chalk.green)
    PRINTED = ("printed to stdout", chalk.green)
    DRY_RUN = ("not written (dry run)", chalk.blue)
    SKIPPED = ("write skipped", chalk.yellow)
    FAILED = ("write failed", chalk.red_bright)


@dataclass
class ConversionStatus:
    """Per-axis status record of one conversion."""

    read: ReadStatus = ReadStatus.PENDING
    convert: ConvertStatus = ConvertStatus.PENDING
    write: WriteStatus = WriteStatus.PENDING
