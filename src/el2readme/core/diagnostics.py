# topmark:header:start
#
#   project      : El2Readme
#   file         : diagnostics.py
#   file_relpath : src/el2readme/core/diagnostics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostics attached to a conversion.

Diagnostics are informational: they never change what the converter emits,
they only explain it (e.g. "closing GPL sentinel not found").
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import cast

from yachalk import chalk


class DiagnosticLevel(Enum):
    """Severity levels for diagnostics, ordered INFO < WARNING < ERROR."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    @property
    def rank(self) -> int:
        """Return the ordering rank of this level (higher is more severe)."""
        return _RANKS[self]

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this severity level."""
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticLevel.INFO: chalk.blue,
                DiagnosticLevel.WARNING: chalk.yellow,
                DiagnosticLevel.ERROR: chalk.red_bright,
            }[self],
        )


_RANKS: dict[DiagnosticLevel, int] = {
    DiagnosticLevel.INFO: 0,
    DiagnosticLevel.WARNING: 1,
    DiagnosticLevel.ERROR: 2,
}


@dataclass(frozen=True)
class Diagnostic:
    """A message with a severity level."""

    level: DiagnosticLevel
    message: str

    def render(self, *, color: bool = False) -> str:
        """Return ``"<level>: <message>"``, optionally colored by level."""
        text: str = f"{self.level.value}: {self.message}"
        return self.level.color(text) if color else text


def worst_level(diags: Sequence[Diagnostic]) -> DiagnosticLevel | None:
    """Return the most severe level found in ``diags`` (None when empty)."""
    if not diags:
        return None
    return max((d.level for d in diags), key=lambda level: level.rank)
