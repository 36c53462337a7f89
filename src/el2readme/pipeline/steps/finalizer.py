# topmark:header:start
#
#   project      : El2Readme
#   file         : finalizer.py
#   file_relpath : src/el2readme/pipeline/steps/finalizer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Finalizer step: attribution line, whitespace trimming and the final text."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import EL2README_NAME
from el2readme.pipeline.status import Axis, ConvertStatus
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


def attribution_line(filename: str, tool_url: str) -> str:
    """Return the generated-by sentence naming the source file and this tool."""
    return f"Converted from ={filename}= by [[{tool_url}][{EL2README_NAME}]]."


def finalize_lines(converted: list[str], filename: str, tool_url: str) -> list[str]:
    """Append the attribution line and strip trailing whitespace from every line."""
    if not any(line.strip() for line in converted):
        return [attribution_line(filename, tool_url)]
    lines: list[str] = [*converted, "", attribution_line(filename, tool_url)]
    # Collapse trailing blank lines into the single separator
    while len(lines) > 2 and not lines[-3].strip():
        del lines[-3]
    return [line.rstrip() for line in lines]


class FinalizerStep(BaseStep):
    """Produce ``ctx.text`` from ``ctx.converted``.

    Axes written:
      - convert (CONVERTED unless the header was empty)
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONVERT,
            axes_written=(Axis.CONVERT,),
        )

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Run only after the line pass."""
        return super().may_proceed(ctx) and ctx.converted is not None

    def run(self, ctx: ConversionContext) -> None:
        """Join the finalized lines with ``\\n`` and a trailing newline."""
        assert ctx.converted is not None
        lines: list[str] = finalize_lines(ctx.converted, ctx.path.name, ctx.config.tool_url)
        if ctx.status.convert != ConvertStatus.EMPTY_HEADER:
            ctx.status.convert = ConvertStatus.CONVERTED
        ctx.text = "\n".join(lines) + "\n"
        logger.debug("Final document: %d line(s)", len(lines))
