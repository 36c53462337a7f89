# topmark:header:start
#
#   project      : El2Readme
#   file         : disclaimer.py
#   file_relpath : src/el2readme/pipeline/steps/disclaimer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""GPL disclaimer step: collapse the license boilerplate before line classification."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.constants import DISCLAIMER_START_SENTINEL
from el2readme.convert.disclaimer import rewrite_disclaimer
from el2readme.pipeline.status import Axis
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


class DisclaimerStep(BaseStep):
    """Replace the GPL paragraph of ``ctx.header`` by one attribution line.

    Sets ``ctx.disclaimer_index`` when a replacement happened.

    Axes written:
      - convert (diagnostics only)
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONVERT,
            axes_written=(Axis.CONVERT,),
        )

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Run only when there is a header to look at."""
        return super().may_proceed(ctx) and bool(ctx.header)

    def run(self, ctx: ConversionContext) -> None:
        """Rewrite the disclaimer in place on ``ctx.header``."""
        assert ctx.header is not None
        header, index = rewrite_disclaimer(ctx.header, ctx.config.comment_marker)
        ctx.header = header
        ctx.disclaimer_index = index
        if index is not None:
            ctx.add_info(f"GPL disclaimer collapsed at header line {index + 1}")
        elif any(DISCLAIMER_START_SENTINEL in line for line in header):
            ctx.add_warning("GPL disclaimer has no closing sentinel; converted as plain text")
