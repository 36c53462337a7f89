# topmark:header:start
#
#   project      : El2Readme
#   file         : inline.py
#   file_relpath : src/el2readme/pipeline/steps/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline markup step: one sweep over the whole converted header."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.convert.inline import rewrite_inline_markup
from el2readme.pipeline.status import Axis
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.pipeline.context import ConversionContext


class InlineMarkupStep(BaseStep):
    """Turn `quoted' references of ``ctx.converted`` into ~verbatim~."""

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
        """Apply the sweep to the joined document so it sees every line at once."""
        assert ctx.converted is not None
        ctx.converted = rewrite_inline_markup("\n".join(ctx.converted)).split("\n")
