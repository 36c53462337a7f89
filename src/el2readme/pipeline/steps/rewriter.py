# topmark:header:start
#
#   project      : El2Readme
#   file         : rewriter.py
#   file_relpath : src/el2readme/pipeline/steps/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Line rewriting step: classify each header line and emit Org markup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.convert.rewriter import rewrite_lines
from el2readme.pipeline.status import Axis
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


class RewriterStep(BaseStep):
    """Populate ``ctx.converted`` from ``ctx.header``.

    Axes written:
      - convert
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONVERT,
            axes_written=(Axis.CONVERT,),
        )

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Run only once a header (possibly empty) was extracted."""
        return super().may_proceed(ctx) and ctx.header is not None

    def run(self, ctx: ConversionContext) -> None:
        """Run the cursor-driven line pass."""
        assert ctx.header is not None
        ctx.converted = rewrite_lines(
            ctx.header,
            disclaimer_index=ctx.disclaimer_index,
            marker=ctx.config.comment_marker,
            extension=ctx.config.file_extension,
            language=ctx.config.src_language,
        )
        logger.debug("%d header line(s) -> %d Org line(s)", len(ctx.header), len(ctx.converted))
