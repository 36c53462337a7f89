# topmark:header:start
#
#   project      : El2Readme
#   file         : extractor.py
#   file_relpath : src/el2readme/pipeline/steps/extractor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Header extraction step: keep the leading comment block of the document."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger
from el2readme.convert.header import extract_header
from el2readme.pipeline.status import Axis, ConvertStatus
from el2readme.pipeline.steps.base import BaseStep

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext

logger: El2ReadmeLogger = get_logger(__name__)


class ExtractorStep(BaseStep):
    """Populate ``ctx.header``.

    An empty header is not an error: the conversion continues and yields a
    document holding only the attribution line.

    Axes written:
      - convert (EMPTY_HEADER, SKIPPED)
    """

    def __init__(self) -> None:
        super().__init__(
            name=self.__class__.__name__,
            primary_axis=Axis.CONVERT,
            axes_written=(Axis.CONVERT,),
        )

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Run only when a document was loaded; otherwise mark the conversion as skipped."""
        if ctx.is_halted or ctx.document is None:
            ctx.status.convert = ConvertStatus.SKIPPED
            return False
        return True

    def run(self, ctx: ConversionContext) -> None:
        """Extract the header using the configured comment marker."""
        assert ctx.document is not None
        ctx.header = extract_header(ctx.document, ctx.config.comment_marker)
        if not ctx.header:
            logger.warning("%s: no leading comment block", ctx.path)
            ctx.status.convert = ConvertStatus.EMPTY_HEADER
            ctx.add_warning("No header found; output holds the attribution line only")
