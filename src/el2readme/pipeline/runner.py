# topmark:header:start
#
#   project      : El2Readme
#   file         : runner.py
#   file_relpath : src/el2readme/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run the El2Readme conversion pipeline for a single file."""

from __future__ import annotations

from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext
    from el2readme.pipeline.steps.base import BaseStep

logger: El2ReadmeLogger = get_logger(__name__)


def run(ctx: ConversionContext, steps: Sequence[BaseStep]) -> ConversionContext:
    """Execute the pipeline sequentially.

    Args:
        ctx (ConversionContext): Mutable conversion context.
        steps (Sequence[BaseStep]): Ordered sequence of pipeline steps.

    Returns:
        ConversionContext: The final context after all steps have run.
    """
    logger.info("Converting %s", ctx.path)
    for step in steps:
        ctx = step(ctx)
    logger.debug("Conversion finished: %s", ctx.to_dict())
    return ctx
