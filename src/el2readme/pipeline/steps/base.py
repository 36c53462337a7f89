# topmark:header:start
#
#   project      : El2Readme
#   file         : base.py
#   file_relpath : src/el2readme/pipeline/steps/base.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Base class for class-based pipeline steps.

The runner invokes steps as *callables*. `BaseStep` implements the common
lifecycle:

    ctx = step(ctx)  # internally: may_proceed → run?
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from el2readme.config.logging import get_logger

if TYPE_CHECKING:
    from el2readme.config.logging import El2ReadmeLogger
    from el2readme.pipeline.context import ConversionContext
    from el2readme.pipeline.status import Axis

logger: El2ReadmeLogger = get_logger(__name__)


@dataclass
class BaseStep:
    """Reusable foundation for pipeline steps.

    Subclass this to implement a concrete step by overriding ``run()`` and,
    where needed, ``may_proceed()``. Do not override ``__call__``.

    Attributes:
        name (str): Stable step identifier for logs/tracing.
        primary_axis (Axis | None): The axis this step “represents” in summaries.
        axes_written (tuple[Axis, ...]): Status axes this step is allowed to write.
    """

    name: str
    primary_axis: Axis | None
    axes_written: tuple[Axis, ...] = ()

    def __call__(self, ctx: ConversionContext) -> ConversionContext:
        """Invoke the step lifecycle: gate → run (if allowed).

        Args:
            ctx (ConversionContext): The mutable context of the current file.

        Returns:
            ConversionContext: The same context instance after mutation.
        """
        ctx.steps.append(self)
        if self.may_proceed(ctx):
            logger.info("Pipeline step %s - running", self.name)
            self.run(ctx)
            if ctx.is_halted:
                logger.info("Pipeline halted by %s: %s", ctx.flow.at_step, ctx.flow.reason)
        else:
            logger.info("Pipeline step %s may not proceed", self.name)
        return ctx

    def may_proceed(self, ctx: ConversionContext) -> bool:
        """Return whether the step should run given the current context.

        Default: run unless an earlier step halted the flow.
        """
        return not ctx.is_halted

    def run(self, ctx: ConversionContext) -> None:
        """Perform the step's primary work, mutating ``ctx`` in place."""
        raise NotImplementedError
