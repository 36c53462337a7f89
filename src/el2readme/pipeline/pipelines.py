# topmark:header:start
#
#   project      : El2Readme
#   file         : pipelines.py
#   file_relpath : src/el2readme/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Named pipeline variants for El2Readme (immutable step sequences).

Overview
--------
- ``CONVERT``: extract → disclaimer → rewrite → inline → finalize
- ``CONVERT_FILE``: read + CONVERT + write

Steps are instantiated objects (not functions); pipelines are immutable tuples.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Final

from el2readme.pipeline.steps import (
    disclaimer,
    extractor,
    finalizer,
    inline,
    reader,
    rewriter,
    writer,
)

if TYPE_CHECKING:
    from el2readme.pipeline.steps.base import BaseStep

# In-memory conversion of an already loaded document:
CONVERT_PIPELINE: Final[tuple[BaseStep, ...]] = (
    extractor.ExtractorStep(),  # Keep the leading comment block
    disclaimer.DisclaimerStep(),  # Collapse the GPL boilerplate
    rewriter.RewriterStep(),  # Classify and rewrite line by line
    inline.InlineMarkupStep(),  # `quoted' -> ~verbatim~
    finalizer.FinalizerStep(),  # Attribution line and trailing whitespace
)

CONVERT_FILE_PIPELINE: Final[tuple[BaseStep, ...]] = (
    (reader.ReaderStep(),) + CONVERT_PIPELINE + (writer.WriterStep(),)
)

PIPELINES: Final[dict[str, tuple[BaseStep, ...]]] = {
    "convert": CONVERT_PIPELINE,
    "convert-file": CONVERT_FILE_PIPELINE,
}


def get_pipeline(name: str) -> tuple[BaseStep, ...]:
    """Return the pipeline registered under ``name``.

    Raises:
        KeyError: If no pipeline has that name.
    """
    return PIPELINES[name]
