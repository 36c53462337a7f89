# topmark:header:start
#
#   project      : El2Readme
#   file         : __init__.py
#   file_relpath : src/el2readme/convert/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure, I/O-free building blocks of the header conversion.

Every function here works on ``list[str]`` line images (newlines removed) and
returns new lists; none of them mutates its input. The pipeline steps in
`el2readme.pipeline.steps` sequence them.
"""

from __future__ import annotations
