# topmark:header:start
#
#   project      : El2Readme
#   file         : inline.py
#   file_relpath : src/el2readme/convert/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Convert Emacs-style `quoted' references to Org verbatim markup."""

from __future__ import annotations

import re

from el2readme.constants import ORG_VERBATIM

_QUOTED_RE: re.Pattern[str] = re.compile(r"`(\S+?)'")


def rewrite_inline_markup(text: str) -> str:
    """Replace every backquoted `` `symbol' `` with ``~symbol~``.

    Matches are non-overlapping and found left to right; the quoted text must
    be one or more non-space characters.
    """
    return _QUOTED_RE.sub(rf"{ORG_VERBATIM}\1{ORG_VERBATIM}", text)
