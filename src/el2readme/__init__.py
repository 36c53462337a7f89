# topmark:header:start
#
#   project      : El2Readme
#   file         : __init__.py
#   file_relpath : src/el2readme/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""El2Readme package.

El2Readme turns the leading commentary block of an Emacs Lisp file into an
Org document (``README.org``) suitable for a code-hosting front page. It
exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations
