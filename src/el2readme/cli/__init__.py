# topmark:header:start
#
#   project      : El2Readme
#   file         : __init__.py
#   file_relpath : src/el2readme/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for El2Readme."""
