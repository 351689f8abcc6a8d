# topmark:header:start
#
#   project      : Au
#   file         : __init__.py
#   file_relpath : src/aulang/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au package.

Au translates documents written for a constructed language. It reads a
tabular lexicon (``lexicon.csv``) and annotated source documents (``*.au``),
replaces the ``__marked__`` glosses with target-language word forms, and
exposes both a CLI and a small typed API for automation.
"""

from __future__ import annotations
