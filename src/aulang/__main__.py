# topmark:header:start
#
#   project      : Au
#   file         : __main__.py
#   file_relpath : src/aulang/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running Au via ``python -m aulang``.

It delegates directly to :func:`aulang.cli.main.cli`, so the module interface
and the ``au`` console script behave the same.

Examples:
    Translate every document in the current directory::

        python -m aulang build
"""

from __future__ import annotations

from aulang.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
