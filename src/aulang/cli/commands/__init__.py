# topmark:header:start
#
#   project      : Au
#   file         : __init__.py
#   file_relpath : src/aulang/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Au CLI subcommands."""
