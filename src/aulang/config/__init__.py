# topmark:header:start
#
#   project      : Au
#   file         : __init__.py
#   file_relpath : src/aulang/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for Au.

Defines the immutable [`Config`][aulang.config.model.Config] and the loader
for the optional ``au.toml`` project file. Logging setup lives in
[`aulang.config.logging`][aulang.config.logging].
"""

from __future__ import annotations

from aulang.config.io import load_config, parse_config
from aulang.config.model import Config

__all__ = ["Config", "load_config", "parse_config"]
