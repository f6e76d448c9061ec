# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : __init__.py
#   file_relpath : src/boilersuite/config/__init__.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilersuite configuration.

Re-exports the immutable `Config` and the TOML loader so callers can write
``from boilersuite.config import Config, load_config``.
"""

from __future__ import annotations

from boilersuite.config.io import load_config
from boilersuite.config.model import Config, ConfigError

__all__ = ["Config", "ConfigError", "load_config"]
