# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : constants.py
#   file_relpath : src/boilersuite/constants.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilersuite constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    BOILERSUITE_VERSION: str = get_version("boilersuite")
except PackageNotFoundError:  # running from a source checkout
    BOILERSUITE_VERSION = "0.0.0.dev0"

# Substituted for the author marker unless configured otherwise
DEFAULT_AUTHOR: Final[str] = "cert-manager"

# Directory names which are never descended into
DEFAULT_SKIPPED_DIRS: Final[tuple[str, ...]] = (
    ".git",
    "_bin",
    "bin",
    "node_modules",
    "vendor",
    "third_party",
    "staging",
)

# File names which are never validated
SKIPPED_FILE_NAMES: Final[frozenset[str]] = frozenset({"go.mod", "go.sum", "go.work", "go.work.sum"})
SKIPPED_FILE_PREFIXES: Final[tuple[str, ...]] = ("zz_generated",)

# Bundled templates inside the `boilersuite.templates` package
TEMPLATES_PACKAGE: Final[str] = "boilersuite.templates"
TEMPLATES_DIR_NAME: Final[str] = "boilerplate-templates"
TEMPLATE_SUFFIX: Final[str] = ".boilertmpl"

CONFIG_FILE_NAME: Final[str] = "boilersuite.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
