# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Pytest configuration for the Boilersuite test suite.

This file sets up shared fixtures (templates built from small, readable
sources) and customizes the logging configuration for test runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pytest import hookimpl

from boilersuite.config import logging
from boilersuite.core.template import Template

if TYPE_CHECKING:
    from collections.abc import Callable
    from pathlib import Path

#: Compact template source used across the unit tests (hash comments).
HASH_TEMPLATE_SOURCE = "#header\n#Copyright <<YEAR>> by <<AUTHOR>>\n#footer"

#: Go-style template with surrounding whitespace that must be trimmed.
SLASH_TEMPLATE_SOURCE = "  \n// header\n// Copyright <<YEAR>> by <<AUTHOR>>\n//\n// footer\n\n\n"

#: Single-line block comment template.
ONELINE_TEMPLATE_SOURCE = "/*Copyright <<YEAR>> by <<AUTHOR>>*/"

TEST_AUTHOR = "Unittest"


@pytest.fixture(autouse=True)
def clear_log_level_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove BOILERSUITE_LOG_LEVEL so CLI tests see the default verbosity.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Enable DEBUG logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.logging.DEBUG)


@pytest.fixture
def sh_template() -> Template:
    """Hash-comment template for the ``sh`` category (shebang aware)."""
    return Template.from_source(HASH_TEMPLATE_SOURCE, "sh", TEST_AUTHOR)


@pytest.fixture
def go_template() -> Template:
    """Slash-comment template for the ``go`` category (build constraint aware)."""
    return Template.from_source(SLASH_TEMPLATE_SOURCE, "go", TEST_AUTHOR)


@pytest.fixture
def oneline_template() -> Template:
    """Single-line ``/* ... */`` template without header skipping."""
    return Template.from_source(ONELINE_TEMPLATE_SOURCE, "c", TEST_AUTHOR)


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper writing raw text (no newline translation) below ``tmp_path``."""

    def _write(relpath: str, text: str) -> Path:
        path: Path = tmp_path / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(text.encode("utf-8"))
        return path

    return _write
