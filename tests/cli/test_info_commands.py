# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : test_info_commands.py
#   file_relpath : tests/cli/test_info_commands.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Informational commands: ``version``, ``templates`` and the bare group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from boilersuite.cli.exit_codes import ExitCode
from boilersuite.constants import BOILERSUITE_VERSION

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

    from .conftest import RunCli

pytestmark = pytest.mark.cli


def test_version(run_cli: RunCli) -> None:
    """``version`` prints the package version."""
    result: Result = run_cli(["version"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == f"version: {BOILERSUITE_VERSION}\n"


def test_group_without_command_prints_help(run_cli: RunCli) -> None:
    """Invoking the group alone prints a hint and the help text."""
    result: Result = run_cli([])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "boilersuite check PATH" in result.output
    assert "Commands:" in result.output


def test_templates_bundled(run_cli: RunCli) -> None:
    """``templates`` lists every bundled category with its header rule."""
    result: Result = run_cli(["templates"])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines: list[str] = result.output.splitlines()
    by_category: dict[str, str] = dict(line.split() for line in lines)
    assert by_category["go"] == "build_constraints"
    assert by_category["sh"] == "shebang"
    assert by_category["Dockerfile"] == "none"


def test_templates_custom_dir_show(run_cli: RunCli, template_dir: Path) -> None:
    """``--show`` prints the template text below its category line."""
    result: Result = run_cli(["templates", "--show", "--templates-dir", str(template_dir)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output.startswith("sh  shebang\n# Copyright <<YEAR>> The cert-manager Authors.\n")


def test_templates_missing_dir(run_cli: RunCli, tmp_path: Path) -> None:
    """A template directory that does not exist exits CONFIG_ERROR."""
    result: Result = run_cli(["templates", "--templates-dir", str(tmp_path / "none")])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_templates_show_with_author(run_cli: RunCli, template_dir: Path) -> None:
    """``--author`` is substituted into the printed template text."""
    result: Result = run_cli(
        ["templates", "--show", "--author", "ACME", "--templates-dir", str(template_dir)]
    )

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "# Copyright <<YEAR>> The ACME Authors.\n" in result.output


def test_templates_show_with_config(run_cli: RunCli, template_dir: Path, tmp_path: Path) -> None:
    """Author and template directory can come from a ``--config`` file."""
    config: Path = tmp_path / "boilersuite.toml"
    config.write_text(
        f'author = "Config"\ntemplate_dir = {str(template_dir)!r}\n', encoding="utf-8"
    )

    result: Result = run_cli(["templates", "--show", "--config", str(config)])

    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.output == "sh  shebang\n# Copyright <<YEAR>> The Config Authors.\n\n"


def test_templates_invalid_config(run_cli: RunCli, tmp_path: Path) -> None:
    """An unparsable ``--config`` file exits CONFIG_ERROR."""
    config: Path = tmp_path / "bad.toml"
    config.write_text("author = \n", encoding="utf-8")

    result: Result = run_cli(["templates", "--config", str(config)])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "invalid configuration" in result.output
