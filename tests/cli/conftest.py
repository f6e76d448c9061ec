# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""CLI test helpers.

The `run_cli` fixture invokes the Click group in-process with colors disabled,
so assertions can match plain text whatever the ``FORCE_COLOR`` environment
of the test runner.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Sequence

import pytest
from click.testing import CliRunner, Result

from boilersuite.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

RunCli = Callable[[Sequence[str]], Result]

#: Hash-comment template with a short body, for readable CLI fixtures.
SHORT_SH_TEMPLATE = "# Copyright <<YEAR>> The <<AUTHOR>> Authors.\n"


@pytest.fixture
def run_cli() -> RunCli:
    """Return a callable invoking the CLI with ``--no-color`` prepended.

    Returns:
        RunCli: Callable taking the argument vector and returning the
            `click.testing.Result`.
    """

    def _run(argv: Sequence[str]) -> Result:
        runner = CliRunner()
        return runner.invoke(cli, ["--no-color", *argv], obj={})

    return _run


@pytest.fixture
def template_dir(tmp_path: Path) -> Path:
    """A directory holding a single short ``sh`` template."""
    path: Path = tmp_path / "templates"
    path.mkdir()
    (path / "boilerplate.sh.boilertmpl").write_text(SHORT_SH_TEMPLATE, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """A source tree with one compliant and one non-compliant script."""
    root: Path = tmp_path / "proj"
    root.mkdir()
    (root / "good.sh").write_text(
        "#!/bin/sh\n\n# Copyright 2020 The ACME Authors.\n\necho ok\n", encoding="utf-8"
    )
    (root / "bad.sh").write_text("#!/bin/sh\necho bad\n", encoding="utf-8")
    return root
