# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : version.py
#   file_relpath : src/boilersuite/cli/commands/version.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Print the Boilersuite version."""

from __future__ import annotations

import click

from boilersuite.cli.console import ClickConsole
from boilersuite.cli.options import CONTEXT_SETTINGS
from boilersuite.constants import BOILERSUITE_VERSION


@click.command(
    name="version",
    help="Show the current version of Boilersuite.",
    context_settings=CONTEXT_SETTINGS,
)
@click.pass_context
def version_command(ctx: click.Context) -> None:
    """Print the installed package version."""
    console = ctx.ensure_object(dict).get("console") or ClickConsole(enable_color=False)
    console.print(f"version: {BOILERSUITE_VERSION}")
