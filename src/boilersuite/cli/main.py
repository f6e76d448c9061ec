# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : main.py
#   file_relpath : src/boilersuite/cli/main.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Boilersuite CLI entry point.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj`` together with the console; subcommands read them from there.
"""

from __future__ import annotations

import click

from boilersuite.cli.cmd_common import init_common_state
from boilersuite.cli.commands.check import check_command
from boilersuite.cli.commands.templates import templates_command
from boilersuite.cli.commands.version import version_command
from boilersuite.cli.console import ClickConsole
from boilersuite.cli.options import CONTEXT_SETTINGS, common_color_options, common_verbose_options
from boilersuite.config.logging import get_logger

logger = get_logger(__name__)


@click.group(
    name="boilersuite",
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    help="Validate copyright/license boilerplate at the top of source files.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the Boilersuite CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'boilersuite check PATH' to validate boilerplate.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(check_command)

cli.add_command(templates_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
