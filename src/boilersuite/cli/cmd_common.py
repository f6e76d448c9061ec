# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : cmd_common.py
#   file_relpath : src/boilersuite/cli/cmd_common.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Shared CLI state (logging, color, console) kept on the Click context.

Verbosity and color options are accepted both by the ``boilersuite`` group
and by subcommands such as ``check``. The group stores the raw option values
in ``ctx.obj``; a subcommand given its own values merges them with the
group's and re-initializes the state.
"""

from __future__ import annotations

import click

from boilersuite.cli.console import ClickConsole
from boilersuite.cli.options import ColorMode, resolve_color_mode, resolve_verbosity
from boilersuite.config.logging import resolve_env_log_level, setup_logging


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (str | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["color_mode"] = color_mode
    ctx.obj["no_color"] = no_color

    # BOILERSUITE_LOG_LEVEL wins over -v/-q
    level_cli: int = resolve_verbosity(verbose, quiet)
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env if level_env is not None else level_cli
    setup_logging(level=ctx.obj["log_level"])

    effective_mode: ColorMode = (
        ColorMode.NEVER if no_color else ColorMode(color_mode or ColorMode.AUTO.value)
    )
    enable_color: bool = resolve_color_mode(cli_mode=effective_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def apply_command_options(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Merge a subcommand's verbosity/color options with the group's.

    Counts add up (``boilersuite -v check -v`` is ``-vv``), an explicit
    ``--color`` on the subcommand wins, and ``--no-color`` anywhere disables
    color. Nothing happens when the subcommand got none of these options.
    """
    obj: dict[str, object] = ctx.ensure_object(dict)
    if not (verbose or quiet or color_mode or no_color) and "console" in obj:
        return

    group_color: object = obj.get("color_mode")
    init_common_state(
        ctx,
        verbose=int(obj.get("verbose", 0)) + verbose,  # type: ignore[call-overload]
        quiet=int(obj.get("quiet", 0)) + quiet,  # type: ignore[call-overload]
        color_mode=color_mode or (group_color if isinstance(group_color, str) else None),
        no_color=no_color or bool(obj.get("no_color", False)),
    )
