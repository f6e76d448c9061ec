# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : errors.py
#   file_relpath : src/boilersuite/cli/errors.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Exceptions for the Boilersuite CLI.

Raise these from commands to stop with a message and a standardized exit
code. The project console is looked up when the error is raised, because
Click displays the error only after the command context has been popped.
Without a console (e.g. errors raised while the group is still setting up)
Click's default error display is used.
"""

from __future__ import annotations

from typing import IO, TYPE_CHECKING, Any

import click

from boilersuite.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from boilersuite.cli.console import ConsoleLike


class BoilersuiteError(click.ClickException):
    """Base class for all Boilersuite CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str) -> None:
        super().__init__(message)
        ctx: click.Context | None = click.get_current_context(silent=True)
        obj: Any = ctx.obj if ctx is not None else None
        self.console: ConsoleLike | None = obj.get("console") if isinstance(obj, dict) else None

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (no color)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error through the console captured at raise time, if any."""
        if self.console is not None:
            self.console.error(self.format_message())
            return
        super().show(file)


class BoilersuiteUsageError(BoilersuiteError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class BoilersuiteConfigError(BoilersuiteError):
    """Error for invalid templates or configuration."""

    exit_code = ExitCode.CONFIG_ERROR


class BoilersuiteFileNotFoundError(BoilersuiteError):
    """Error when the target path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND
