# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : check.py
#   file_relpath : src/boilersuite/cli/commands/check.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Validate boilerplate in a file or a source tree.

Every file with a matching template is validated; failures are collected and
reported once the whole scan is done, so one bad file never hides another.

Examples:
  Check a tree, skipping two extra directories:

    $ boilersuite check --skip "fixtures testdata" .

  Show a patch for every failing file:

    $ boilersuite check --patch . > fix.patch
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from boilersuite.cli.cmd_common import apply_command_options
from boilersuite.cli.console import ClickConsole
from boilersuite.cli.errors import (
    BoilersuiteConfigError,
    BoilersuiteError,
    BoilersuiteFileNotFoundError,
)
from boilersuite.cli.options import (
    CONTEXT_SETTINGS,
    common_color_options,
    common_verbose_options,
)
from boilersuite.config import ConfigError, load_config
from boilersuite.config.logging import get_logger
from boilersuite.core.patterns import AUTHOR_MARKER
from boilersuite.core.template import TemplateError
from boilersuite.file_resolver import resolve_targets
from boilersuite.runner import validate_files
from boilersuite.templates.registry import load_templates
from boilersuite.utils.diff import render_patch

if TYPE_CHECKING:
    from boilersuite.cli.console import ConsoleLike
    from boilersuite.config import Config
    from boilersuite.runner import FileResult
    from boilersuite.templates.registry import TemplateMap

logger = get_logger(__name__)


def split_skip_values(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated, space-separated ``--skip`` values."""
    return [item for value in values for item in value.split()]


def report_failures(console: ConsoleLike, failures: list[FileResult]) -> None:
    """Print one line per failing file, followed by its patch when present."""
    for result in failures:
        if result.failure is None:
            continue
        console.print(f'"{result.path}": {result.failure.message}')
        patch: str | None = result.failure.patch
        if patch:
            console.print(render_patch(patch) if console.enable_color else patch, nl=False)


@click.command(
    name="check",
    help="Validate the boilerplate of every supported file under PATH.",
    context_settings=CONTEXT_SETTINGS,
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--skip",
    "skip",
    multiple=True,
    help="Space-separated list of directory names which shouldn't be checked (repeatable).",
)
@click.option(
    "--author",
    default=None,
    help=f"Expected author, substituted for the {AUTHOR_MARKER} marker in templates.",
)
@click.option(
    "--patch/--no-patch",
    "patch",
    default=None,
    help="Print a unified diff for each failing file.",
)
@click.option(
    "--templates-dir",
    "template_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Read *.boilertmpl templates from this directory instead of the bundled ones.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=None,
    help="Read configuration from this TOML file instead of discovering one.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    path: Path,
    skip: tuple[str, ...],
    author: str | None,
    patch: bool | None,
    template_dir: Path | None,
    config_path: Path | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Run the check and exit non-zero if any file failed.

    Args:
        ctx (click.Context): Click context holding the console.
        path (Path): File or directory to check.
        skip (tuple[str, ...]): Extra directory names to skip.
        author (str | None): Expected author override.
        patch (bool | None): Patch output override.
        template_dir (Path | None): Template directory override.
        config_path (Path | None): Explicit configuration file.
        verbose (int): Extra ``-v`` count, added to the group's.
        quiet (int): Extra ``-q`` count, added to the group's.
        color_mode (str | None): Color mode override.
        no_color (bool): Disable color output.
    """
    apply_command_options(
        ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color
    )
    obj: dict[str, object] = ctx.ensure_object(dict)
    console: ConsoleLike = obj.get("console") or ClickConsole(enable_color=False)  # type: ignore[assignment]

    try:
        config: Config = load_config(base=path, config_path=config_path).with_overrides(
            author=author,
            skip=split_skip_values(skip),
            patch=patch,
            template_dir=template_dir,
        )
    except ConfigError as e:
        raise BoilersuiteConfigError(f"invalid configuration: {e}") from e
    logger.debug("Effective configuration: %s", config)

    try:
        templates: TemplateMap = load_templates(config.author, config.template_dir)
    except TemplateError as e:
        raise BoilersuiteConfigError(f"failed to load templates: {e}") from e

    try:
        targets: list[Path] = resolve_targets(path, templates, config.skipped_dirs)
    except FileNotFoundError as e:
        raise BoilersuiteFileNotFoundError(f"failed to list targets in {str(path)!r}: {e}") from e

    if not targets:
        logger.info("no files to check under %s", path)
        return

    results: list[FileResult] = validate_files(targets, templates, want_patch=config.patch)
    failures: list[FileResult] = [r for r in results if not r.ok]

    if not failures:
        logger.info("all files validated successfully")
        return

    report_failures(console, failures)
    raise BoilersuiteError("at least one file had errors")
