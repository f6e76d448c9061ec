# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : templates.py
#   file_relpath : src/boilersuite/cli/commands/templates.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""List the loaded boilerplate templates.

Loading every template is also a quick way to validate a custom template
directory: an invalid template makes the command fail with ``CONFIG_ERROR``.

The author and template directory come from the same configuration sources
as for ``check``, discovered from the current directory.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from boilersuite.cli.console import ClickConsole
from boilersuite.cli.errors import BoilersuiteConfigError
from boilersuite.cli.options import CONTEXT_SETTINGS
from boilersuite.config import ConfigError, load_config
from boilersuite.core.patterns import AUTHOR_MARKER
from boilersuite.core.template import TemplateError
from boilersuite.templates.registry import load_templates

if TYPE_CHECKING:
    from boilersuite.config import Config
    from boilersuite.templates.registry import TemplateMap


@click.command(
    name="templates",
    help="List template categories and their header-skip rule.",
    context_settings=CONTEXT_SETTINGS,
)
@click.option(
    "--templates-dir",
    "template_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Read *.boilertmpl templates from this directory instead of the bundled ones.",
)
@click.option(
    "--author",
    default=None,
    help=f"Author substituted for the {AUTHOR_MARKER} marker in the printed templates.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, exists=True, path_type=Path),
    default=None,
    help="Read configuration from this TOML file instead of discovering one.",
)
@click.option(
    "--show",
    "show_text",
    is_flag=True,
    help="Also print each template's text.",
)
@click.pass_context
def templates_command(
    ctx: click.Context,
    *,
    template_dir: Path | None,
    author: str | None,
    config_path: Path | None,
    show_text: bool,
) -> None:
    """Print one line per template category."""
    console = ctx.ensure_object(dict).get("console") or ClickConsole(enable_color=False)

    try:
        config: Config = load_config(base=Path.cwd(), config_path=config_path).with_overrides(
            author=author, template_dir=template_dir
        )
    except ConfigError as e:
        raise BoilersuiteConfigError(f"invalid configuration: {e}") from e

    try:
        templates: TemplateMap = load_templates(config.author, config.template_dir)
    except TemplateError as e:
        raise BoilersuiteConfigError(f"failed to load templates: {e}") from e

    width: int = max(len(category) for category in templates)
    for category in sorted(templates):
        template = templates[category]
        console.print(f"{category:<{width}}  {template.header_skip.value}")
        if show_text:
            console.print(template.text)
