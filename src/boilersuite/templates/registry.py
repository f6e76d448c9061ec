# boilersuite:header:start
#
#   project      : Boilersuite
#   file         : registry.py
#   file_relpath : src/boilersuite/templates/registry.py
#   license      : Apache-2.0
#   copyright    : (c) 2025 The Boilersuite Authors
#
# boilersuite:header:end

"""Load boilerplate templates and resolve the template for a path.

Template files are named ``boilerplate.<category>.boilertmpl``. The category
is either a file extension (``go``, ``py``) or a file name prefix
(``Dockerfile``, ``Makefile``).

Notes:
    * Templates are read as bytes and decoded as UTF-8 so Windows line
      endings are detected rather than silently translated.
    * Any invalid template aborts loading; a broken template would make every
      verdict for its category meaningless.
"""

from __future__ import annotations

import os
from importlib.resources import files
from typing import TYPE_CHECKING

from boilersuite.config.logging import get_logger
from boilersuite.constants import TEMPLATE_SUFFIX, TEMPLATES_DIR_NAME, TEMPLATES_PACKAGE
from boilersuite.core.template import Template, TemplateError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from importlib.resources.abc import Traversable
    from pathlib import Path

    from boilersuite.config.logging import BoilersuiteLogger

logger: BoilersuiteLogger = get_logger(__name__)


class TemplateMap(dict[str, Template]):
    """Templates keyed by file category."""

    def template_for(self, path: str | os.PathLike[str]) -> Template | None:
        """Return the template matching ``path``, if any.

        The suffix after the last dot of the file name is tried first, then
        the part of the file name before the first dot (so ``Dockerfile.linux``
        matches the ``Dockerfile`` template).

        Args:
            path (str | os.PathLike[str]): File path; only its base name is used.

        Returns:
            Template | None: The matching template, or ``None``.
        """
        base: str = os.path.basename(os.fspath(path))

        ext: str = base.rsplit(".", 1)[1] if "." in base else ""
        tmpl: Template | None = self.get(ext)
        if tmpl is not None:
            return tmpl

        name: str = base.split(".", 1)[0]
        return self.get(name)


def category_for(file_name: str) -> str:
    """Return the category encoded in a template file name.

    ``boilerplate.go.boilertmpl`` → ``go``.
    """
    trimmed: str = file_name.removesuffix(TEMPLATE_SUFFIX)
    return trimmed.rsplit(".", 1)[1] if "." in trimmed else ""


def _iter_bundled_sources() -> Iterable[tuple[str, bytes]]:
    root: Traversable = files(TEMPLATES_PACKAGE).joinpath(TEMPLATES_DIR_NAME)
    for entry in sorted(root.iterdir(), key=lambda e: e.name):
        if entry.is_file() and entry.name.endswith(TEMPLATE_SUFFIX):
            yield entry.name, entry.read_bytes()


def _iter_dir_sources(template_dir: Path) -> Iterable[tuple[str, bytes]]:
    for entry in sorted(template_dir.glob(f"*{TEMPLATE_SUFFIX}")):
        if entry.is_file():
            yield entry.name, entry.read_bytes()


def load_templates(expected_author: str, template_dir: Path | None = None) -> TemplateMap:
    """Read all templates and return them keyed by category.

    Args:
        expected_author (str): Substituted for the author marker.
        template_dir (Path | None): Directory to read ``*.boilertmpl`` files
            from; the bundled templates are used when ``None``.

    Returns:
        TemplateMap: The loaded templates.

    Raises:
        TemplateError: If no template is found or any template is invalid.
    """
    if template_dir is not None:
        if not template_dir.is_dir():
            raise TemplateError(f"template directory {str(template_dir)!r} does not exist")
        sources: Iterable[tuple[str, bytes]] = _iter_dir_sources(template_dir)
        origin: str = str(template_dir)
    else:
        sources = _iter_bundled_sources()
        origin = f"{TEMPLATES_PACKAGE}/{TEMPLATES_DIR_NAME}"

    out = TemplateMap()
    for name, raw in sources:
        category: str = category_for(name)
        if not category:
            raise TemplateError(f"invalid template name {name!r}: no category")
        try:
            content: str = raw.decode("utf-8")
            template: Template = Template.from_source(content, category, expected_author)
        except (UnicodeDecodeError, TemplateError) as e:
            raise TemplateError(f"invalid template {name!r}: {e}") from e
        if category in out:
            logger.warning("Template %r overrides an earlier template for %r", name, category)
        out[category] = template

    if not out:
        raise TemplateError(f"found no templates in {origin}")

    logger.debug("Loaded %d template(s) from %s: %s", len(out), origin, ", ".join(sorted(out)))
    return out
