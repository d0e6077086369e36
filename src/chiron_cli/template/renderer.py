"""Sandboxed Jinja2 rendering for bundled documentation templates.

Templates see plain data only: the variables built by the caller plus the
project configuration values. Variable substitution and ``{% if %}`` blocks
keyed on project type and framework are all the templates need; the
sandbox rejects attribute access to anything unsafe, and StrictUndefined
turns a misspelled variable into an error instead of an empty string.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path
from typing import Any, Mapping

from jinja2 import StrictUndefined, TemplateError
from jinja2.sandbox import SandboxedEnvironment

from chiron_cli.errors import TemplateRenderError

TEMPLATE_SUFFIX = ".j2"

_SYNTAX_RE = re.compile(r"\{\{|\{%|\{#")

_ENV = SandboxedEnvironment(
    autoescape=False,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
    undefined=StrictUndefined,
)


def has_template_syntax(text: str) -> bool:
    """Return True if *text* contains any Jinja2 delimiter."""
    return _SYNTAX_RE.search(text) is not None


def output_name(template_path: Path) -> str:
    """Destination filename for a template (``CLAUDE.md.j2`` -> ``CLAUDE.md``)."""
    name = template_path.name
    if name.endswith(TEMPLATE_SUFFIX):
        return name[: -len(TEMPLATE_SUFFIX)]
    return name


def render_string(text: str, context: Mapping[str, Any], name: str = "<string>") -> str:
    """Render template *text* with *context*.

    Raises:
        TemplateRenderError: If the template is malformed, references an
            undefined variable, or trips the sandbox.
    """
    try:
        return _ENV.from_string(text).render(**context)
    except TemplateError as exc:
        raise TemplateRenderError(f"Failed to render {name}: {exc}") from exc


def render_file(source: Path, dest: Path, context: Mapping[str, Any]) -> Path:
    """Render *source* into *dest*, creating dest's parent directory.

    Files without placeholder syntax (or that are not UTF-8 text) are
    copied byte-for-byte.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    try:
        text = source.read_text(encoding="utf-8")
    except UnicodeDecodeError:
        shutil.copy2(source, dest)
        return dest

    if not has_template_syntax(text):
        shutil.copy2(source, dest)
        return dest

    dest.write_text(render_string(text, context, name=str(source)), encoding="utf-8")
    return dest


__all__ = [
    "TEMPLATE_SUFFIX",
    "has_template_syntax",
    "output_name",
    "render_file",
    "render_string",
]
