"""3-tier template resolution: type-specific > shared > legacy.

Resolution tiers (checked in order):
1. TYPE_SPECIFIC -- <root>/<project-type>/<name>
2. SHARED        -- <root>/shared/<name>
3. LEGACY        -- <root>/<name> (flat layout of older template packages),
                    only when the root has neither <project-type>/ nor shared/

The type-specific and shared tiers are consulted per logical template. A project can take its guidance
document from the type-specific tier while its command documents come from
the shared tier.
"""

from __future__ import annotations

import importlib.resources
import logging
import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from chiron_cli.core.types import ProjectType

logger = logging.getLogger(__name__)

SHARED_DIR = "shared"
COMMANDS_TEMPLATE_DIR = "commands"
TEMPLATE_ROOT_ENV = "CHIRON_TEMPLATE_ROOT"


# ---------------------------------------------------------------------------
# Public data types
# ---------------------------------------------------------------------------

class TemplateTier(Enum):
    TYPE_SPECIFIC = "type_specific"
    SHARED = "shared"
    LEGACY = "legacy"


@dataclass(frozen=True)
class ResolutionResult:
    path: Path
    tier: TemplateTier


# ---------------------------------------------------------------------------
# Template root discovery
# ---------------------------------------------------------------------------

def get_package_template_root() -> Path:
    """Return the templates directory bundled with the package."""
    try:
        pkg_root = importlib.resources.files("chiron_cli")
        bundled = Path(str(pkg_root)) / "templates"
        if bundled.is_dir():
            return bundled
    except (TypeError, ModuleNotFoundError):
        pass
    return Path(__file__).resolve().parent.parent / "templates"


def get_template_root(override_path: str | Path | None = None) -> Path:
    """Return the directory templates are read from.

    Resolution order:
    1. ``override_path`` (e.g. from the ``--template-root`` option)
    2. CHIRON_TEMPLATE_ROOT environment variable
    3. The package's bundled ``templates/`` directory

    Overrides that do not point at a directory are logged and ignored.
    """
    if override_path:
        override = Path(override_path).expanduser().resolve()
        if override.is_dir():
            return override
        logger.warning("--template-root set to %s, but it is not a directory. Ignoring.", override)

    env_root = os.environ.get(TEMPLATE_ROOT_ENV)
    if env_root:
        root_path = Path(env_root).expanduser().resolve()
        if root_path.is_dir():
            return root_path
        logger.warning("%s set to %s, but it is not a directory. Ignoring.", TEMPLATE_ROOT_ENV, root_path)

    return get_package_template_root()


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------

def _tier_roots(template_root: Path, project_type: ProjectType) -> list[tuple[TemplateTier, Path]]:
    tiers = [
        (TemplateTier.TYPE_SPECIFIC, template_root / project_type.value),
        (TemplateTier.SHARED, template_root / SHARED_DIR),
    ]
    if not any(root.is_dir() for _, root in tiers):
        tiers.append((TemplateTier.LEGACY, template_root))
    return tiers


def resolve_template(
    name: str,
    project_type: ProjectType,
    template_root: Path,
) -> ResolutionResult | None:
    """Resolve a single template file through the tier chain.

    Args:
        name: Path of the template relative to a tier (e.g. ``"CLAUDE.md.j2"``
              or ``"claude/settings.json"``).
        project_type: Project type selecting the type-specific tier.
        template_root: Root containing the tier directories.

    Returns:
        ResolutionResult for the first tier holding the file, or None when
        no tier provides it.
    """
    for tier, root in _tier_roots(template_root, project_type):
        candidate = root / name
        if candidate.is_file():
            logger.debug("Resolved %s from %s tier: %s", name, tier.value, candidate)
            return ResolutionResult(path=candidate, tier=tier)
    logger.debug("Template %s not found under %s", name, template_root)
    return None


def resolve_command_dirs(
    project_type: ProjectType,
    template_root: Path,
) -> list[ResolutionResult]:
    """Return the command template directories to copy, in copy order.

    Shared commands come first and type-specific ones second, so on a path
    collision the type-specific file is written last and wins. The legacy
    ``commands/`` directory is only used when the root has no tier
    directories at all. Missing directories are left out.
    """
    dirs = [
        ResolutionResult(path=root / COMMANDS_TEMPLATE_DIR, tier=tier)
        for tier, root in reversed(_tier_roots(template_root, project_type))
    ]
    return [d for d in dirs if d.path.is_dir()]


__all__ = [
    "COMMANDS_TEMPLATE_DIR",
    "ResolutionResult",
    "SHARED_DIR",
    "TEMPLATE_ROOT_ENV",
    "TemplateTier",
    "get_package_template_root",
    "get_template_root",
    "resolve_command_dirs",
    "resolve_template",
]
