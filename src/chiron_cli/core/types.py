"""Project classification enums."""

from __future__ import annotations

from enum import Enum


class ProjectType(str, Enum):
    """Kind of project found in the target directory."""

    RAILS = "rails"
    PYTHON = "python"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


class Framework(str, Enum):
    """Python web framework sub-classification."""

    DJANGO = "django"
    FASTAPI = "fastapi"
    FLASK = "flask"
    GENERIC = "generic"

    def __str__(self) -> str:
        return self.value


# Types a user may choose explicitly (``--type`` or the interactive menu).
SELECTABLE_TYPES = (ProjectType.RAILS, ProjectType.PYTHON)

__all__ = ["Framework", "ProjectType", "SELECTABLE_TYPES"]
