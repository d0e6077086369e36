"""Project detection and configuration exports."""

from .detection import detect_project_type, detect_python_framework, python_package_exists
from .identity import DEFAULT_USER_NAME, detect_user_name
from .project_config import ProjectConfig, build_config
from .types import SELECTABLE_TYPES, Framework, ProjectType

__all__ = [
    "DEFAULT_USER_NAME",
    "Framework",
    "ProjectConfig",
    "ProjectType",
    "SELECTABLE_TYPES",
    "build_config",
    "detect_project_type",
    "detect_python_framework",
    "detect_user_name",
    "python_package_exists",
]
