"""Exception hierarchy for chiron scaffolding operations."""

from __future__ import annotations

from typing import Iterable


class ChironError(Exception):
    """Base exception for user-facing chiron errors."""
    pass


class IncompatibleProjectError(ChironError):
    """The target directory does not match what the command expects."""
    pass


class UnknownWorkflowError(ChironError):
    """A workflow name is not present in the template catalog."""

    def __init__(self, name: str, available: Iterable[str]):
        """Initialize UnknownWorkflowError.

        Args:
            name: The workflow name that was requested
            available: Workflow names that do exist in the catalog
        """
        self.name = name
        self.available = sorted(available)
        super().__init__(f"Unknown workflow: {name}")


class TemplateRenderError(ChironError):
    """A template could not be rendered with the given context."""
    pass


__all__ = [
    "ChironError",
    "IncompatibleProjectError",
    "TemplateRenderError",
    "UnknownWorkflowError",
]
