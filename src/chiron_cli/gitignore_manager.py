"""
GitignoreManager module for keeping local Claude settings out of git.

The generated ``.claude/commands/`` tree is meant to be committed and
shared, while everything else under ``.claude/`` (local settings, caches)
is personal. The stanza written here ignores ``.claude/*`` but re-includes
the commands directory.
"""

import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

CLAUDE_PRESENCE_MARKER = ".claude/"

CLAUDE_STANZA = [
    "# Claude Code settings (but allow commands directory)",
    ".claude/*",
    "!.claude/commands/",
]


class GitignoreManager:
    """Manages the Claude stanza of a project's .gitignore."""

    def __init__(self, project_path: Path):
        """
        Initialize GitignoreManager with project root path.

        Args:
            project_path: Root directory of the project

        Raises:
            ValueError: If project_path doesn't exist or isn't a directory
        """
        if not isinstance(project_path, Path):
            project_path = Path(project_path)

        if not project_path.exists():
            raise ValueError(f"Project path does not exist: {project_path}")

        if not project_path.is_dir():
            raise ValueError(f"Project path is not a directory: {project_path}")

        self.project_path = project_path
        self.gitignore_path = project_path / ".gitignore"

    def _read(self) -> Optional[str]:
        """Return .gitignore content, or None if missing or unreadable."""
        if not self.gitignore_path.exists():
            return None
        try:
            with self.gitignore_path.open(encoding="utf-8", newline="") as handle:
                return handle.read()
        except (OSError, UnicodeDecodeError) as exc:
            logger.debug("Could not read %s: %s", self.gitignore_path, exc)
            return None

    def has_claude_entry(self) -> bool:
        """Return True if .gitignore already mentions the .claude/ directory."""
        content = self._read()
        return content is not None and CLAUDE_PRESENCE_MARKER in content

    def ensure_claude_stanza(self) -> bool:
        """
        Append the Claude stanza to an existing .gitignore, exactly once.

        Nothing is written when .gitignore does not exist, cannot be read
        as UTF-8 text, or already mentions ``.claude/`` anywhere.

        Returns:
            True if .gitignore was modified, False otherwise
        """
        content = self._read()
        if content is None or CLAUDE_PRESENCE_MARKER in content:
            return False

        line_ending = self._detect_line_ending(content)
        block = line_ending.join([""] + CLAUDE_STANZA) + line_ending
        if content and not content.endswith(("\n", "\r\n")):
            block = line_ending + block

        with self.gitignore_path.open("a", encoding="utf-8", newline="") as handle:
            handle.write(block)
        return True

    def _detect_line_ending(self, content: str) -> str:
        """
        Detect and return the line ending style used in content.

        Args:
            content: File content to analyze

        Returns:
            Line ending string ('\r\n' for Windows, '\n' for Unix/Mac)
        """
        if '\r\n' in content:
            return '\r\n'
        else:
            return '\n'
