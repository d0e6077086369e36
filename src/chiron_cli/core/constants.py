"""Shared path constants for the generated Claude project layout."""

from __future__ import annotations

CLAUDE_DIR = ".claude"
COMMANDS_DIR = ".claude/commands"
SETTINGS_FILE = ".claude/settings.json"
GUIDANCE_FILE = "CLAUDE.md"
TASKS_DIR = "tasks"
DOCS_DIR = "docs"
JOURNAL_FILE = "docs/development_journal.md"
CURSOR_RULES_DIR = ".cursor/rules"

COMMAND_SUBDIRS = ("workflows", "conventions", "context", "journal", "quality")

# Created by the command surface before any template is copied.
PROJECT_DIRECTORIES = tuple(f"{COMMANDS_DIR}/{sub}" for sub in COMMAND_SUBDIRS) + (
    TASKS_DIR,
    DOCS_DIR,
)

__all__ = [
    "CLAUDE_DIR",
    "COMMANDS_DIR",
    "COMMAND_SUBDIRS",
    "CURSOR_RULES_DIR",
    "DOCS_DIR",
    "GUIDANCE_FILE",
    "JOURNAL_FILE",
    "PROJECT_DIRECTORIES",
    "SETTINGS_FILE",
    "TASKS_DIR",
]
