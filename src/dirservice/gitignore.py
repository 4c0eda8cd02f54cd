"""Gitignore file loading using pathspec."""

from __future__ import annotations

from pathlib import Path

import pathspec


def _read_ignore_file(path: Path) -> list[str] | None:
    """
    Read pattern lines from an ignore file, dropping blanks and comments.
    Returns `None` if the file is missing, unreadable, or not valid UTF-8.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return [line for line in text.splitlines() if line.strip() and not line.strip().startswith("#")]


def load_gitignore(directory: str | Path) -> pathspec.PathSpec | None:
    """
    Read `.gitignore` in the given directory and return a compiled `PathSpec`,
    or `None` if the file doesn't exist or has no patterns.
    """
    lines = _read_ignore_file(Path(directory) / ".gitignore")
    if not lines:
        return None
    return pathspec.GitIgnoreSpec.from_lines(lines)
