"""
Default values for temporary directories and exclusion patterns.

Exclusion patterns use gitignore syntax. Directory patterns end with `/`.
"""

from __future__ import annotations

# Name prefix for temporary directories, so leftovers are easy to recognize.
DEFAULT_TEMP_PREFIX: str = "DirectoryService"

# Directories that rarely hold anything worth inspecting in a checked-out tree.
DEFAULT_EXCLUDES: list[str] = [
    # Version control
    ".git/",
    ".hg/",
    ".svn/",
    ".bzr/",
    # Python
    ".venv/",
    "venv/",
    "__pycache__/",
    ".tox/",
    ".mypy_cache/",
    ".pytest_cache/",
    "*.egg-info/",
    # JavaScript/Node
    "node_modules/",
    # IDE/Editor
    ".idea/",
    ".vscode/",
    # Other
    "vendor/",
    "third_party/",
]
