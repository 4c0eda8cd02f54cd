"""
TOML-based config file loading.

Searches for `.dirservice.toml`, `dirservice.toml`, or `pyproject.toml
[tool.dirservice]` walking up from a start directory. Explicit arguments to
`DirectoryService.temporary()` take precedence over config values, which take
precedence over built-in defaults.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, cast

if sys.version_info >= (3, 11):
    import tomllib  # pyright: ignore[reportUnreachable]
else:
    import tomli as tomllib  # type: ignore[no-redef]  # pyright: ignore[reportUnreachable]

from dirservice.defaults import DEFAULT_EXCLUDES


@dataclass
class DirectoryServiceConfig:
    """
    Parsed config. `None` fields mean "not configured", so callers can tell
    an unset value from one explicitly set to the default.

    `exclude=None` means use `DEFAULT_EXCLUDES`; providing a list replaces them
    entirely.
    """

    temp_prefix: str | None = None
    temp_root: str | None = None
    exclude: list[str] | None = None
    extend_exclude: list[str] = field(default_factory=list)

    @property
    def effective_exclude(self) -> list[str]:
        """Combined exclude patterns: defaults (or `exclude`) + `extend_exclude`."""
        base = self.exclude if self.exclude is not None else list(DEFAULT_EXCLUDES)
        return base + self.extend_exclude


# Config file search order (first match wins within each directory level)
_CONFIG_FILENAMES = [".dirservice.toml", "dirservice.toml", "pyproject.toml"]

_VALID_FIELDS = {f.name for f in fields(DirectoryServiceConfig)}


def find_config_file(start_dir: Path) -> Path | None:
    """
    Walk up from `start_dir` looking for a config file. Returns the first
    found, or `None`. `pyproject.toml` only counts if it has
    `[tool.dirservice]`.
    """
    current = start_dir.resolve()
    while True:
        for filename in _CONFIG_FILENAMES:
            candidate = current / filename
            if not candidate.is_file():
                continue
            if filename != "pyproject.toml" or _pyproject_has_section(candidate):
                return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _pyproject_has_section(path: Path) -> bool:
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except (tomllib.TOMLDecodeError, OSError):
        return False
    return "dirservice" in data.get("tool", {})


def load_config(config_path: Path) -> DirectoryServiceConfig:
    """
    Load a `DirectoryServiceConfig` from a TOML file. Keys may be kebab-case
    or snake_case and may sit at top level or one section deep. Unknown keys
    are ignored.
    """
    data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    if config_path.name == "pyproject.toml":
        data = data.get("tool", {}).get("dirservice", {})
    return _parse_config_data(data)


def _parse_config_data(data: dict[str, Any]) -> DirectoryServiceConfig:
    flat: dict[str, Any] = {}
    for key, value in data.items():
        if isinstance(value, dict):
            flat.update(cast(dict[str, Any], value))
        else:
            flat[key] = value

    mapped: dict[str, Any] = {}
    for key, value in flat.items():
        snake_key = key.replace("-", "_")
        if snake_key in _VALID_FIELDS:
            mapped[snake_key] = value

    return DirectoryServiceConfig(**mapped)
