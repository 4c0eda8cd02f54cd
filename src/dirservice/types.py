"""Entry metadata and walk result types."""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field


@dataclass(frozen=True)
class EntryInfo:
    """
    Metadata for one visited filesystem node. Symlinks are never followed:
    `is_dir` is false for a symlink pointing at a directory.
    """

    name: str
    path: str
    is_dir: bool
    is_symlink: bool = False

    @property
    def extension(self) -> str:
        """Extension including the leading dot (e.g. `.go`), or `""`."""
        return os.path.splitext(self.name)[1]

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry[str]) -> EntryInfo:
        return cls(
            name=entry.name,
            path=entry.path,
            is_dir=entry.is_dir(follow_symlinks=False),
            is_symlink=entry.is_symlink(),
        )

    @classmethod
    def from_stat(cls, path: str, st: os.stat_result) -> EntryInfo:
        return cls(
            name=os.path.basename(path),
            path=path,
            is_dir=stat.S_ISDIR(st.st_mode),
            is_symlink=os.path.islink(path),
        )


@dataclass(frozen=True)
class SkippedPath:
    """A directory whose contents could not be listed during a walk."""

    path: str
    error: OSError


@dataclass
class WalkResult:
    """
    Outcome of a recursive enumeration. `paths` holds accepted full paths in
    visitation order; `skipped` lists subtrees that could not be read. An empty
    `skipped` means the enumeration was complete.
    """

    paths: list[str] = field(default_factory=list)
    skipped: list[SkippedPath] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.skipped
