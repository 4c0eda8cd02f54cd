"""
DirectoryService: a handle over one base directory.

The handle owns a single path string and nothing else. It resolves paths
against that base, enumerates what lies beneath it, and removes it.
"""

from __future__ import annotations

import os
import shutil
import stat
import tempfile
from dataclasses import dataclass
from types import TracebackType

from dirservice.collector import FileCollector
from dirservice.config import DirectoryServiceConfig
from dirservice.defaults import DEFAULT_TEMP_PREFIX
from dirservice.errors import (
    NotDirectoryError,
    NotFoundError,
    PathResolutionError,
    ResourceError,
)
from dirservice.predicates import Predicate
from dirservice.types import WalkResult


def _split(path: str) -> list[str]:
    path = os.path.normpath(path)
    return [] if path == os.curdir else path.split(os.sep)


def _lexical_relpath(target: str, base: str) -> str:
    """Relative path from `base` to `target`, both relative, without touching the filesystem."""
    if os.path.splitdrive(target)[0].lower() != os.path.splitdrive(base)[0].lower():
        raise PathResolutionError("relative_path", target, f"different drive than {base!r}")
    target_parts = _split(target)
    base_parts = _split(base)
    common = 0
    for target_part, base_part in zip(target_parts, base_parts):
        if target_part != base_part:
            break
        common += 1
    remaining_base = base_parts[common:]
    if os.pardir in remaining_base:
        raise PathResolutionError(
            "relative_path", target, f"cannot make it relative to {base!r}"
        )
    parts = [os.pardir] * len(remaining_base) + target_parts[common:]
    return os.path.join(*parts) if parts else os.curdir


@dataclass(frozen=True)
class DirectoryService:
    """
    Handle over a single base directory.

    Build one with `temporary()` or `adopt()`. Calling `cleanup()` removes the
    directory and invalidates the handle: any later call on it is unsupported
    and its behavior is undefined. The handle does no locking, so enumerating
    and cleaning up the same tree from different threads is a caller race.

    As a context manager the handle removes its directory on exit, for
    `adopt()` handles too: `with DirectoryService.adopt(p):` deletes `p`.
    Exit skips removal if the directory is already gone (e.g. the block
    called `cleanup()` itself). If removal fails while the block is raising,
    the `ResourceError` propagates; the block's exception stays in the chain as
    the `__context__` of the underlying `OSError` (the `__cause__`).
    """

    base_path: str

    @classmethod
    def temporary(
        cls,
        prefix: str | None = None,
        root: str | os.PathLike[str] | None = None,
        config: DirectoryServiceConfig | None = None,
    ) -> DirectoryService:
        """
        Create a fresh, uniquely named directory under `root` (default: the
        system temp directory) and return a handle over it.

        Explicit `prefix` and `root` win over `config.temp_prefix` and
        `config.temp_root`.
        """
        if config is not None:
            prefix = prefix if prefix is not None else config.temp_prefix
            root = root if root is not None else config.temp_root
        if prefix is None:
            prefix = DEFAULT_TEMP_PREFIX

        try:
            path = tempfile.mkdtemp(prefix=prefix, dir=root)
        except OSError as err:
            where = os.fspath(root) if root is not None else "<system temp directory>"
            raise ResourceError("create temporary directory", where, str(err)) from err
        return cls(path)

    @classmethod
    def adopt(cls, path: str | os.PathLike[str]) -> DirectoryService:
        """
        Wrap an existing directory. The path is kept exactly as given, with no
        normalization.
        """
        path = os.fspath(path)
        try:
            st = os.stat(path)
        except (FileNotFoundError, NotADirectoryError) as err:
            # NotADirectoryError here means a parent component is a file.
            raise NotFoundError("adopt", path, "no such directory") from err
        except OSError as err:
            raise ResourceError("adopt", path, err.strerror or str(err)) from err
        if not stat.S_ISDIR(st.st_mode):
            raise NotDirectoryError("adopt", path, "not a directory")
        return cls(path)

    def full_path(self, relative: str | os.PathLike[str] = os.curdir) -> str:
        """
        Join `relative` onto the base path and normalize the result. The result
        need not exist. An absolute `relative` replaces the base.
        """
        return os.path.normpath(os.path.join(self.base_path, relative))

    def relative_path(self, full: str | os.PathLike[str]) -> str:
        """
        Express `full` relative to the base path.

        Paths outside the base still succeed, with `..` segments; use
        `strict_relative_path()` or `contains()` when containment matters.
        Raises `PathResolutionError` when the two paths don't share a root:
        one absolute and one relative, or different drives.

        Two relative paths are compared lexically, never against the working
        directory, so a base that climbs out with more leading `..` than
        `full` cannot be resolved and raises.
        """
        full = os.fspath(full)
        if os.path.isabs(full) != os.path.isabs(self.base_path):
            raise PathResolutionError(
                "relative_path", full, f"cannot make it relative to {self.base_path!r}"
            )
        if not os.path.isabs(full):
            return _lexical_relpath(full, self.base_path)
        try:
            return os.path.relpath(full, self.base_path)
        except ValueError as err:
            raise PathResolutionError("relative_path", full, str(err)) from err

    def contains(self, full: str | os.PathLike[str]) -> bool:
        """
        True if `full` is the base path or lies beneath it. The check is
        lexical: symlinks are not resolved.
        """
        try:
            rel = self.relative_path(full)
        except PathResolutionError:
            return False
        return rel != os.pardir and not rel.startswith(os.pardir + os.sep)

    def strict_relative_path(self, full: str | os.PathLike[str]) -> str:
        """Like `relative_path()`, but raise `PathResolutionError` for paths outside the base."""
        rel = self.relative_path(full)
        if rel == os.pardir or rel.startswith(os.pardir + os.sep):
            raise PathResolutionError(
                "strict_relative_path", os.fspath(full), f"outside {self.base_path!r}"
            )
        return rel

    def recurse(self, subdirectory: str | os.PathLike[str], *filters: Predicate) -> list[str]:
        """
        List full paths of every entry under `subdirectory` (including the
        subdirectory itself) that passes all `filters`, in depth-first
        pre-order. Sibling order is not sorted.

        Unreadable nested directories are skipped silently. Raises `WalkError`
        if `subdirectory` itself cannot be accessed.
        """
        return self.recurse_with_report(subdirectory, *filters).paths

    def recurse_with_report(
        self, subdirectory: str | os.PathLike[str], *filters: Predicate
    ) -> WalkResult:
        """Like `recurse()`, but also report which subtrees were skipped."""
        return FileCollector(filters).collect(self.full_path(subdirectory))

    def cleanup(self) -> None:
        """
        Remove the base directory and everything beneath it. The handle is
        invalid afterwards. Removal is not atomic: on `ResourceError` part of
        the tree may already be gone. Calling it again after a successful
        cleanup raises `ResourceError`, since there is nothing left to remove.
        """
        try:
            shutil.rmtree(self.base_path)
        except OSError as err:
            raise ResourceError("cleanup", self.base_path, str(err)) from err

    def __enter__(self) -> DirectoryService:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        if not os.path.lexists(self.base_path):
            # Already removed by an explicit cleanup() inside the block.
            return
        self.cleanup()
