"""
Recursive, filtered tree collection.

Walks a directory tree depth-first in pre-order: every entry is reported before
its children, siblings in whatever order the OS lists them. Symlinks are
reported but never followed, so the walk cannot loop.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator, Sequence

from dirservice.errors import WalkError
from dirservice.predicates import Predicate, passes_filters
from dirservice.types import EntryInfo, SkippedPath, WalkResult

logger = logging.getLogger(__name__)


def _list_dir(path: str) -> list[EntryInfo]:
    with os.scandir(path) as it:
        return [EntryInfo.from_dir_entry(entry) for entry in it]


class FileCollector:
    """
    Accumulates the full paths of visited entries that pass all filters.

    A nested directory that cannot be listed is skipped and recorded in
    `skipped`; the rest of the tree is still walked. Only an inaccessible
    walk root is fatal (`WalkError`).
    """

    def __init__(self, filters: Sequence[Predicate] = ()) -> None:
        self._filters: tuple[Predicate, ...] = tuple(filters)
        self.files: list[str] = []
        self.skipped: list[SkippedPath] = []

    def collect(self, root: str) -> WalkResult:
        try:
            root_entry = EntryInfo.from_stat(root, os.stat(root))
        except OSError as err:
            raise WalkError("recurse", root, err.strerror or str(err)) from err

        self._visit(root_entry)
        if not root_entry.is_dir:
            return self.result()

        try:
            children = _list_dir(root)
        except OSError as err:
            raise WalkError("recurse", root, err.strerror or str(err)) from err

        for entry in self._descend(children):
            self._visit(entry)
        return self.result()

    def result(self) -> WalkResult:
        return WalkResult(paths=list(self.files), skipped=list(self.skipped))

    def _visit(self, entry: EntryInfo) -> None:
        if passes_filters(entry, self._filters):
            self.files.append(entry.path)

    def _descend(self, children: list[EntryInfo]) -> Iterator[EntryInfo]:
        # Explicit stack of sibling iterators, so depth isn't bound by recursion limits.
        stack: list[Iterator[EntryInfo]] = [iter(children)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue
            yield entry
            if not entry.is_dir or entry.is_symlink:
                continue
            try:
                grandchildren = _list_dir(entry.path)
            except OSError as err:
                logger.debug("Skipping unreadable directory %s: %s", entry.path, err)
                self.skipped.append(SkippedPath(entry.path, err))
                continue
            stack.append(iter(grandchildren))
