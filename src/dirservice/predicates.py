"""
Predicates over `EntryInfo` and their composition.

A predicate is any callable taking an `EntryInfo` and returning a bool. It must
be pure: composition is a short-circuiting AND, so the outcome cannot depend on
evaluation order, only the cost does. Put cheap predicates first.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterable

import pathspec

from dirservice.config import DirectoryServiceConfig
from dirservice.defaults import DEFAULT_EXCLUDES
from dirservice.gitignore import load_gitignore
from dirservice.types import EntryInfo

Predicate = Callable[[EntryInfo], bool]


def passes_filters(entry: EntryInfo, filters: Iterable[Predicate]) -> bool:
    """True if every filter accepts `entry`. No filters accepts everything."""
    for check in filters:
        if not check(entry):
            return False
    return True


def is_file(entry: EntryInfo) -> bool:
    return not entry.is_dir


def is_dir(entry: EntryInfo) -> bool:
    return entry.is_dir


def has_extension(extension: str) -> Predicate:
    """Accept non-directory entries whose name ends in `extension` (e.g. `".go"`)."""

    def check(entry: EntryInfo) -> bool:
        return not entry.is_dir and entry.extension == extension

    return check


def not_suffix(suffix: str) -> Predicate:
    """Accept entries whose name does not end with `suffix`."""

    def check(entry: EntryInfo) -> bool:
        return not entry.name.endswith(suffix)

    return check


is_go_file: Predicate = has_extension(".go")
is_not_go_test: Predicate = not_suffix("_test.go")


def _spec_predicate(spec: pathspec.PathSpec, root: str | os.PathLike[str]) -> Predicate:
    """Reject entries whose path relative to `root` matches `spec`."""
    root_str = os.fspath(root)

    def check(entry: EntryInfo) -> bool:
        rel = os.path.relpath(entry.path, root_str)
        if rel == os.curdir or rel == os.pardir or rel.startswith(os.pardir + os.sep):
            return True
        rel = rel.replace(os.sep, "/")
        if entry.is_dir:
            rel += "/"
        return not spec.match_file(rel)

    return check


def not_excluded(
    root: str | os.PathLike[str],
    patterns: Iterable[str] | None = None,
    config: DirectoryServiceConfig | None = None,
) -> Predicate:
    """
    Reject entries under `root` matching gitignore-style `patterns`. Without
    `patterns`, uses `config.effective_exclude` if a config is given, else
    `DEFAULT_EXCLUDES`. A matched directory's descendants are rejected too,
    since directory patterns cover everything beneath them.
    """
    if patterns is not None:
        lines = list(patterns)
    elif config is not None:
        lines = config.effective_exclude
    else:
        lines = list(DEFAULT_EXCLUDES)
    return _spec_predicate(pathspec.GitIgnoreSpec.from_lines(lines), root)


def not_gitignored(directory: str | os.PathLike[str]) -> Predicate:
    """
    Reject entries matched by `directory/.gitignore`. Accepts everything if
    there is no such file.
    """
    spec = load_gitignore(os.fspath(directory))
    if spec is None:
        return lambda entry: True
    return _spec_predicate(spec, directory)
