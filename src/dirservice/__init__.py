"""
A handle over one filesystem directory: create or adopt it, resolve paths
against it, enumerate its contents through composable predicates, and remove it.

Handy for things like temporarily cloning a Git repository and inspecting it.

Usage::

    from dirservice import DirectoryService, has_extension, not_suffix

    with DirectoryService.temporary() as workdir:
        ...  # populate workdir.base_path
        sources = workdir.recurse(".", has_extension(".go"), not_suffix("_test.go"))
        relative = [workdir.relative_path(p) for p in sources]
"""

from dirservice.config import DirectoryServiceConfig, find_config_file, load_config
from dirservice.defaults import DEFAULT_EXCLUDES, DEFAULT_TEMP_PREFIX
from dirservice.errors import (
    DirectoryServiceError,
    NotDirectoryError,
    NotFoundError,
    PathResolutionError,
    ResourceError,
    WalkError,
)
from dirservice.predicates import (
    Predicate,
    has_extension,
    is_dir,
    is_file,
    is_go_file,
    is_not_go_test,
    not_excluded,
    not_gitignored,
    not_suffix,
    passes_filters,
)
from dirservice.service import DirectoryService
from dirservice.types import EntryInfo, SkippedPath, WalkResult

__all__ = [
    "DEFAULT_EXCLUDES",
    "DEFAULT_TEMP_PREFIX",
    "DirectoryService",
    "DirectoryServiceConfig",
    "DirectoryServiceError",
    "EntryInfo",
    "NotDirectoryError",
    "NotFoundError",
    "PathResolutionError",
    "Predicate",
    "ResourceError",
    "SkippedPath",
    "WalkError",
    "WalkResult",
    "find_config_file",
    "has_extension",
    "is_dir",
    "is_file",
    "is_go_file",
    "is_not_go_test",
    "load_config",
    "not_excluded",
    "not_gitignored",
    "not_suffix",
    "passes_filters",
]
