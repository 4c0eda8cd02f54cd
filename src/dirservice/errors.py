"""
Exception types raised by `DirectoryService`.

Every error carries the `operation` that failed and the `path` it was working
on. Errors coming from the OS are chained (`raise ... from err`) so the
original `OSError` stays available as `__cause__`.
"""

from __future__ import annotations


class DirectoryServiceError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, operation: str, path: str, reason: str = "") -> None:
        self.operation: str = operation
        self.path: str = path
        self.reason: str = reason
        message = f"{operation} failed for {path!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class ResourceError(DirectoryServiceError):
    """The OS could not create, inspect, or remove a directory."""


class NotFoundError(DirectoryServiceError):
    """An adopted path does not exist."""


class NotDirectoryError(DirectoryServiceError):
    """An adopted path exists but is not a directory."""


class PathResolutionError(DirectoryServiceError):
    """No relative path can be formed between the base and a given path."""


class WalkError(DirectoryServiceError):
    """The root of an enumeration could not be accessed at all."""
