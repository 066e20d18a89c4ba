"""Typed errors raised by file and folder operations.

Each error names the failed operation, the path involved, an optional
target path, and a short reason.
"""

from __future__ import annotations


class FileSystemError(Exception):
    """Base class for every error raised by ``fsitems``."""

    def __init__(self, operation: str, path: str, reason: str, target: str | None = None) -> None:
        self.operation = operation
        self.path = str(path)
        self.reason = reason
        self.target = None if target is None else str(target)
        super().__init__(self._describe())

    def _describe(self) -> str:
        location = f"path: {self.path!r}"
        if self.target is not None:
            location += f", target: {self.target!r}"
        return f"{self.operation}: {self.reason} ({location})"


class NotFoundError(FileSystemError):
    """The operation requires the source to exist and it does not."""


class AlreadyExistsError(FileSystemError):
    """The destination is occupied and overwriting was not requested."""


class TargetMissingError(FileSystemError):
    """A required destination folder does not exist."""


class SameFileError(FileSystemError):
    """Source and destination are the same entry, or one contains the other."""


class ReadError(FileSystemError):
    """Reading failed although the file exists."""


class WriteError(FileSystemError):
    """Writing failed at the OS level."""


class NotAZipArchiveError(FileSystemError):
    """The file could not be opened as a zip archive."""


__all__ = [
    "FileSystemError",
    "NotFoundError",
    "AlreadyExistsError",
    "TargetMissingError",
    "SameFileError",
    "ReadError",
    "WriteError",
    "NotAZipArchiveError",
]
