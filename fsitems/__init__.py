"""Public package surface for fsitems.

``File`` and ``Folder`` wrap raw paths with name parsing, cached folder
listings, and file/folder operations. Path helpers live in
``fsitems.paths``; typed errors in ``fsitems.errors``.
"""

from __future__ import annotations

import os

from .errors import (
    AlreadyExistsError,
    FileSystemError,
    NotAZipArchiveError,
    NotFoundError,
    ReadError,
    SameFileError,
    TargetMissingError,
    WriteError,
)
from .file import File
from .folder import Folder
from .item import FileSystemItem
from .listing import DirectoryListingCache, NameFilter


def as_folder(path: Folder | str | os.PathLike[str]) -> Folder:
    """Return ``path`` as a ``Folder``, reusing an existing instance."""
    return Folder.instance(path)


def as_file(path: File | str | os.PathLike[str]) -> File:
    """Return ``path`` as a ``File``, reusing an existing instance."""
    return File.instance(path)


__all__ = [
    "File",
    "Folder",
    "FileSystemItem",
    "DirectoryListingCache",
    "NameFilter",
    "FileSystemError",
    "NotFoundError",
    "AlreadyExistsError",
    "TargetMissingError",
    "SameFileError",
    "ReadError",
    "WriteError",
    "NotAZipArchiveError",
    "as_folder",
    "as_file",
]
