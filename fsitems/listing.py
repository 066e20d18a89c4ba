"""Directory scans plus the two-slot listing cache owned by each ``Folder``.

A slot is either unset (``None``) or holds the names from exactly one past
scan. Filters only shape the returned view and never touch a slot.
"""

from __future__ import annotations

import logging
import os
import re
from collections.abc import Callable
from dataclasses import dataclass

from .errors import NotFoundError, ReadError

logger = logging.getLogger(__name__)

NameFilter = str | re.Pattern[str] | Callable[[str], bool] | None


def compile_name_filter(name_filter: NameFilter) -> Callable[[str], bool]:
    """Turn a pattern, predicate, or ``None`` into a name predicate.

    Strings are compiled as regular expressions and tested with ``search``.
    """
    if name_filter is None:
        return lambda _name: True
    if isinstance(name_filter, str):
        name_filter = re.compile(name_filter)
    if isinstance(name_filter, re.Pattern):
        pattern = name_filter
        return lambda name: pattern.search(name) is not None
    if callable(name_filter):
        return name_filter
    raise TypeError(f"unsupported name filter: {name_filter!r}")


def apply_name_filter(names: list[str], name_filter: NameFilter) -> list[str]:
    """Return a new list with the names accepted by ``name_filter``."""
    accepts = compile_name_filter(name_filter)
    return [name for name in names if accepts(name)]


def _scan(directory: str, keep: Callable[[os.DirEntry[str]], bool], operation: str) -> list[str]:
    names: list[str] = []
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                try:
                    keep_entry = keep(entry)
                except OSError:
                    keep_entry = False
                if keep_entry:
                    names.append(entry.name)
    except (FileNotFoundError, NotADirectoryError) as exc:
        raise NotFoundError(operation, directory, "the folder does not exist") from exc
    except OSError as exc:
        raise ReadError(operation, directory, f"the folder could not be listed ({exc.strerror or exc})") from exc

    names.sort()
    logger.debug("scanned %s: %d entries", directory, len(names))
    return names


def scan_file_names(directory: str) -> list[str]:
    """Return sorted names of the regular files in ``directory``.

    Subdirectories and symbolic links are excluded.
    """
    return _scan(
        directory,
        lambda entry: not entry.is_symlink() and not entry.is_dir(),
        "GetFileNames",
    )


def scan_folder_names(directory: str) -> list[str]:
    """Return sorted names of the subdirectories of ``directory``."""
    return _scan(directory, lambda entry: entry.is_dir(), "GetFolderNames")


@dataclass
class DirectoryListingCache:
    """Cached file-name and folder-name listings for one directory."""

    file_names: list[str] | None = None
    folder_names: list[str] | None = None

    def get_file_names(self, directory: str, name_filter: NameFilter = None, from_cache: bool = True) -> list[str]:
        if not from_cache or self.file_names is None:
            self.file_names = scan_file_names(directory)
        return apply_name_filter(self.file_names, name_filter)

    def get_folder_names(self, directory: str, name_filter: NameFilter = None, from_cache: bool = True) -> list[str]:
        if not from_cache or self.folder_names is None:
            self.folder_names = scan_folder_names(directory)
        return apply_name_filter(self.folder_names, name_filter)

    def invalidate(self) -> None:
        """Drop both slots so the next read scans again."""
        self.file_names = None
        self.folder_names = None


__all__ = [
    "NameFilter",
    "compile_name_filter",
    "apply_name_filter",
    "scan_file_names",
    "scan_folder_names",
    "DirectoryListingCache",
]
