"""Shared base for ``File`` and ``Folder``: a value object over one path.

The current ``path`` is mutated in place by rename/move operations while
``original_path`` keeps the path the item was constructed with. Nothing here
caches filesystem state; derived values are recomputed from ``path``.
"""

from __future__ import annotations

import os
import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TypeVar

from . import names, paths

if TYPE_CHECKING:
    from .folder import Folder

ItemT = TypeVar("ItemT", bound="FileSystemItem")


class FileSystemItem(ABC):
    """A file or folder path plus name parsing and identity helpers."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = paths.normalize_separators(os.fspath(path))
        self.original_path = self.path

    @classmethod
    def instance(cls: type[ItemT], path: str | os.PathLike[str]) -> ItemT:
        """Return ``path`` itself when it already is a ``cls``, otherwise wrap it."""
        if isinstance(path, cls):
            return path
        return cls(path)

    def clone(self: ItemT) -> ItemT:
        """Return an independent item for the current path.

        Use before a rename/move when the pre-move item must be kept.
        """
        return type(self)(self.path)

    # Names

    @property
    def name(self) -> str:
        return paths.base_name(self.path)

    def name_without_extension(self, max_extension_parts: int = 1) -> str:
        return names.name_without_extension(self.name, max_extension_parts)

    def extension(self, max_extension_parts: int = 1) -> str:
        return names.extension(self.name, max_extension_parts)

    # Locations

    @property
    def folder_path(self) -> str:
        """Path of the containing folder."""
        return paths.parent_path(self.path)

    @property
    def parent_folder_path(self) -> str:
        return self.folder_path

    @property
    def parent_folder(self) -> Folder:
        from .folder import Folder

        return Folder(self.parent_folder_path)

    @property
    def containing_folder(self) -> Folder:
        return self.parent_folder

    def real_path(self) -> str | None:
        """Canonical absolute path, or ``None`` when the item does not exist."""
        if not self.exists():
            return None
        return os.path.realpath(self.path)

    def relative_path(self, base_path: str | os.PathLike[str]) -> str:
        """Strip ``base_path`` from the front of ``path``.

        No ``..`` or symlink resolution happens. When ``base_path`` is not a
        literal prefix of ``path`` the path comes back unchanged.
        """
        base = paths.normalize_separators(os.fspath(base_path))
        relative = self.path[len(base) :] if base and self.path.startswith(base) else self.path
        return relative.lstrip(os.sep)

    def relative_folder_path(self, base_path: str | os.PathLike[str]) -> str:
        return paths.parent_path(self.relative_path(base_path))

    # Timestamps

    @property
    def create_time(self) -> float | None:
        """Creation time (birth time where the OS records it), ``None`` if unavailable."""
        try:
            stat = os.stat(self.path)
        except OSError:
            return None
        return float(getattr(stat, "st_birthtime", stat.st_ctime))

    @property
    def modified_time(self) -> float | None:
        try:
            return os.stat(self.path).st_mtime
        except OSError:
            return None

    # Checks

    def is_same(self, other: FileSystemItem | str | os.PathLike[str]) -> bool:
        """Return whether both normalized paths are string-equal."""
        if isinstance(other, FileSystemItem):
            return self.path == other.path
        return self.path == paths.normalize_separators(os.fspath(other))

    def name_matches(self, pattern: str | re.Pattern[str]) -> bool:
        return re.search(pattern, self.name) is not None

    def name_match_parts(self, pattern: str | re.Pattern[str]) -> list[str]:
        """Return the full match followed by every capture group, or ``[]``."""
        match = re.search(pattern, self.name)
        if match is None:
            return []
        return [match.group(0), *(group or "" for group in match.groups())]

    @abstractmethod
    def exists(self) -> bool:
        """Return whether the item currently exists on disk."""

    # Protocols

    def __fspath__(self) -> str:
        return self.path

    def __str__(self) -> str:
        return self.path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.path!r})"


__all__ = ["FileSystemItem"]
