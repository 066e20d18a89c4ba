"""Folders: factories, cached listings, and folder-level operations.

File and folder names are cached per instance (see
:class:`fsitems.listing.DirectoryListingCache`). Listing calls read from the
cache by default; ``from_cache=False`` rescans and refreshes it.
"""

from __future__ import annotations

import logging
import os
import shutil
from collections.abc import Iterable

from . import archive, paths
from .errors import AlreadyExistsError, NotFoundError, SameFileError
from .file import File
from .item import FileSystemItem
from .listing import DirectoryListingCache, NameFilter

logger = logging.getLogger(__name__)


class Folder(FileSystemItem):
    """A directory addressed by path."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(path)
        self.listing = DirectoryListingCache()

    def exists(self) -> bool:
        return os.path.isdir(self.path)

    # Factories

    def sub_folder(self, name: str) -> Folder:
        return Folder(paths.join_path(self.path, name))

    def file(self, name: str) -> File:
        return File(paths.join_path(self.path, name))

    # Listings

    def get_file_names(self, name_filter: NameFilter = None, from_cache: bool = True) -> list[str]:
        return self.listing.get_file_names(self.path, name_filter, from_cache)

    def get_folder_names(self, name_filter: NameFilter = None, from_cache: bool = True) -> list[str]:
        return self.listing.get_folder_names(self.path, name_filter, from_cache)

    def get_files(self, name_filter: NameFilter = None, from_cache: bool = True) -> list[File]:
        return [self.file(name) for name in self.get_file_names(name_filter, from_cache)]

    def get_folders(self, name_filter: NameFilter = None, from_cache: bool = True) -> list[Folder]:
        return [self.sub_folder(name) for name in self.get_folder_names(name_filter, from_cache)]

    def get_all_files(self, name_filter: NameFilter = None) -> list[File]:
        """Return files at every depth, rescanning each level.

        ``name_filter`` selects files only; every real subfolder is descended.
        Symlinked folders are listed by ``get_folders`` but never walked, so a
        link back to an ancestor can not loop.
        """
        files = self.get_files(name_filter, from_cache=False)
        for folder in self.get_folders(from_cache=False):
            if not os.path.islink(folder.path):
                files.extend(folder.get_all_files(name_filter))
        return files

    all_files = get_all_files

    # Operations

    def create(self, dry_run: bool = False) -> Folder:
        if self.exists():
            return self
        if dry_run:
            logger.debug("dry run: create folder %s", self.path)
            return self
        os.makedirs(self.path, exist_ok=True)
        logger.debug("created folder %s", self.path)
        return self

    def rename(self, new_name: str, dry_run: bool = False) -> Folder:
        """Rename the folder inside its parent."""
        if not self.exists():
            raise NotFoundError("Rename", self.path, "the folder does not exist")
        destination = paths.join_path(self.parent_folder_path, new_name)
        if destination == self.path:
            return self
        if os.path.lexists(destination):
            raise AlreadyExistsError("Rename", self.path, "the destination already exists", destination)

        self._relocate(destination, "rename", dry_run)
        return self

    def move(self, new_parent_folder: Folder | str | os.PathLike[str], overwrite: bool = False, dry_run: bool = False) -> Folder:
        """Move the folder into ``new_parent_folder``, creating it when missing.

        With ``overwrite`` an existing folder of the same name in the new
        parent is removed first. Moving onto the folder itself (under any
        spelling) is a no-op; a destination that contains the folder, or lies
        inside it, raises :class:`SameFileError` before anything is removed.
        """
        if not self.exists():
            raise NotFoundError("Move", self.path, "the folder does not exist")
        parent_path = paths.normalize_separators(os.fspath(new_parent_folder))
        destination = paths.join_path(parent_path, self.name)
        if destination == self.path or (os.path.exists(destination) and os.path.samefile(self.path, destination)):
            return self
        if _overlaps(self.path, destination):
            raise SameFileError("Move", self.path, "the destination overlaps the folder", destination)
        if os.path.lexists(destination) and not overwrite:
            raise AlreadyExistsError("Move", self.path, "a folder with the same name already exists", destination)
        if not dry_run:
            os.makedirs(parent_path, exist_ok=True)
            if os.path.isdir(destination) and not os.path.islink(destination):
                shutil.rmtree(destination)
            elif os.path.lexists(destination):
                os.unlink(destination)
        self._relocate(destination, "move", dry_run)
        return self

    def move_files_to_self(self, files: Iterable[File | str | os.PathLike[str]], dry_run: bool = False) -> Folder:
        """Move each file into this folder in turn.

        There is no rollback: a failure leaves earlier files moved.
        """
        for file in files:
            File.instance(file).move_to(self.path, dry_run=dry_run)
        return self

    def delete(self, deep: bool = False, dry_run: bool = False) -> Folder:
        """Remove the folder; absence is not an error.

        Without ``deep`` a non-empty folder makes the OS removal fail and that
        ``OSError`` propagates. With ``deep`` contents are removed first:
        files and links, then subfolders (post-order).
        """
        if not self.exists():
            return self
        if dry_run:
            logger.debug("dry run: delete folder %s (deep=%s)", self.path, deep)
            return self

        if deep:
            with os.scandir(self.path) as entries:
                children = list(entries)
            for entry in children:
                if entry.is_symlink() or not entry.is_dir():
                    os.unlink(entry.path)
            for entry in children:
                if not entry.is_symlink() and entry.is_dir():
                    self.sub_folder(entry.name).delete(deep=True)

        os.rmdir(self.path)
        self.listing.invalidate()
        logger.debug("deleted folder %s", self.path)
        return self

    # Checks

    def has_file(self, name: str) -> bool:
        return self.file(name).exists()

    def has_sub_folder(self, name: str) -> bool:
        return self.sub_folder(name).exists()

    def has_files(self, names: Iterable[str]) -> bool:
        return all(self.has_file(name) for name in names)

    def has_sub_folders(self, names: Iterable[str]) -> bool:
        return all(self.has_sub_folder(name) for name in names)

    def is_empty(self, force_refresh: bool = False) -> bool:
        from_cache = not force_refresh
        return not self.get_file_names(from_cache=from_cache) and not self.get_folder_names(from_cache=from_cache)

    def is_not_empty(self, force_refresh: bool = False) -> bool:
        return not self.is_empty(force_refresh)

    # Archives

    def zip(self, include_root: bool = True) -> File:
        """Archive into ``<name>.zip`` next to the folder."""
        return self.zip_to(self.parent_folder.file(f"{self.name}.zip"), include_root)

    def zip_to(self, destination: File | str | os.PathLike[str], include_root: bool = True) -> File:
        zip_file = File.instance(destination)
        if not self.exists():
            raise NotFoundError("Zip", self.path, "the folder does not exist", zip_file.path)
        Folder(zip_file.folder_path or os.curdir).create()
        archive.zip_folder(self.path, zip_file.path, include_root)
        return zip_file

    # Helpers

    def _relocate(self, destination: str, verb: str, dry_run: bool) -> None:
        if dry_run:
            logger.debug("dry run: %s %s -> %s", verb, self.path, destination)
        else:
            os.rename(self.path, destination)
            logger.debug("%s %s -> %s", verb, self.path, destination)
        self.path = destination


def _overlaps(source: str, destination: str) -> bool:
    """Return whether one resolved path is the other or one of its ancestors.

    The last component of ``destination`` is not resolved, so a link there
    is judged as the link itself.
    """
    source_real = os.path.realpath(source)
    head, tail = os.path.split(destination)
    destination_real = os.path.join(os.path.realpath(head or os.curdir), tail)
    try:
        common = os.path.commonpath([source_real, destination_real])
    except ValueError:
        return False
    return common in (source_real, destination_real)


__all__ = ["Folder"]
