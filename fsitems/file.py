"""Files: contents, metadata, and copy/move/rename operations.

Every mutating operation checks its preconditions before touching storage.
With ``dry_run=True`` nothing is written; rename/move still update ``path``
to the intended destination so callers can preview the result.
"""

from __future__ import annotations

import hashlib
import logging
import os
import shutil
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from . import archive, paths
from .config import load_settings
from .errors import AlreadyExistsError, NotFoundError, ReadError, SameFileError, TargetMissingError, WriteError
from .item import FileSystemItem
from .sizes import human_readable_size

if TYPE_CHECKING:
    from .folder import Folder

logger = logging.getLogger(__name__)

BACKUP_SUFFIX = "backup"
BACKUP_COUNTER_WIDTH = 3


class File(FileSystemItem):
    """A regular file addressed by path."""

    def exists(self) -> bool:
        return os.path.isfile(self.path)

    @property
    def folder(self) -> Folder:
        return self.parent_folder

    # Contents and metadata

    def read_bytes(self) -> bytes:
        self._require_exists("Read")
        try:
            with open(self.path, "rb") as handle:
                return handle.read()
        except OSError as exc:
            raise ReadError("Read", self.path, f"the file could not be read ({exc.strerror or exc})") from exc

    def contents(self) -> str:
        """Return the whole file decoded with the configured text encoding."""
        return self._decode(self.read_bytes(), load_settings().text_encoding)

    def contains(self, substring: str) -> bool:
        return substring in self.contents()

    def size(self) -> int:
        self._require_exists("Size")
        return os.path.getsize(self.path)

    def human_readable_size(self) -> str:
        return human_readable_size(self.size())

    def hash(self) -> str:
        """SHA-256 hex digest of the contents, streamed in chunks."""
        self._require_exists("Hash")
        chunk_size = load_settings().hash_chunk_size
        digest = hashlib.sha256()
        try:
            with open(self.path, "rb") as handle:
                for chunk in iter(lambda: handle.read(chunk_size), b""):
                    digest.update(chunk)
        except OSError as exc:
            raise ReadError("Hash", self.path, f"the file could not be read ({exc.strerror or exc})") from exc
        return digest.hexdigest()

    # Lifecycle

    def create(self, dry_run: bool = False) -> File:
        """Create an empty file (and its folders) unless it already exists."""
        if self.exists():
            return self
        if dry_run:
            logger.debug("dry run: create %s", self.path)
            return self
        self._create_folder()
        self._write(b"", mode="ab", operation="Create")
        logger.debug("created %s", self.path)
        return self

    def touch(self, dry_run: bool = False) -> File:
        """Bump the modification time, creating the file when missing."""
        if not self.exists():
            return self.create(dry_run)
        if dry_run:
            logger.debug("dry run: touch %s", self.path)
            return self
        os.utime(self.path)
        logger.debug("touched %s", self.path)
        return self

    def delete(self, dry_run: bool = False) -> File:
        """Remove the file; absence is not an error."""
        if not self.exists():
            return self
        if dry_run:
            logger.debug("dry run: delete %s", self.path)
            return self
        os.unlink(self.path)
        logger.debug("deleted %s", self.path)
        return self

    def rename(
        self,
        new_name: str,
        preserve_extension: bool = False,
        max_extension_parts: int = 1,
        dry_run: bool = False,
    ) -> File:
        """Rename the file inside its folder.

        With ``preserve_extension`` the current extension (up to
        ``max_extension_parts`` parts) is appended to ``new_name``.
        """
        self._require_exists("Rename")
        suffix = self.extension(max_extension_parts) if preserve_extension else ""
        target_name = f"{new_name}.{suffix}" if suffix else new_name
        destination = paths.join_path(self.folder_path, target_name)
        if destination == self.path:
            return self
        if os.path.lexists(destination):
            raise AlreadyExistsError("Rename", self.path, "the destination already exists", destination)

        self._relocate(destination, "rename", dry_run)
        return self

    def move_to(self, target_folder: Folder | str | os.PathLike[str], overwrite: bool = False, dry_run: bool = False) -> File:
        """Move the file into ``target_folder`` keeping its name."""
        self._require_exists("MoveTo")
        folder_path = paths.normalize_separators(os.fspath(target_folder))
        destination = paths.join_path(folder_path, self.name)
        if destination == self.path or self._is_same_entry(destination):
            return self
        if not os.path.isdir(folder_path):
            raise TargetMissingError("MoveTo", self.path, "the destination folder does not exist", folder_path)
        if os.path.lexists(destination) and not overwrite:
            raise AlreadyExistsError("MoveTo", self.path, "the destination file already exists", destination)

        self._relocate(destination, "move", dry_run)
        return self

    def copy(self, target: File | str | os.PathLike[str], overwrite: bool = False, dry_run: bool = False) -> File:
        """Copy to ``target`` and return the new file; this item is left untouched."""
        self._require_exists("Copy")
        target_file = File.instance(target)
        if target_file.is_same(self) or self._is_same_entry(target_file.path):
            raise SameFileError("Copy", self.path, "the file can not be copied onto itself", target_file.path)
        if os.path.lexists(target_file.path) and not overwrite:
            raise AlreadyExistsError("Copy", self.path, "the destination file already exists", target_file.path)
        if dry_run:
            logger.debug("dry run: copy %s -> %s", self.path, target_file.path)
            return target_file

        target_file._create_folder()
        shutil.copyfile(self.path, target_file.path)
        logger.debug("copied %s -> %s", self.path, target_file.path)
        return target_file

    def backup(self, dry_run: bool = False) -> File:
        """Copy the file to the first free ``<path>.backup`` / ``<path>.NNN.backup``."""
        self._require_exists("Backup")
        destination = File(self._next_backup_path())
        if dry_run:
            logger.debug("dry run: backup %s -> %s", self.path, destination.path)
            return destination
        return self.copy(destination)

    def _next_backup_path(self) -> str:
        candidate = f"{self.path}.{BACKUP_SUFFIX}"
        counter = 0
        while os.path.lexists(candidate):
            counter += 1
            candidate = f"{self.path}.{counter:0{BACKUP_COUNTER_WIDTH}d}.{BACKUP_SUFFIX}"
        return candidate

    # Contents management

    def put_contents(self, contents: str | bytes, dry_run: bool = False) -> File:
        """Write ``contents``, replacing any existing data and creating folders."""
        if dry_run:
            logger.debug("dry run: write %s", self.path)
            return self
        data = contents if isinstance(contents, bytes) else contents.encode(load_settings().text_encoding)
        return self._put_data(data)

    def copy_contents_from_file(self, source: File | str | os.PathLike[str], dry_run: bool = False) -> File:
        File.instance(source).copy_contents_to_file(self, dry_run)
        return self

    def copy_contents_to_file(self, destination: File | str | os.PathLike[str], dry_run: bool = False) -> File:
        self._require_exists("CopyContentsToFile")
        File.instance(destination).put_contents(self.read_bytes(), dry_run)
        return self

    def replace_in_file(
        self,
        replacements: Mapping[str, str] | Iterable[tuple[str, str]],
        dry_run: bool = False,
    ) -> File:
        """Apply search/replace pairs in order, each on the previous result."""
        self._require_exists("ReplaceInFile")
        pairs = replacements.items() if isinstance(replacements, Mapping) else replacements
        encoding = load_settings().text_encoding
        contents = self._decode(self.read_bytes(), encoding)
        for search, replacement in pairs:
            contents = contents.replace(search, replacement)
        if dry_run:
            logger.debug("dry run: write %s", self.path)
            return self
        return self._put_data(contents.encode(encoding))

    # Archives

    def zip(self) -> File:
        """Archive into ``<name>.zip`` next to the file."""
        return self.zip_to(self.parent_folder.file(f"{self.name}.zip"))

    def zip_to(self, destination: File | str | os.PathLike[str]) -> File:
        self._require_exists("Zip")
        zip_file = File.instance(destination)
        zip_file._create_folder()
        archive.zip_file(self.path, zip_file.path)
        return zip_file

    def is_zip_archive(self) -> bool:
        return self.exists() and archive.is_zip_archive(self.path)

    def unzip(self) -> Folder:
        """Extract into the folder holding the archive."""
        return self.unzip_to(self.parent_folder)

    def unzip_to(self, destination_folder: Folder | str | os.PathLike[str]) -> Folder:
        from .folder import Folder

        self._require_exists("Unzip")
        destination = Folder.instance(destination_folder).create()
        archive.unzip(self.path, destination.path)
        return destination

    # Helpers

    def _require_exists(self, operation: str) -> None:
        if not self.exists():
            raise NotFoundError(operation, self.path, "the file does not exist")

    def _is_same_entry(self, other_path: str) -> bool:
        return os.path.exists(other_path) and os.path.samefile(self.path, other_path)

    def _decode(self, data: bytes, encoding: str) -> str:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError as exc:
            raise ReadError("Read", self.path, f"the file could not be decoded as {encoding} ({exc.reason})") from exc

    def _put_data(self, data: bytes) -> File:
        self._create_folder()
        self._write(data, mode="wb", operation="PutContents")
        logger.debug("wrote %d bytes to %s", len(data), self.path)
        return self

    def _create_folder(self) -> None:
        folder_path = self.folder_path
        if folder_path:
            os.makedirs(folder_path, exist_ok=True)

    def _write(self, data: bytes, mode: str, operation: str) -> None:
        try:
            with open(self.path, mode) as handle:
                handle.write(data)
        except OSError as exc:
            raise WriteError(operation, self.path, f"the file could not be written ({exc.strerror or exc})") from exc

    def _relocate(self, destination: str, verb: str, dry_run: bool) -> None:
        if dry_run:
            logger.debug("dry run: %s %s -> %s", verb, self.path, destination)
        else:
            os.replace(self.path, destination)
            logger.debug("%s %s -> %s", verb, self.path, destination)
        self.path = destination


__all__ = ["File"]
