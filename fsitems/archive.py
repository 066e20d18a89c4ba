"""Zip archive creation and extraction delegated to :mod:`zipfile`.

Functions take plain path strings so both ``File`` and ``Folder`` can use
them. Entry names inside an archive always use ``/``.
"""

from __future__ import annotations

import logging
import os
import zipfile

from .errors import NotAZipArchiveError, NotFoundError

logger = logging.getLogger(__name__)


def is_zip_archive(path: str) -> bool:
    """Return whether ``path`` opens as a zip archive."""
    try:
        with zipfile.ZipFile(path) as archive:
            archive.namelist()
    except (OSError, zipfile.BadZipFile):
        return False
    return True


def zip_file(source_path: str, zip_path: str) -> None:
    """Write an archive at ``zip_path`` holding one file under its base name.

    An existing archive at ``zip_path`` is overwritten.
    """
    if not os.path.isfile(source_path):
        raise NotFoundError("Zip", source_path, "the file to archive does not exist", zip_path)
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        archive.write(source_path, os.path.basename(os.path.realpath(source_path)))
    logger.debug("zipped file %s -> %s", source_path, zip_path)


def iter_folder_entries(folder_path: str, include_root: bool = True) -> list[tuple[str, str]]:
    """Return ``(absolute_path, archive_name)`` for every regular file below ``folder_path``.

    Archive names are relative to the folder, prefixed with the folder's own
    name when ``include_root`` is set. Entries are sorted for stable archives.
    """
    root = os.path.realpath(folder_path)
    root_name = os.path.basename(root)
    entries: list[tuple[str, str]] = []
    for directory, dir_names, file_names in os.walk(root):
        dir_names.sort()
        for file_name in sorted(file_names):
            absolute = os.path.join(directory, file_name)
            if not os.path.isfile(absolute):
                continue
            relative = os.path.relpath(absolute, root).replace(os.sep, "/")
            entries.append((absolute, f"{root_name}/{relative}" if include_root else relative))
    return entries


def zip_folder(folder_path: str, zip_path: str, include_root: bool = True) -> None:
    """Archive the folder tree at ``folder_path`` into ``zip_path``."""
    if not os.path.isdir(folder_path):
        raise NotFoundError("Zip", folder_path, "the folder to archive does not exist", zip_path)
    zip_real_path = os.path.realpath(zip_path)
    entries = [
        (absolute, name)
        for absolute, name in iter_folder_entries(folder_path, include_root)
        if absolute != zip_real_path
    ]
    with zipfile.ZipFile(zip_path, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for absolute, name in entries:
            archive.write(absolute, name)
    logger.debug("zipped folder %s -> %s (%d files)", folder_path, zip_path, len(entries))


def unzip(zip_path: str, destination: str) -> None:
    """Extract every entry of ``zip_path`` into ``destination``."""
    try:
        archive = zipfile.ZipFile(zip_path)
    except (OSError, zipfile.BadZipFile) as exc:
        raise NotAZipArchiveError("Unzip", zip_path, "the file is not a valid zip archive") from exc
    with archive:
        archive.extractall(destination)
    logger.debug("unzipped %s -> %s", zip_path, destination)


__all__ = [
    "is_zip_archive",
    "zip_file",
    "iter_folder_entries",
    "zip_folder",
    "unzip",
]
