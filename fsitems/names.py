"""Base-name parsing with support for compound extensions like ``tar.gz``."""

from __future__ import annotations


def extension(base_name: str, max_extension_parts: int = 1) -> str:
    """Return the extension of ``base_name`` without the leading dot.

    At most ``max_extension_parts`` dot-separated suffixes are taken, and
    never the first segment: ``("file.tar.gz", 2) -> "tar.gz"``,
    ``("file.tar.gz", 1) -> "gz"``, ``("a.b.c", 10) -> "b.c"``.
    Names without a dot, or ``max_extension_parts <= 0``, have no extension.
    """
    segments = base_name.split(".")
    part_count = min(max_extension_parts, len(segments) - 1)
    if part_count <= 0:
        return ""
    return ".".join(segments[-part_count:])


def name_without_extension(base_name: str, max_extension_parts: int = 1) -> str:
    """Return ``base_name`` with :func:`extension` and its dot stripped."""
    suffix = extension(base_name, max_extension_parts)
    if not suffix:
        return base_name
    return base_name[: -len(suffix) - 1]


__all__ = [
    "extension",
    "name_without_extension",
]
