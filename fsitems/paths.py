"""Pure string helpers for path parsing and joining.

Nothing here touches the filesystem. Separators default to the host's
``os.sep`` but every helper takes an explicit ``separator`` so behavior for
the other platform can be exercised from any host.
"""

from __future__ import annotations

import os
import re

_DRIVE_PREFIX_RE = re.compile(r"^[a-zA-Z]:")
_SEPARATORS = "/\\"
# whitespace, NUL and both separator styles
_CLEAN_CHARS = " \n\r\t\v\0" + _SEPARATORS


def is_absolute_path(path: str) -> bool:
    """Return whether ``path`` starts at a filesystem root or a drive letter.

    Leading whitespace is ignored. An empty string is treated as relative.
    """
    cleaned = path.lstrip()
    if not cleaned:
        return False
    return cleaned[0] == "/" or _DRIVE_PREFIX_RE.match(cleaned) is not None


def is_relative_path(path: str) -> bool:
    """Return the exact complement of :func:`is_absolute_path`."""
    return not is_absolute_path(path)


def normalize_separators(path: str, separator: str = os.sep) -> str:
    """Rewrite every foreign separator in ``path`` to ``separator``."""
    foreign = "\\" if separator == "/" else "/"
    return path.replace(foreign, separator)


def join_path(*parts: str | None, separator: str = os.sep) -> str:
    """Merge raw path fragments into one normalized path.

    The first fragment is the root part and is only right-trimmed, so a
    leading ``/`` survives. Every later fragment is trimmed on both sides of
    separators and whitespace. Fragments that end up empty (``None``, ``""``,
    a lone ``"/"``) contribute nothing.

    ``join_path("/path", "\\\\to\\\\", "\\\\file") == "/path/to/file"`` on a
    ``/`` host.
    """
    if not parts:
        return ""

    raw_root = parts[0] or ""
    root = normalize_separators(raw_root, separator).rstrip(_CLEAN_CHARS)
    rest: list[str] = []
    for part in parts[1:]:
        if not part:
            continue
        cleaned = normalize_separators(part, separator).strip(_CLEAN_CHARS)
        if cleaned:
            rest.append(cleaned)

    if not root and raw_root.strip().startswith(tuple(_SEPARATORS)):
        # the root part was the filesystem root itself
        return separator + separator.join(rest)
    return separator.join(part for part in (root, *rest) if part)


def path_parts(*parts: str | None, separator: str = os.sep) -> list[str]:
    """Split one or more path fragments into their ordered, non-empty segments."""
    joined = join_path(*parts, separator=separator)
    stripped = normalize_separators(joined, separator).strip(separator)
    if not stripped:
        return []
    return [segment for segment in stripped.split(separator) if segment]


def base_name(path: str, separator: str = os.sep) -> str:
    """Return the last segment of ``path``, ignoring trailing separators."""
    segments = path_parts(path, separator=separator)
    return segments[-1] if segments else ""


def parent_path(path: str, separator: str = os.sep) -> str:
    """Return ``path`` with its last segment removed.

    A path without any separator has an empty parent. The parent of a
    top-level absolute entry (``/etc``) is the root itself.
    """
    stripped = path.rstrip(separator)
    if not stripped:
        return path[:1]
    head, sep, _tail = stripped.rpartition(separator)
    if not sep:
        return ""
    trimmed = head.rstrip(separator)
    if trimmed:
        return trimmed
    return separator


__all__ = [
    "is_absolute_path",
    "is_relative_path",
    "normalize_separators",
    "join_path",
    "path_parts",
    "base_name",
    "parent_path",
]
