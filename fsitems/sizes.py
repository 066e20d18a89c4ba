"""Human-readable byte sizes using binary (1024) scaling."""

from __future__ import annotations

SIZE_UNITS = ("KB", "MB", "GB", "TB")
SIZE_STEP = 1024


def _format_amount(value: float) -> str:
    """Round to two decimals and drop trailing zeros (``1.50`` -> ``1.5``)."""
    text = f"{round(value, 2):.2f}"
    return text.rstrip("0").rstrip(".")


def human_readable_size(size: int) -> str:
    """Format ``size`` bytes in the smallest unit whose value is below 1024.

    Bytes are printed as an integer. Sizes that are still 1024 or more at the
    GB tier are reported in TB.
    """
    if size < SIZE_STEP:
        return f"{size} B"

    value = float(size)
    for unit in SIZE_UNITS[:-1]:
        value /= SIZE_STEP
        if value < SIZE_STEP:
            return f"{_format_amount(value)} {unit}"
    value /= SIZE_STEP
    return f"{_format_amount(value)} {SIZE_UNITS[-1]}"


__all__ = [
    "SIZE_UNITS",
    "human_readable_size",
]
