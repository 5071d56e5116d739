"""Human-readable size labels for listing rows."""

from __future__ import annotations

KILO = 1_000
MEGA = 1_000_000


def format_size(size_bytes: int) -> str:
    """Format ``size_bytes`` with decimal units, truncating toward zero.

    ``999 -> "999 B"``, ``1000 -> "1 kB"``, ``999999 -> "999 kB"``,
    ``1000000 -> "1 MB"``.
    """
    if size_bytes < 0:
        raise ValueError(f"size must be non-negative: {size_bytes}")
    if size_bytes < KILO:
        return f"{size_bytes} B"
    if size_bytes < MEGA:
        return f"{size_bytes // KILO} kB"
    return f"{size_bytes // MEGA} MB"
