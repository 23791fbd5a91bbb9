from __future__ import annotations

"""Human-readable byte sizes with binary (1024-based) units."""

_UNITS = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_size(size: int | float) -> str:
    """Render *size* bytes as e.g. '512.00B', '1.50KB' or '3.00GB'."""
    value = float(size)
    unit = "B"
    for candidate in _UNITS:
        if abs(value) < 1024.0:
            break
        value /= 1024.0
        unit = candidate
    return f"{value:.2f}{unit}"
