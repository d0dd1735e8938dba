from __future__ import annotations

from datetime import datetime, timezone

from .models import CellValue, ImageRef


def values_equal(a: CellValue, b: CellValue) -> bool:
    """Return whether two cell values are the same.

    Instants compare by the absolute point in time they denote; naive
    datetimes are read as UTC. Images compare by URL. Everything else uses
    strict equality without coercion, so ``"1" != 1`` and ``True != 1``.
    """
    if isinstance(a, datetime) and isinstance(b, datetime):
        return _as_instant(a) == _as_instant(b)
    if isinstance(a, ImageRef) and isinstance(b, ImageRef):
        return a.url == b.url
    if _kind(a) != _kind(b):
        return False
    return a == b


def _as_instant(value: datetime) -> datetime:
    """Attach UTC to naive datetimes so every instant is comparable."""
    if value.tzinfo is None or value.utcoffset() is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _kind(value: object) -> type:
    """Return the comparison kind; ints and floats share the number kind."""
    if isinstance(value, bool):
        return bool
    if isinstance(value, int | float):
        return float
    return type(value)
