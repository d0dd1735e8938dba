from __future__ import annotations

from .models import DocumentSnapshot, Sheet

SheetPair = tuple[Sheet | None, Sheet | None]


def pair_sheets(source: DocumentSnapshot, backup: DocumentSnapshot) -> list[SheetPair]:
    """Pair up sheets from two snapshots by name.

    Names are visited in ordinal order. At least one side of every pair is
    present.
    """
    source_map = source.sheet_map()
    backup_map = backup.sheet_map()
    names = sorted(source_map.keys() | backup_map.keys())
    return [(source_map.get(name), backup_map.get(name)) for name in names]
