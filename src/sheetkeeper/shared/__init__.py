from __future__ import annotations

from .a1 import MAX_COLUMN, column_label_to_index, format_cell, to_column_label

__all__ = [
    "MAX_COLUMN",
    "column_label_to_index",
    "format_cell",
    "to_column_label",
]
