from __future__ import annotations

from typing import Literal

ChangeKind = Literal[
    "sheet_added",
    "sheet_removed",
    "row_count",
    "column_count",
    "cell_changed",
]
