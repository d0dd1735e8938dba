from __future__ import annotations

from .equality import values_equal
from .models import ChangeRecord, Grid


def compare_grids(sheet_name: str, source: Grid, backup: Grid) -> list[ChangeRecord]:
    """Collect every structural and cell difference between two grids.

    Args:
        sheet_name: Name of the sheet present on both sides.
        source: Cell grid from the live workbook.
        backup: Cell grid from the last backup.

    Returns:
        Row-count delta first (if any), then per row its column-count delta
        followed by changed cells in column order.
    """
    changes: list[ChangeRecord] = []
    row_delta = len(source) - len(backup)
    if row_delta != 0:
        changes.append(
            ChangeRecord(kind="row_count", sheet_name=sheet_name, delta=row_delta)
        )

    for row_index, (source_row, backup_row) in enumerate(zip(source, backup)):
        column_delta = len(source_row) - len(backup_row)
        if column_delta != 0:
            changes.append(
                ChangeRecord(
                    kind="column_count",
                    sheet_name=sheet_name,
                    row=row_index,
                    delta=column_delta,
                )
            )
        for column_index, (source_value, backup_value) in enumerate(
            zip(source_row, backup_row)
        ):
            if not values_equal(source_value, backup_value):
                changes.append(
                    ChangeRecord(
                        kind="cell_changed",
                        sheet_name=sheet_name,
                        row=row_index,
                        column=column_index,
                    )
                )
    return changes
