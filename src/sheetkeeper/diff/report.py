from __future__ import annotations

from ..errors import InvalidArgumentError
from .grid import compare_grids
from .models import ChangeRecord, ComparisonReport, DocumentSnapshot, ResourceRef
from .pairing import pair_sheets


def compile_report(
    source: DocumentSnapshot | None,
    backup: DocumentSnapshot | None,
    already_exists: bool,
    *,
    folder: ResourceRef | None = None,
) -> ComparisonReport:
    """Compare a source snapshot against the last backup.

    Args:
        source: Snapshot of the live workbook.
        backup: Snapshot of the most recent backup.
        already_exists: Whether a backup for today is already stored. Taken
            verbatim; it is never derived from the detected changes.
        folder: Optional backups folder shown in the rendered report.

    Returns:
        Report listing every detected change.

    Raises:
        InvalidArgumentError: If either snapshot is missing.
    """
    if source is None or backup is None:
        raise InvalidArgumentError("Both source and backup snapshots are required.")

    changes: list[ChangeRecord] = []
    for source_sheet, backup_sheet in pair_sheets(source, backup):
        if source_sheet is not None and backup_sheet is not None:
            changes.extend(
                compare_grids(source_sheet.name, source_sheet.grid, backup_sheet.grid)
            )
        elif source_sheet is not None:
            changes.append(
                ChangeRecord(kind="sheet_added", sheet_name=source_sheet.name)
            )
        elif backup_sheet is not None:
            changes.append(
                ChangeRecord(kind="sheet_removed", sheet_name=backup_sheet.name)
            )

    return ComparisonReport(
        source=source.resource,
        comparison=backup.resource,
        folder=folder,
        changes=tuple(changes),
        already_exists=already_exists,
    )


def format_report(report: ComparisonReport, *, forced: bool) -> str:
    """Render a report as the multi-line text used in logs and emails."""
    lines = ["Backup info:"]
    if report.folder is not None:
        lines.append(f"Backups folder: {_describe(report.folder)}")
    lines.extend(
        [
            f"Source spreadsheet: {_describe(report.source)}",
            f"Comparison spreadsheet: {_describe(report.comparison)}",
            "",
            f"Backup already exists? {_to_word(report.already_exists)}.",
            f"Changes since last backup? {_to_word(report.change_needed)}.",
            f"Backup forced? {_to_word(forced)}.",
            "",
            "Changes detected:",
        ]
    )
    change_lines = report.change_lines()
    if change_lines:
        lines.extend(f"- {line}" for line in change_lines)
    else:
        lines.append("None.")
    return "\n".join(lines)


def _describe(resource: ResourceRef) -> str:
    return f'"{resource.name}" (ID {resource.id})'


def _to_word(flag: bool) -> str:
    return "Yes" if flag else "No"
