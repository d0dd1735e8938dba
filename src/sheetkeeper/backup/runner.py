from __future__ import annotations

from datetime import date
import logging
from pathlib import Path
import traceback

from pydantic import BaseModel

from sheetkeeper.core.workbook import load_snapshot
from sheetkeeper.diff import (
    ComparisonReport,
    DocumentSnapshot,
    ResourceRef,
    compile_report,
    format_report,
)
from sheetkeeper.errors import ResourceUnavailableError

from .config import BackupConfig
from .notify import send_email
from .storage import (
    backup_base_name,
    backup_exists,
    copy_workbook,
    newest_workbook,
    resolve_backup_folder,
    resolve_source_workbook,
)

logger = logging.getLogger(__name__)

STATUS_PROCEED = "Proceeding with back up."
STATUS_STOP = "Not proceeding with back up. Exiting script."
STATUS_SUCCESS = "Backup complete."


class BackupOutcome(BaseModel):
    """Result of one backup run."""

    report: ComparisonReport
    forced: bool = False
    backup_path: Path | None = None

    @property
    def skipped(self) -> bool:
        """Whether the run ended without writing a backup."""
        return self.backup_path is None


def success_subject(label: str) -> str:
    return f"[{label}] Backup complete"


def error_subject(label: str) -> str:
    return f"[{label}] Error when backing up {label}"


def run_backup(
    config: BackupConfig, *, force: bool = False, today: date | None = None
) -> BackupOutcome:
    """Compare the live workbook with the last backup and store a new one.

    A new backup is written unless one already exists for today; ``force``
    writes one regardless.

    Args:
        config: Backup configuration.
        force: Write a backup even if today's already exists.
        today: Day used for the backup name; defaults to the current date.

    Returns:
        Outcome holding the report and the written backup path, if any.
    """
    source_path = resolve_source_workbook(config.source_path)
    folder = resolve_backup_folder(config.backup_dir)
    base_name = backup_base_name(config.prefix, today or date.today())

    report = build_report(source_path, folder, base_name)
    rendered = format_report(report, forced=force)
    logger.info("%s", rendered)

    if not force and report.already_exists:
        logger.info(STATUS_STOP)
        return BackupOutcome(report=report, forced=force)

    logger.info(STATUS_PROCEED)
    backup_path = copy_workbook(source_path, folder, base_name)
    logger.info(STATUS_SUCCESS)

    if config.notify is not None:
        send_email(config.notify, success_subject(config.label), rendered)
    return BackupOutcome(report=report, forced=force, backup_path=backup_path)


def build_report(source_path: Path, folder: Path, base_name: str) -> ComparisonReport:
    """Load both snapshots and compile the comparison report."""
    comparison_path = newest_workbook(folder)
    source = _open_snapshot(source_path)
    comparison = _open_snapshot(comparison_path)
    return compile_report(
        source,
        comparison,
        backup_exists(folder, base_name),
        folder=ResourceRef(name=folder.name, id=str(folder)),
    )


def report_failure(config: BackupConfig, exc: BaseException) -> None:
    """Log a failed run and email the traceback when notifications are set.

    A failure to send the email is logged and never raised.
    """
    body = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    logger.error("%s", body)
    if config.notify is None:
        return
    try:
        send_email(config.notify, error_subject(config.label), body)
    except Exception:
        logger.exception(
            "Failed to send error notification to %s", config.notify.recipient
        )


def _open_snapshot(path: Path) -> DocumentSnapshot:
    """Load a snapshot, naming the workbook when it cannot be read."""
    try:
        return load_snapshot(path)
    except Exception as exc:
        raise ResourceUnavailableError("Spreadsheet", path) from exc
