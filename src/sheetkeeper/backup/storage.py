from __future__ import annotations

from datetime import date
import logging
from pathlib import Path
import shutil

from sheetkeeper.errors import EmptyFolderError, ResourceUnavailableError

logger = logging.getLogger(__name__)

WORKBOOK_SUFFIX = ".xlsx"


def resolve_backup_folder(folder: Path) -> Path:
    """Return the resolved backups folder or raise if it cannot be used."""
    resolved = folder.resolve()
    if not resolved.is_dir():
        raise ResourceUnavailableError("Backups folder", resolved)
    return resolved


def resolve_source_workbook(path: Path) -> Path:
    """Return the resolved source workbook path or raise if it is missing."""
    resolved = path.resolve()
    if not resolved.is_file():
        raise ResourceUnavailableError("Spreadsheet", resolved)
    return resolved


def formatted_date_stamp(day: date) -> str:
    """Return ``YYYY-MM-DD``; stamps sort lexically in date order."""
    return day.strftime("%Y-%m-%d")


def backup_base_name(prefix: str, day: date) -> str:
    """Return the base backup name for a given day."""
    return f"{prefix}_{formatted_date_stamp(day)}"


def list_workbooks(folder: Path) -> list[Path]:
    """Return the workbook files directly inside a folder."""
    return sorted(
        path
        for path in folder.iterdir()
        if path.is_file() and path.suffix.lower() == WORKBOOK_SUFFIX
    )


def newest_workbook(folder: Path) -> Path:
    """Return the most recently written workbook in a folder.

    Raises:
        EmptyFolderError: If the folder holds no workbook.
    """
    workbooks = list_workbooks(folder)
    if not workbooks:
        raise EmptyFolderError(folder)
    return max(workbooks, key=lambda path: path.stat().st_mtime)


def backup_exists(folder: Path, base_name: str) -> bool:
    """Return whether a workbook named exactly ``base_name`` exists."""
    return any(path.stem == base_name for path in list_workbooks(folder))


def next_available_path(folder: Path, base_name: str) -> Path:
    """Return the first free ``base_name``, ``base_name (1)``, ... path."""
    candidate = folder / f"{base_name}{WORKBOOK_SUFFIX}"
    if not candidate.exists():
        return candidate
    for idx in range(1, 10_000):
        candidate = folder / f"{base_name} ({idx}){WORKBOOK_SUFFIX}"
        if not candidate.exists():
            return candidate
    raise RuntimeError(f"Failed to resolve unique path for {base_name} in {folder}")


def copy_workbook(source: Path, folder: Path, base_name: str) -> Path:
    """Copy the source workbook into the folder under the next free name.

    The copy gets a fresh modification time so it becomes the newest backup.

    Returns:
        Path of the written backup.
    """
    target = next_available_path(folder, base_name)
    shutil.copyfile(source, target)
    logger.info("Copied %s to %s", source, target)
    return target
