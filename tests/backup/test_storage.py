from __future__ import annotations

from datetime import date
import os
from pathlib import Path

import pytest

from sheetkeeper.backup.storage import (
    backup_base_name,
    backup_exists,
    copy_workbook,
    formatted_date_stamp,
    newest_workbook,
    next_available_path,
    resolve_backup_folder,
    resolve_source_workbook,
)
from sheetkeeper.errors import EmptyFolderError, ResourceUnavailableError


def _touch(path: Path, mtime: float) -> Path:
    path.write_bytes(b"x")
    os.utime(path, (mtime, mtime))
    return path


def test_date_stamp_is_zero_padded() -> None:
    assert formatted_date_stamp(date(2024, 3, 7)) == "2024-03-07"
    assert backup_base_name("tracker", date(2024, 11, 20)) == "tracker_2024-11-20"


def test_newest_workbook_uses_modification_time(tmp_path: Path) -> None:
    _touch(tmp_path / "tracker_2024-01-02.xlsx", 2_000)
    newest = _touch(tmp_path / "tracker_2024-01-01.xlsx", 3_000)
    _touch(tmp_path / "notes.txt", 9_000)
    assert newest_workbook(tmp_path) == newest


def test_newest_workbook_rejects_empty_folder(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("x", encoding="utf-8")
    with pytest.raises(EmptyFolderError, match="is empty"):
        newest_workbook(tmp_path)


def test_backup_exists_matches_exact_stem(tmp_path: Path) -> None:
    _touch(tmp_path / "tracker_2024-01-01 (1).xlsx", 1_000)
    assert backup_exists(tmp_path, "tracker_2024-01-01") is False
    _touch(tmp_path / "tracker_2024-01-01.xlsx", 1_000)
    assert backup_exists(tmp_path, "tracker_2024-01-01") is True


def test_next_available_path_appends_counter(tmp_path: Path) -> None:
    assert next_available_path(tmp_path, "t").name == "t.xlsx"
    _touch(tmp_path / "t.xlsx", 1_000)
    assert next_available_path(tmp_path, "t").name == "t (1).xlsx"
    _touch(tmp_path / "t (1).xlsx", 1_000)
    assert next_available_path(tmp_path, "t").name == "t (2).xlsx"


def test_copy_workbook_becomes_newest(tmp_path: Path) -> None:
    folder = tmp_path / "backups"
    folder.mkdir()
    _touch(folder / "tracker_2024-01-01.xlsx", 1_000)
    source = _touch(tmp_path / "live.xlsx", 500)
    target = copy_workbook(source, folder, "tracker_2024-01-01")
    assert target.name == "tracker_2024-01-01 (1).xlsx"
    assert newest_workbook(folder) == target


def test_resolve_resources(tmp_path: Path) -> None:
    with pytest.raises(ResourceUnavailableError, match="Backups folder"):
        resolve_backup_folder(tmp_path / "missing")
    with pytest.raises(ResourceUnavailableError, match="Spreadsheet"):
        resolve_source_workbook(tmp_path / "missing.xlsx")
    assert resolve_backup_folder(tmp_path) == tmp_path.resolve()
