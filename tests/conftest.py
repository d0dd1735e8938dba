from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
import pytest

from sheetkeeper.diff.models import DocumentSnapshot, ResourceRef, Sheet


def build_snapshot(
    name: str = "source", **sheets: Sequence[Sequence[Any]]
) -> DocumentSnapshot:
    """Build a snapshot whose sheets are given as keyword grids."""
    return DocumentSnapshot(
        resource=ResourceRef(name=name, id=f"id-{name}"),
        sheets=tuple(Sheet(name=title, grid=grid) for title, grid in sheets.items()),
    )


def write_workbook(path: Path, sheets: dict[str, Sequence[Sequence[Any]]]) -> Path:
    """Write an .xlsx file with one worksheet per entry, in insertion order."""
    wb = Workbook()
    default = wb.active
    for title, rows in sheets.items():
        ws = wb.create_sheet(title)
        for row in rows:
            ws.append(list(row))
    wb.remove(default)
    path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(path)
    return path


@pytest.fixture
def make_snapshot() -> Callable[..., DocumentSnapshot]:
    """Return the snapshot builder."""
    return build_snapshot


@pytest.fixture
def make_workbook() -> Callable[..., Path]:
    """Return the workbook writer."""
    return write_workbook
