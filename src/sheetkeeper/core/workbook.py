from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
import hashlib
import logging
from pathlib import Path
from typing import Any
import warnings

from openpyxl import load_workbook
from openpyxl.utils.cell import coordinate_to_tuple

from sheetkeeper.diff.models import (
    CellValue,
    DocumentSnapshot,
    ImageRef,
    ResourceRef,
    Sheet,
)

logger = logging.getLogger(__name__)

CellCoordinate = tuple[int, int]


@contextmanager
def openpyxl_workbook(
    file_path: Path, *, data_only: bool, read_only: bool
) -> Iterator[Any]:
    """Open an openpyxl workbook and ensure it is closed.

    Args:
        file_path: Workbook path.
        data_only: Whether to read formula results.
        read_only: Whether to open in read-only mode. Pass False when
            embedded pictures are needed; read-only worksheets drop them.

    Yields:
        openpyxl workbook instance.
    """
    with warnings.catch_warnings():
        warnings.filterwarnings(
            "ignore",
            message="Unknown extension is not supported and will be removed",
            category=UserWarning,
            module="openpyxl",
        )
        warnings.filterwarnings(
            "ignore",
            message="Data Validation extension is not supported and will be removed",
            category=UserWarning,
            module="openpyxl",
        )
        wb = load_workbook(file_path, data_only=data_only, read_only=read_only)
    try:
        yield wb
    finally:
        try:
            wb.close()
        except Exception:
            pass


def load_snapshot(file_path: Path) -> DocumentSnapshot:
    """Read every worksheet of an ``.xlsx`` file into a snapshot.

    Each sheet's grid spans A1 to the last used row and column. Empty cells
    read as the empty string. A picture anchored on an otherwise empty cell
    becomes an ``ImageRef`` keyed by the digest of its bytes.

    Args:
        file_path: Workbook path.

    Returns:
        Immutable snapshot of the workbook.
    """
    resolved = file_path.resolve()
    # Pictures are only exposed by openpyxl outside read-only mode.
    with openpyxl_workbook(resolved, data_only=True, read_only=False) as wb:
        sheets = tuple(_read_sheet(ws) for ws in wb.worksheets)
    logger.debug("Loaded %d sheet(s) from %s", len(sheets), resolved)
    return DocumentSnapshot(
        resource=ResourceRef(name=resolved.stem, id=str(resolved)),
        sheets=sheets,
    )


def _read_sheet(ws: Any) -> Sheet:
    """Convert one openpyxl worksheet into a sheet snapshot."""
    rows: list[list[CellValue]] = [
        [_normalize_value(value) for value in row]
        for row in ws.iter_rows(
            min_row=1,
            max_row=ws.max_row,
            min_col=1,
            max_col=ws.max_column,
            values_only=True,
        )
    ]
    for (row, col), url in _image_cells(ws).items():
        if row < len(rows) and col < len(rows[row]) and rows[row][col] == "":
            rows[row][col] = ImageRef(url=url)
    return Sheet(name=ws.title, grid=tuple(tuple(row) for row in rows))


def _normalize_value(value: object) -> CellValue:
    """Map openpyxl's empty cell to the empty string."""
    if value is None:
        return ""
    return value  # type: ignore[return-value]


def _image_cells(ws: Any) -> dict[CellCoordinate, str]:
    """Return zero-based anchor cells of embedded pictures with their URLs."""
    cells: dict[CellCoordinate, str] = {}
    for image in getattr(ws, "_images", []):
        coordinate = _anchor_cell(image.anchor)
        if coordinate is None:
            continue
        digest = hashlib.sha256(image._data()).hexdigest()
        cells.setdefault(coordinate, f"sha256:{digest}")
    return cells


def _anchor_cell(anchor: object) -> CellCoordinate | None:
    """Resolve an image anchor to a zero-based (row, col) pair."""
    if isinstance(anchor, str):
        row, col = coordinate_to_tuple(anchor)
        return row - 1, col - 1
    marker = getattr(anchor, "_from", None)
    if marker is None:
        return None
    return int(marker.row), int(marker.col)
