from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import TypeAlias, cast

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    computed_field,
    field_validator,
    model_validator,
)

from ..shared.a1 import format_cell
from .types import ChangeKind


class ImageRef(BaseModel):
    """Picture placed in a cell, identified by a resolvable URL."""

    model_config = ConfigDict(frozen=True)

    url: str


CellValue: TypeAlias = (
    bool | int | float | datetime | date | time | timedelta | ImageRef | str
)
Row: TypeAlias = tuple[CellValue, ...]
Grid: TypeAlias = tuple[Row, ...]


class ResourceRef(BaseModel):
    """Name and identifier of a workbook or folder shown in reports."""

    model_config = ConfigDict(frozen=True)

    name: str
    id: str  # noqa: A003


class Sheet(BaseModel):
    """One named sheet and its cell grid."""

    model_config = ConfigDict(frozen=True)

    name: str
    grid: Grid = Field(default_factory=tuple)


class DocumentSnapshot(BaseModel):
    """Immutable view of a workbook's sheets at one point in time."""

    model_config = ConfigDict(frozen=True)

    resource: ResourceRef
    sheets: tuple[Sheet, ...] = Field(default_factory=tuple)

    @field_validator("sheets")
    @classmethod
    def _unique_names(cls, value: tuple[Sheet, ...]) -> tuple[Sheet, ...]:
        seen: set[str] = set()
        for sheet in value:
            if sheet.name in seen:
                raise ValueError(f"Duplicate sheet name: {sheet.name}")
            seen.add(sheet.name)
        return value

    def sheet_map(self) -> dict[str, Sheet]:
        """Return sheets keyed by name."""
        return {sheet.name: sheet for sheet in self.sheets}


class ChangeRecord(BaseModel):
    """A single detected difference between a source and a backup."""

    model_config = ConfigDict(frozen=True)

    kind: ChangeKind
    sheet_name: str
    row: int | None = None
    column: int | None = None
    delta: int | None = None

    @model_validator(mode="after")
    def _check_fields_for_kind(self) -> ChangeRecord:
        if self.kind in ("row_count", "column_count") and not self.delta:
            raise ValueError(f"{self.kind} change requires a non-zero delta.")
        if self.kind in ("column_count", "cell_changed") and self.row is None:
            raise ValueError(f"{self.kind} change requires a row index.")
        if self.kind == "cell_changed" and self.column is None:
            raise ValueError("cell_changed change requires a column index.")
        return self

    def describe(self) -> str:
        """Render the change as one human-readable line."""
        if self.kind == "sheet_added":
            return f"Sheet {self.sheet_name} added since last backup"
        if self.kind == "sheet_removed":
            return f"Sheet {self.sheet_name} deleted from source spreadsheet"
        if self.kind == "row_count":
            return f"{_count_phrase(self.delta, 'row')} sheet {self.sheet_name}"
        row = cast(int, self.row)
        if self.kind == "column_count":
            return (
                f"{_count_phrase(self.delta, 'column')} row {row + 1} "
                f"in sheet {self.sheet_name}"
            )
        cell = format_cell(row, cast(int, self.column))
        return f"Values changed for cell {cell} in sheet {self.sheet_name}"


class ComparisonReport(BaseModel):
    """Outcome of comparing a source snapshot with the last backup.

    ``already_exists`` has no relation to ``change_needed``: a backup can
    exist for the day and still be out of date after later edits.
    """

    model_config = ConfigDict(frozen=True)

    source: ResourceRef
    comparison: ResourceRef
    folder: ResourceRef | None = None
    changes: tuple[ChangeRecord, ...] = Field(default_factory=tuple)
    already_exists: bool = False

    @computed_field  # type: ignore[prop-decorator]
    @property
    def change_needed(self) -> bool:
        """Whether any difference was detected."""
        return len(self.changes) > 0

    def change_lines(self) -> list[str]:
        """Return every change rendered as text, in report order."""
        return [change.describe() for change in self.changes]


def _count_phrase(delta: int | None, noun: str) -> str:
    """Build '<n> noun(s) added to' / '<n> noun(s) deleted from'."""
    amount = delta or 0
    if amount > 0:
        return f"{amount} {noun}(s) added to"
    return f"{-amount} {noun}(s) deleted from"
