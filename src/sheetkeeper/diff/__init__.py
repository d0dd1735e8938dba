"""Snapshot comparison engine."""

from __future__ import annotations

from .equality import values_equal
from .grid import compare_grids
from .models import (
    CellValue,
    ChangeRecord,
    ComparisonReport,
    DocumentSnapshot,
    Grid,
    ImageRef,
    ResourceRef,
    Sheet,
)
from .pairing import SheetPair, pair_sheets
from .report import compile_report, format_report

__all__ = [
    "CellValue",
    "ChangeRecord",
    "ComparisonReport",
    "DocumentSnapshot",
    "Grid",
    "ImageRef",
    "ResourceRef",
    "Sheet",
    "SheetPair",
    "compare_grids",
    "compile_report",
    "format_report",
    "pair_sheets",
    "values_equal",
]
