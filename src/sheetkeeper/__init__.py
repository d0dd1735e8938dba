"""sheetkeeper: compare workbook snapshots and keep dated backups."""

from __future__ import annotations

from .diff import (
    ChangeRecord,
    ComparisonReport,
    DocumentSnapshot,
    ImageRef,
    ResourceRef,
    Sheet,
    compile_report,
    format_report,
)
from .errors import (
    EmptyFolderError,
    InvalidArgumentError,
    ResourceUnavailableError,
    SheetkeeperError,
)
from .shared import to_column_label

__version__ = "0.1.0"

__all__ = [
    "ChangeRecord",
    "ComparisonReport",
    "DocumentSnapshot",
    "EmptyFolderError",
    "ImageRef",
    "InvalidArgumentError",
    "ResourceRef",
    "ResourceUnavailableError",
    "Sheet",
    "SheetkeeperError",
    "__version__",
    "compile_report",
    "format_report",
    "to_column_label",
]
