from __future__ import annotations

import re

from sheetkeeper.errors import InvalidArgumentError

MAX_COLUMN = 18_277
_COLUMN_LABEL_PATTERN = re.compile(r"^[A-Za-z]{1,3}$")


def to_column_label(column: int) -> str:
    """Convert a 1-based column index to its spreadsheet label (A, Z, AA, ...).

    Column labels are bijective base-26 numerals: there is no zero digit,
    so the successor of ``Z`` is ``AA``.

    Args:
        column: 1-based column index, at most ``MAX_COLUMN``.

    Returns:
        Column label in upper case.

    Raises:
        InvalidArgumentError: If the column is not an integer in range.
    """
    if isinstance(column, bool) or not isinstance(column, int):
        raise InvalidArgumentError(f"Column {column!r} is not a valid integer.")
    if column < 1 or column > MAX_COLUMN:
        raise InvalidArgumentError(
            f"Column {column} is out of range (1-{MAX_COLUMN})."
        )
    letters: list[str] = []
    remainder = column
    while remainder > 0:
        digit = (remainder - 1) % 26
        remainder = (remainder - 1 - digit) // 26
        letters.insert(0, chr(ord("A") + digit))
    return "".join(letters)


def column_label_to_index(label: str) -> int:
    """Convert a spreadsheet column label (A/AA) to its 1-based index."""
    normalized = label.strip().upper()
    if not _COLUMN_LABEL_PATTERN.match(normalized):
        raise InvalidArgumentError(f"Invalid column label: {label}")
    index = 0
    for char in normalized:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def format_cell(row_index: int, column_index: int) -> str:
    """Format zero-based row/column indices as an A1 cell address."""
    return f"{to_column_label(column_index + 1)}{row_index + 1}"
